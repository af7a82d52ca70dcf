"""
Snake entity and the pure movement helpers the tick engine is built on.

Proposing a move (`compute_next_head`) is kept apart from judging it
(`Grid.in_bounds`, `would_collide_with_self`) and applying it (`commit_move`).
"""

from typing import Iterable, Sequence, Tuple

from .constants import Direction

Coordinate = Tuple[int, int]


def compute_next_head(body: Sequence[Coordinate], direction: Direction) -> Coordinate:
    """Return the head position one step in `direction`. No bounds or self checks."""
    hx, hy = body[0]
    dx, dy = direction.vector
    return (hx + dx, hy + dy)


def would_collide_with_self(body: Iterable[Coordinate], candidate: Coordinate) -> bool:
    """
    True if `candidate` lands on any segment of the pre-move body.

    The current tail counts even when it is about to be vacated.
    """
    return candidate in tuple(body)


def commit_move(
    body: Sequence[Coordinate],
    candidate: Coordinate,
    ate_food: bool
) -> Tuple[Coordinate, ...]:
    """
    Prepend `candidate` to the body. The tail is dropped unless food was eaten.
    """
    if ate_food:
        # grow: keep the tail
        return (candidate,) + tuple(body)
    # normal move: drop the tail
    return (candidate,) + tuple(body[:-1])


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: tuple of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Coordinate]):
        self.positions: Tuple[Coordinate, ...] = tuple(positions)
        if not self.positions:
            raise ValueError("Snake needs at least one segment.")

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        return self.positions[-1]

    def next_head(self, direction: Direction) -> Coordinate:
        return compute_next_head(self.positions, direction)

    def would_collide(self, candidate: Coordinate) -> bool:
        return would_collide_with_self(self.positions, candidate)

    def advance(self, candidate: Coordinate, ate_food: bool) -> "Snake":
        """Return a new Snake with the move applied."""
        return Snake(commit_move(self.positions, candidate, ate_food))

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __iter__(self):
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.positions)}>"
