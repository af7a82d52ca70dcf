"""
GameState entities - the lifecycle status and an immutable snapshot of the
game at a point in time, as handed to render sinks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import Direction


class GameStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        body: snake segments, head first
        food: food position, or None once the board is full
        score: food eaten this game
        high_score: best score known to the engine
        status: lifecycle status
        direction: committed direction of the last executed tick
        board_size: width and height of the square board
        speed_level: current speed level
        tick_count: number of completed ticks since reset
        death_reason: 'wall', 'self' or 'board_full' once the game is over
    """

    body: Tuple[Tuple[int, int], ...]
    food: Optional[Tuple[int, int]]
    score: int
    high_score: int
    status: GameStatus
    direction: Direction
    board_size: int
    speed_level: int
    tick_count: int = 0
    death_reason: Optional[str] = None

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first since UP decreases y.
        """
        board = [['.' for _ in range(self.board_size)] for _ in range(self.board_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.body):
            if 0 <= x < self.board_size and 0 <= y < self.board_size:
                board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.board_size)))
        return "\n".join(result)

    def to_dict(self) -> dict:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "body": [list(cell) for cell in self.body],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "status": self.status.value,
            "direction": self.direction.value,
            "board_size": self.board_size,
            "speed_level": self.speed_level,
            "tick_count": self.tick_count,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot status={self.status.value}, tick={self.tick_count}, "
            f"food={self.food}, length={len(self.body)}, score={self.score}>"
        )
