"""
Game constants for the snake simulation core.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """
    Movement directions in screen coordinates (y grows downward).
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit vector (dx, dy) for this direction."""
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_str(cls, raw: str) -> "Direction":
        value = str(raw).strip().upper()
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(f"invalid direction: {raw!r}") from e


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Board settings
DEFAULT_BOARD_SIZE = 20
DEFAULT_INITIAL_BODY = ((8, 8), (7, 8), (6, 8))
DEFAULT_INITIAL_DIRECTION = RIGHT

# Speed settings: interval = BASE_INTERVAL_MS - level * INTERVAL_STEP_MS
MIN_SPEED_LEVEL = 1
MAX_SPEED_LEVEL = 5
DEFAULT_SPEED_LEVEL = 3
BASE_INTERVAL_MS = 250
INTERVAL_STEP_MS = 40

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"
