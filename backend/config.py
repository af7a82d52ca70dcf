"""
Engine configuration.

Everything the engine needs is passed in at construction time through an
EngineConfig. `load_config()` builds one from SNAKE_* environment variables
(a local .env file is honoured through python-dotenv).
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from domain.constants import (
    Direction,
    DEFAULT_BOARD_SIZE,
    DEFAULT_INITIAL_BODY,
    DEFAULT_INITIAL_DIRECTION,
    DEFAULT_SPEED_LEVEL,
    MIN_SPEED_LEVEL,
    MAX_SPEED_LEVEL,
)
from domain.grid import Grid
from domain.speed import validate_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class EngineConfig:
    board_size: int = DEFAULT_BOARD_SIZE
    initial_body: Tuple[Tuple[int, int], ...] = field(
        default_factory=lambda: DEFAULT_INITIAL_BODY
    )
    initial_direction: Direction = DEFAULT_INITIAL_DIRECTION
    # None places the first food on a random free cell
    initial_food: Optional[Tuple[int, int]] = None
    speed_level: int = DEFAULT_SPEED_LEVEL
    min_speed_level: int = MIN_SPEED_LEVEL
    max_speed_level: int = MAX_SPEED_LEVEL

    def __post_init__(self):
        self.initial_body = tuple(tuple(cell) for cell in self.initial_body)
        if self.initial_food is not None:
            self.initial_food = tuple(self.initial_food)
        if not isinstance(self.initial_direction, Direction):
            self.initial_direction = Direction.from_str(self.initial_direction)

    def validate(self) -> "EngineConfig":
        """
        Check the configuration for consistency.

        Raises:
            ValueError: on an empty, out-of-bounds or self-overlapping initial
                body, a misplaced initial food, or a bad speed level range.
        """
        grid = Grid(self.board_size)

        if not self.initial_body:
            raise ValueError("Initial snake body must have at least one segment.")
        for cell in self.initial_body:
            if not grid.in_bounds(cell):
                raise ValueError(f"Initial snake segment out of bounds at {cell}.")
        if len(set(self.initial_body)) != len(self.initial_body):
            raise ValueError("Initial snake body overlaps itself.")

        if self.initial_food is not None:
            if not grid.in_bounds(self.initial_food):
                raise ValueError(f"Initial food out of bounds at {self.initial_food}.")
            if self.initial_food in self.initial_body:
                raise ValueError(f"Initial food {self.initial_food} is on the snake.")

        if self.min_speed_level < 1 or self.min_speed_level > self.max_speed_level:
            raise ValueError(
                f"Invalid speed level range [{self.min_speed_level}..{self.max_speed_level}]."
            )
        validate_level(self.speed_level, self.min_speed_level, self.max_speed_level)
        return self


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_config(
    board_size: Optional[int] = None,
    speed_level: Optional[int] = None
) -> EngineConfig:
    """
    Build an EngineConfig from the environment.

    Explicit arguments win over SNAKE_BOARD_SIZE and SNAKE_SPEED_LEVEL. The
    initial body stays at its default unless it does not fit the final board,
    in which case it is centred on the board.
    """
    load_dotenv()

    if board_size is None:
        board_size = _int_env("SNAKE_BOARD_SIZE", DEFAULT_BOARD_SIZE)
    if speed_level is None:
        speed_level = _int_env("SNAKE_SPEED_LEVEL", DEFAULT_SPEED_LEVEL)
    if board_size < 1:
        raise ValueError(f"Board size must be positive, got {board_size}.")

    initial_body = DEFAULT_INITIAL_BODY
    if any(x >= board_size or y >= board_size for x, y in initial_body):
        mid = board_size // 2
        initial_body = tuple((mid - i, mid) for i in range(min(3, mid + 1)))
        logger.info(f"Default snake does not fit a {board_size}x{board_size} board, using {initial_body}")

    return EngineConfig(
        board_size=board_size,
        initial_body=initial_body,
        speed_level=speed_level,
    ).validate()


def get_log_level() -> str:
    load_dotenv()
    return (os.getenv("SNAKE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
