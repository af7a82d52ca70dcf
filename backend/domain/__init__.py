"""
Domain entities for the snake simulation core.

This module contains the core game entities that are independent of
scheduling, rendering and storage concerns.
"""

from .constants import (
    Direction,
    UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
    DEFAULT_BOARD_SIZE,
    DEFAULT_INITIAL_BODY,
    DEFAULT_INITIAL_DIRECTION,
)
from .grid import Grid
from .snake import Snake, compute_next_head, would_collide_with_self, commit_move
from .food import place_food
from .direction_policy import is_reversal, request_direction
from .speed import level_to_interval_ms
from .game_state import GameStatus, GameSnapshot

__all__ = [
    'Direction',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_BOARD_SIZE', 'DEFAULT_INITIAL_BODY', 'DEFAULT_INITIAL_DIRECTION',
    'Grid',
    'Snake', 'compute_next_head', 'would_collide_with_self', 'commit_move',
    'place_food',
    'is_reversal', 'request_direction',
    'level_to_interval_ms',
    'GameStatus', 'GameSnapshot',
]
