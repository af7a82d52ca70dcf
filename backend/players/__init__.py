"""
Player implementations for the snake game.

Players are input sources: they turn a snapshot into a direction request
that the engine validates and applies.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
