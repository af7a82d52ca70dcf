"""
Base player interface - an input source for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for player logic.

    A player looks at the latest snapshot and returns the direction it wants
    the snake to take next, or None to keep the current heading.
    """

    def get_move(self, snapshot: GameSnapshot) -> Optional[Direction]:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of Direction.UP/DOWN/LEFT/RIGHT, or None
        """
        raise NotImplementedError
