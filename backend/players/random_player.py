"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.direction_policy import is_reversal
from domain.game_state import GameSnapshot
from domain.snake import compute_next_head
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, self-collisions and
    reversing into its own neck.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        size = snapshot.board_size
        body = snapshot.body

        # Filter out moves that:
        # 1. Reverse the committed direction (the engine would ignore them)
        # 2. Hit walls
        # 3. Hit own body (the tail counts, it is judged before it moves)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if is_reversal(snapshot.direction, move):
                continue

            new_x, new_y = compute_next_head(body, move)
            if new_x < 0 or new_x >= size or new_y < 0 or new_y >= size:
                continue

            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return snapshot.direction

        return self.rng.choice(valid_moves)
