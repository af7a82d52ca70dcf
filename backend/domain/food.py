"""
Food placement - picks a random free cell for the next food item.
"""

import random
from typing import Iterable, Optional, Tuple

from .grid import Grid


def place_food(
    body: Iterable[Tuple[int, int]],
    grid: Grid,
    rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """
    Return a uniformly random cell not occupied by the snake.

    Samples until a free cell turns up. When the snake already covers every
    cell there is nothing to sample, so None is returned instead.

    Args:
        body: snake segments to avoid
        grid: board to place the food on
        rng: random source (defaults to the module-level generator)

    Returns:
        (x, y) of the new food, or None if the board is full
    """
    rng = rng or random
    occupied = set(body)
    if len(occupied) >= grid.area:
        return None

    while True:
        x = rng.randint(0, grid.size - 1)
        y = rng.randint(0, grid.size - 1)
        if (x, y) not in occupied:
            return (x, y)
