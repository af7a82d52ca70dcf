"""
Grid entity - the fixed-size square board the snake moves on.
"""

from typing import Tuple

from .constants import DEFAULT_BOARD_SIZE


class Grid:
    """
    Square coordinate space of `size` x `size` cells.

    The size is fixed at construction and exposed read-only.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def area(self) -> int:
        return self._size * self._size

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self._size and 0 <= y < self._size

    def __repr__(self):
        return f"<Grid size={self._size}>"
