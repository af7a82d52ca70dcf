"""
Direction policy - forbids reversing into the snake's own neck.

A request is judged against the *committed* direction (the one used by the
last executed tick), never against the pending one, so several key presses
between two ticks cannot be chained into a reversal.
"""

from typing import Tuple

from .constants import Direction


def is_reversal(committed: Direction, requested: Direction) -> bool:
    """True if `requested` is the exact axis opposite of `committed`."""
    cx, cy = committed.vector
    rx, ry = requested.vector
    return (rx, ry) == (-cx, -cy)


def request_direction(
    committed: Direction,
    pending: Direction,
    requested: Direction
) -> Tuple[bool, Direction]:
    """
    Validate a direction change.

    Returns:
        (accepted, resulting pending direction). On rejection the pending
        direction is returned unchanged.
    """
    if is_reversal(committed, requested):
        return False, pending
    return True, requested
