"""
Speed mapping from a discrete level to the tick interval.
"""

from .constants import (
    MIN_SPEED_LEVEL,
    MAX_SPEED_LEVEL,
    BASE_INTERVAL_MS,
    INTERVAL_STEP_MS,
)


def validate_level(
    level: int,
    min_level: int = MIN_SPEED_LEVEL,
    max_level: int = MAX_SPEED_LEVEL
) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"Speed level must be an int, got {level!r}.")
    if not min_level <= level <= max_level:
        raise ValueError(
            f"Speed level {level} out of range [{min_level}..{max_level}]."
        )
    return level


def level_to_interval_ms(
    level: int,
    min_level: int = MIN_SPEED_LEVEL,
    max_level: int = MAX_SPEED_LEVEL
) -> int:
    """
    Map a speed level to a tick interval in milliseconds.

    Higher levels tick faster: levels 1..5 give 210, 170, 130, 90 and 50 ms.
    """
    validate_level(level, min_level, max_level)
    return BASE_INTERVAL_MS - level * INTERVAL_STEP_MS
