"""
High score storage boundary.

The engine loads the high score once at construction and asks the store to
save it when a game ends with a new best. Where it ends up is the store's
concern.
"""

import logging

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Base class/interface for high score persistence.
    """

    def load_high_score(self) -> int:
        raise NotImplementedError

    def save_high_score(self, score: int) -> None:
        raise NotImplementedError


class InMemoryHighScoreStore(HighScoreStore):
    """
    Keeps the high score for the lifetime of the process.

    Attributes:
        high_score: last saved value
        saves: number of save requests received
    """

    def __init__(self, high_score: int = 0):
        self.high_score = high_score
        self.saves = 0

    def load_high_score(self) -> int:
        return self.high_score

    def save_high_score(self, score: int) -> None:
        self.high_score = score
        self.saves += 1
        logger.debug(f"Stored high score {score}")
