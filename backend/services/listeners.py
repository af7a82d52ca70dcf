"""
Event sinks notified by the GameEngine.

Render sinks care about `on_snapshot`; audio sinks about `on_eat` and
`on_game_over`. The engine fires and forgets: it never waits on a sink and a
failing sink does not affect the game.
"""

import logging

from domain.game_state import GameSnapshot

logger = logging.getLogger(__name__)


class GameListener:
    """
    Base class for engine event sinks. Every hook is a no-op by default.
    """

    def on_snapshot(self, snapshot: GameSnapshot) -> None:
        """Called after every completed tick and every state transition."""

    def on_eat(self, snapshot: GameSnapshot) -> None:
        """Called when the snake eats food, after the new food is placed."""

    def on_game_over(
        self, score: int, is_new_high_score: bool, reason: str, won: bool = False
    ) -> None:
        """
        Called once when the game ends. `won` is set when the snake filled the
        whole board.
        """


class LoggingListener(GameListener):
    """
    Writes engine events to the log. Per-tick snapshots go to DEBUG.
    """

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def on_snapshot(self, snapshot: GameSnapshot) -> None:
        self.log.debug(f"{snapshot!r}")

    def on_eat(self, snapshot: GameSnapshot) -> None:
        self.log.info(f"Food eaten, score {snapshot.score}, next food at {snapshot.food}")

    def on_game_over(
        self, score: int, is_new_high_score: bool, reason: str, won: bool = False
    ) -> None:
        suffix = " (new high score)" if is_new_high_score else ""
        outcome = "Board cleared" if won else "Game over"
        self.log.info(f"{outcome} ({reason}) with score {score}{suffix}")


class RecordingListener(GameListener):
    """
    Keeps every event it receives, in order. Handy for replays and tests.
    """

    def __init__(self):
        self.snapshots = []
        self.eats = []
        self.game_overs = []

    def on_snapshot(self, snapshot: GameSnapshot) -> None:
        self.snapshots.append(snapshot)

    def on_eat(self, snapshot: GameSnapshot) -> None:
        self.eats.append(snapshot)

    def on_game_over(
        self, score: int, is_new_high_score: bool, reason: str, won: bool = False
    ) -> None:
        self.game_overs.append({
            "score": score,
            "is_new_high_score": is_new_high_score,
            "reason": reason,
            "won": won,
        })
