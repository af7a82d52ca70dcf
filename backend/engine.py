"""
GameEngine - the tick-driven state machine of the snake game.

The engine owns the snake, the food, the score and the lifecycle status
(idle -> running <-> paused -> game over). It does not keep time itself: a
TickScheduler is armed with `tick` as its callback and is cancelled
synchronously on pause, reset and game over, so no stray tick can touch a
finished or reset game.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple, Union

from config import EngineConfig
from domain.constants import Direction, DEATH_WALL, DEATH_SELF, DEATH_BOARD_FULL
from domain.direction_policy import request_direction
from domain.food import place_food
from domain.game_state import GameStatus, GameSnapshot
from domain.grid import Grid
from domain.snake import Snake
from domain.speed import level_to_interval_ms, validate_level
from services.high_score_store import HighScoreStore
from services.listeners import GameListener
from services.scheduler import TickScheduler, LoopScheduler

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Manages:
      - Board (square grid)
      - Snake body and food
      - Pending / committed direction
      - Score and high score
      - Status and tick cadence

    Attributes:
        snake: the Snake, replaced wholesale on every committed move
        body: snake segments, head first
        food: current food position (None once the board is full)
        score: food eaten since the last reset
        high_score: best score, loaded once from the store
        status: current GameStatus
        pending_direction: latest accepted request, used by the next tick
        committed_direction: direction used by the last executed tick
        tick_count: ticks completed since the last reset
        death_reason: 'wall', 'self' or 'board_full' after game over
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        scheduler: Optional[TickScheduler] = None,
        high_score_store: Optional[HighScoreStore] = None,
        listeners: Optional[Iterable[GameListener]] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = (config or EngineConfig()).validate()
        self.grid = Grid(self.config.board_size)
        self.scheduler = scheduler or LoopScheduler()
        self.high_score_store = high_score_store
        self.listeners: List[GameListener] = list(listeners or [])
        self.rng = rng or random.Random()

        self.speed_level = self.config.speed_level
        self.high_score = self._load_high_score()

        self.snake = Snake(self.config.initial_body)
        self.food: Optional[Tuple[int, int]] = None
        self.score = 0
        self.status = GameStatus.IDLE
        self.pending_direction = self.config.initial_direction
        self.committed_direction = self.config.initial_direction
        self.tick_count = 0
        self.death_reason: Optional[str] = None

        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Restore the initial snake, food, score and direction, and go idle.
        Any armed timer is cancelled first.
        """
        self.scheduler.cancel()

        self.snake = Snake(self.config.initial_body)
        if self.config.initial_food is not None:
            self.food = self.config.initial_food
        else:
            self.food = place_food(self.body, self.grid, self.rng)
        self.score = 0
        self.pending_direction = self.config.initial_direction
        self.committed_direction = self.config.initial_direction
        self.tick_count = 0
        self.death_reason = None
        self.status = GameStatus.IDLE

        logger.info(f"Game reset: snake at {list(self.body)}, food at {self.food}")
        self._emit_snapshot()

    def start(self) -> bool:
        """
        Start ticking. A finished game is reset first; a paused game resumes.
        Returns False if the game was already running.
        """
        if self.status == GameStatus.RUNNING:
            return False
        if self.status == GameStatus.GAME_OVER:
            self.reset()

        self.status = GameStatus.RUNNING
        self._arm()
        logger.info(f"Game running at speed level {self.speed_level}")
        self._emit_snapshot()
        return True

    def pause(self) -> bool:
        if self.status != GameStatus.RUNNING:
            return False
        self.scheduler.cancel()
        self.status = GameStatus.PAUSED
        logger.info("Game paused")
        self._emit_snapshot()
        return True

    def resume(self) -> bool:
        if self.status != GameStatus.PAUSED:
            return False
        self.status = GameStatus.RUNNING
        self._arm()
        logger.info("Game resumed")
        self._emit_snapshot()
        return True

    def toggle_pause(self) -> bool:
        """
        Start/pause toggle as delivered by an input source: starts an idle or
        finished game, otherwise flips between running and paused.
        """
        if self.status == GameStatus.RUNNING:
            return self.pause()
        if self.status == GameStatus.PAUSED:
            return self.resume()
        return self.start()

    def game_over(self, reason: str) -> bool:
        """
        End the game: stop ticking, record a new high score and notify sinks.
        Only a running or paused game can end; returns False otherwise.
        """
        if self.status not in (GameStatus.RUNNING, GameStatus.PAUSED):
            return False

        self.scheduler.cancel()
        self.status = GameStatus.GAME_OVER
        self.death_reason = reason

        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score(self.score)

        is_new_high_score = self.score == self.high_score and self.score > 0
        logger.info(
            f"Game over after {self.tick_count} ticks: {reason}, "
            f"score {self.score}, high score {self.high_score}"
        )
        won = reason == DEATH_BOARD_FULL
        self._emit("on_game_over", self.score, is_new_high_score, reason, won)
        self._emit_snapshot()
        return True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, requested: Union[Direction, str]) -> bool:
        """
        Request a direction change for the next tick.

        Only honoured while running. A reversal of the committed direction is
        rejected and leaves the pending direction untouched.
        """
        if not isinstance(requested, Direction):
            requested = Direction.from_str(requested)
        if self.status != GameStatus.RUNNING:
            return False

        accepted, self.pending_direction = request_direction(
            self.committed_direction, self.pending_direction, requested
        )
        if not accepted:
            logger.debug(
                f"Rejected {requested.value}: reverses {self.committed_direction.value}"
            )
        return accepted

    def set_speed_level(self, level: int) -> None:
        """
        Change the speed level. While running the timer is re-armed at the new
        interval; no move is forced.
        """
        validate_level(level, self.config.min_speed_level, self.config.max_speed_level)
        self.speed_level = level
        if self.status == GameStatus.RUNNING:
            self._arm()
        logger.info(f"Speed level set to {level} ({self.interval_ms} ms)")

    @property
    def interval_ms(self) -> int:
        return level_to_interval_ms(
            self.speed_level, self.config.min_speed_level, self.config.max_speed_level
        )

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """
        Execute one step:
          1) Resolve the active direction
          2) Compute the candidate head
          3) End the game on a wall or self collision
          4) Move, growing if the food was eaten
          5) Score and place new food
          6) Commit the direction and notify sinks
        """
        if self.status != GameStatus.RUNNING:
            logger.debug(f"Ignoring tick while {self.status.value}")
            return

        direction = self.pending_direction or self.committed_direction
        candidate = self.snake.next_head(direction)

        if not self.grid.in_bounds(candidate):
            self.game_over(DEATH_WALL)
            return
        if self.snake.would_collide(candidate):
            self.game_over(DEATH_SELF)
            return

        ate_food = candidate == self.food
        self.snake = self.snake.advance(candidate, ate_food)
        self.tick_count += 1

        if ate_food:
            self.score += 1
            self.food = place_food(self.body, self.grid, self.rng)
            logger.debug(f"Tick {self.tick_count}: ate food, score {self.score}")
            self._emit("on_eat", self.snapshot())

        self.committed_direction = direction

        if self.food is None:
            self.game_over(DEATH_BOARD_FULL)
            return

        self._emit_snapshot()

    @property
    def body(self) -> Tuple[Tuple[int, int], ...]:
        return self.snake.positions

    def snapshot(self) -> GameSnapshot:
        """
        Return a snapshot of the current game as a GameSnapshot.
        """
        return GameSnapshot(
            body=self.body,
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            direction=self.committed_direction,
            board_size=self.grid.size,
            speed_level=self.speed_level,
            tick_count=self.tick_count,
            death_reason=self.death_reason,
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.snapshot().print_board() + "\n")

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def _arm(self) -> None:
        self.scheduler.arm(self.interval_ms, self.tick)

    def _load_high_score(self) -> int:
        if self.high_score_store is None:
            return 0
        try:
            return int(self.high_score_store.load_high_score() or 0)
        except Exception as e:
            logger.warning(f"Could not load high score, starting from 0: {e}")
            return 0

    def _save_high_score(self, score: int) -> None:
        if self.high_score_store is None:
            return
        try:
            self.high_score_store.save_high_score(score)
        except Exception as e:
            # Don't raise - the game ends the same whether or not the save worked
            logger.warning(f"Could not save high score {score}: {e}")

    def _emit_snapshot(self) -> None:
        if self.listeners:
            self._emit("on_snapshot", self.snapshot())

    def _emit(self, hook: str, *args) -> None:
        for listener in self.listeners:
            try:
                getattr(listener, hook)(*args)
            except Exception as e:
                logger.warning(f"Listener {listener.__class__.__name__}.{hook} failed: {e}")

    def __repr__(self):
        return (
            f"<GameEngine status={self.status.value}, tick={self.tick_count}, "
            f"score={self.score}, high_score={self.high_score}>"
        )
