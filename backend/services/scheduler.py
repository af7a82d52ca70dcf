"""
Tick schedulers handed to the GameEngine.

The engine never sleeps or spawns timers itself. It arms a scheduler with an
interval and a callback, and cancels it on pause, reset and game over. At most
one timer is armed at any time: arming replaces the previous timer.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Base class/interface for tick scheduling.
    """

    def __init__(self):
        self.interval_ms: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """Cancel any armed timer, then fire `callback` every `interval_ms`."""
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}.")
        self.cancel()
        self.interval_ms = interval_ms
        self._callback = callback
        logger.debug(f"Scheduler armed at {interval_ms} ms")

    def cancel(self) -> None:
        """Disarm synchronously; no tick fires after this returns."""
        if self._callback is not None:
            logger.debug("Scheduler cancelled")
        self._callback = None
        self.interval_ms = None


class ManualScheduler(TickScheduler):
    """
    Deterministic scheduler driven by explicit calls, for tests and replays.

    Attributes:
        elapsed_ms: time accumulated toward the next tick of the armed timer
        fired: total number of ticks delivered
        arm_count: how many times a timer was armed
        cancel_count: how many armed timers were cancelled
    """

    def __init__(self):
        super().__init__()
        self.elapsed_ms = 0
        self.fired = 0
        self.arm_count = 0
        self.cancel_count = 0

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> None:
        super().arm(interval_ms, callback)
        self.elapsed_ms = 0
        self.arm_count += 1

    def cancel(self) -> None:
        if self.armed:
            self.cancel_count += 1
        super().cancel()
        self.elapsed_ms = 0

    def fire(self) -> bool:
        """Deliver one tick immediately. Returns False if nothing is armed."""
        if self._callback is None:
            return False
        self.fired += 1
        self._callback()
        return True

    def advance(self, ms: int) -> int:
        """
        Let `ms` milliseconds pass, firing the armed callback at each elapsed
        interval. Returns the number of ticks fired.

        A callback that re-arms or cancels the timer takes effect immediately:
        the remaining time counts toward the new timer.
        """
        ticks = 0
        remaining = ms
        while self._callback is not None and self.interval_ms is not None:
            due_in = self.interval_ms - self.elapsed_ms
            if remaining < due_in:
                self.elapsed_ms += remaining
                break
            remaining -= due_in
            self.elapsed_ms = 0
            self.fire()
            ticks += 1
        return ticks


class LoopScheduler(TickScheduler):
    """
    Blocking scheduler that sleeps between ticks on the calling thread.

    `run()` returns once the timer is cancelled (pause, reset, game over) or
    `max_ticks` ticks have been delivered.
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        super().__init__()
        self._sleep = sleep

    def run(self, max_ticks: Optional[int] = None) -> int:
        ticks = 0
        while self._callback is not None and self.interval_ms is not None:
            if max_ticks is not None and ticks >= max_ticks:
                break
            self._sleep(self.interval_ms / 1000.0)
            callback = self._callback
            if callback is None:
                break
            callback()
            ticks += 1
        logger.debug(f"Scheduler loop stopped after {ticks} ticks")
        return ticks
