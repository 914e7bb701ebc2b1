"""
replay.py — Step Replay Engine
================================
The ReplayEngine is the ONLY object that applies a step log to the live
state.  Generation is finished before it starts; from then on it walks
the log one step at a time.

State machine:
    IDLE / STOPPED  →  start(steps)  →  RUNNING
    RUNNING         →  pause()       →  PAUSED      (manual stepping)
    PAUSED          →  resume()      →  RUNNING
    RUNNING/PAUSED  →  stop()        →  STOPPED     (rest of the log dropped)
    RUNNING/PAUSED  →  (log exhausted) → IDLE       (completion effects)

Drivers, pick whichever suits the host:
    tick(now)        apply at most one step once the speed delay has elapsed
    step()           apply exactly one step, ignoring time
    run(sleep)       blocking loop, one sleep per step
    run_async()      asyncio loop, one `await asyncio.sleep` per step

Thread safety:
  Cancellation is a threading.Event checked at every step boundary, and
  applying a step holds a lock, so stop() from another thread waits for
  the step in flight and never sees it half-applied.

Scrubbing:
  A snapshot of the state is kept every CHECKPOINT_INTERVAL steps.
  seek(i) restores the nearest earlier snapshot and re-applies the steps
  after it, in order, so it works in both directions.
"""

import asyncio
import logging
import threading
import time
from enum import Enum
from typing import Callable, Dict, List, Optional

from algorithms.step import AnimationStep
from engine.effects import apply_step, cancel_run, clear_marks, finish_run

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class ReplayState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    PAUSED  = "paused"
    STOPPED = "stopped"


# ---------------------------------------------------------------------------
# Speed (1 = slow, 100 = fast) → delay in milliseconds
# ---------------------------------------------------------------------------
MIN_SPEED:           int = 1
MAX_SPEED:           int = 100
DEFAULT_SPEED:       int = 50
CHECKPOINT_INTERVAL: int = 50


def clamp_speed(speed) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def delay_for_speed(speed) -> int:
    """396 ms at speed 1, 4 ms less per unit, 1 ms at speed 100."""
    return max(1, 400 - 4 * clamp_speed(speed))


class ReplayBusyError(RuntimeError):
    """A replay is already in flight."""


# ---------------------------------------------------------------------------
# ReplayEngine
# ---------------------------------------------------------------------------
class ReplayEngine:
    """
    Attributes:
        state       : The VisualizerState being driven.
        status      : Current ReplayState.
        steps       : The log being replayed.
        position    : Index of the next step to apply.
        on_step     : Optional callback(step) fired after each applied step.
    """

    def __init__(
        self,
        state,
        clock: Callable[[], float] = time.monotonic,
        on_step: Optional[Callable[[AnimationStep], None]] = None,
    ):
        self.state                              = state
        self.status:   ReplayState              = ReplayState.IDLE
        self.steps:    List[AnimationStep]      = []
        self.position: int                      = 0
        self.on_step                            = on_step

        self._clock       = clock
        self._last_tick:  float                 = 0.0
        self._cancel      = threading.Event()
        self._lock        = threading.RLock()
        self._checkpoints: Dict[int, dict]      = {}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_live(self) -> bool:
        return self.status in (ReplayState.RUNNING, ReplayState.PAUSED)

    def start(self, steps: List[AnimationStep]) -> None:
        """Begin replaying `steps`.  Raises ReplayBusyError if a run is live."""
        with self._lock:
            if self.is_live:
                raise ReplayBusyError("a replay is already running")
            self.steps    = list(steps)
            self.position = 0
            self._cancel.clear()
            clear_marks(self.state)
            self.state.is_sorted    = False
            self.state.current_step = -1
            self._checkpoints = {0: self.state.capture()}

            if not self.steps:
                logger.info("Nothing to replay")
                self.status = ReplayState.IDLE
                self.state.notify()
                return

            self.status = ReplayState.RUNNING
            self.state.is_playing = True
            self._last_tick = self._clock()
            logger.info("Replay started: %d steps at speed %d", len(self.steps), self.state.speed)
            self.state.notify()

    def pause(self) -> None:
        with self._lock:
            if self.status is ReplayState.RUNNING:
                self.status = ReplayState.PAUSED
                logger.debug("Replay paused at step %d", self.position)

    def resume(self) -> None:
        with self._lock:
            if self.status is ReplayState.PAUSED:
                self.status = ReplayState.RUNNING
                self._last_tick = self._clock()
                logger.debug("Replay resumed at step %d", self.position)

    def stop(self) -> None:
        """Cancel: remaining steps are dropped, applied ones persist."""
        self._cancel.set()
        with self._lock:
            if not self.is_live:
                return
            logger.info("Replay stopped at step %d of %d", self.position, len(self.steps))
            self.status = ReplayState.STOPPED
            self.steps = []
            self._checkpoints = {}
            cancel_run(self.state)
            self.state.current_step = -1
            self.state.notify()

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------
    @property
    def delay_ms(self) -> int:
        return delay_for_speed(self.state.speed)

    def step(self) -> bool:
        """Apply exactly one step.  Returns True if a step was applied."""
        with self._lock:
            if not self.is_live or self._cancel.is_set():
                return False
            if self.position >= len(self.steps):
                self._complete()
                return False

            step = self.steps[self.position]
            apply_step(self.state, step)
            self.position += 1
            self.state.current_step = self.position - 1
            if self.position % CHECKPOINT_INTERVAL == 0:
                self._checkpoints.setdefault(self.position, self.state.capture())

            if self.on_step:
                self.on_step(step)
            self.state.notify()

            if self.position >= len(self.steps):
                self._complete()
            return True

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  While RUNNING and once the speed delay has
        elapsed since the last applied step, applies one step.
        """
        if self.status is not ReplayState.RUNNING:
            return False
        now = self._clock() if now is None else now
        if (now - self._last_tick) * 1000 < self.delay_ms:
            return False
        self._last_tick = now
        return self.step()

    def run(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Blocking loop until completion or stop()."""
        while self.is_live and not self._cancel.is_set():
            if self.status is ReplayState.RUNNING:
                self.step()
            sleep(self.delay_ms / 1000)

    async def run_async(self) -> None:
        while self.is_live and not self._cancel.is_set():
            if self.status is ReplayState.RUNNING:
                self.step()
            await asyncio.sleep(self.delay_ms / 1000)

    # ------------------------------------------------------------------
    # Scrubbing
    # ------------------------------------------------------------------
    def seek(self, index: int) -> bool:
        """
        Show the state right after step `index` (-1 = before the first).
        A running replay is paused first.  Returns False when there is no
        log to scrub or the index is out of range.
        """
        with self._lock:
            if not self.steps or not -1 <= index < len(self.steps):
                return False
            if self.status is ReplayState.RUNNING:
                self.status = ReplayState.PAUSED

            target = index + 1
            base = max(k for k in self._checkpoints if k <= target)
            self.state.restore(self._checkpoints[base])
            for pos in range(base, target):
                apply_step(self.state, self.steps[pos])
                if (pos + 1) % CHECKPOINT_INTERVAL == 0:
                    self._checkpoints.setdefault(pos + 1, self.state.capture())

            self.position = target
            if target < len(self.steps):
                self.state.is_sorted = False
            elif self.status is ReplayState.IDLE:
                finish_run(self.state)
            self.state.current_step = index
            self.state.notify()
            return True

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _complete(self) -> None:
        logger.info("Replay complete: %d steps", len(self.steps))
        self.status = ReplayState.IDLE
        finish_run(self.state)
        self.state.notify()
