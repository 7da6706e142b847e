"""
stepper.py — Step-by-Step Playback Driver
==========================================
The Stepper owns the algorithm generator, keeps only the Step it pulled
last, and paces the run: after each non-final Step it sleeps the
current per-step delay before resuming the generator.

State machine:
    IDLE     →  start()                 →  RUNNING
    RUNNING  →  next_step() exhausted   →  FINISHED

`run()` is start() + next_step() in a loop with the sleep in between.
Tests and callers that want to advance by hand just call next_step().
Every Step goes to `on_step` as it is pulled; whoever needs history keeps
it there.

Thread safety:
  One Stepper is driven by ONE thread (the run's thread).  The only thing
  other threads may touch is the delay, through set_delay_ms(); it is read
  fresh before every sleep, so a change applies from the next step on.
"""

import time
from enum import Enum
from typing import Callable, Generator, Optional

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1000,   # teaching mode
    "medium": 500,    # sorting default
    "fast":   80,     # pathfinding default
    "turbo":  20,
}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state        : Current StepperState.
        current_step : Latest Step pulled (None before the first).
        delay_ms     : Milliseconds to wait after each non-final Step.
        on_step      : Optional callback(Step) fired for every Step pulled.
                       The recorder hooks in here.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
        delay_ms: int = SPEED_PRESETS["medium"],
    ):
        self._generator:   Optional[Generator[Step, None, None]] = None
        self.current_step: Optional[Step]             = None
        self.state:        StepperState               = StepperState.IDLE
        self.delay_ms:     int                        = max(0, int(delay_ms))
        self.on_step:      Optional[Callable[[Step], None]] = on_step
        self._sleep:       Callable[[float], None]    = sleep

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Generator[Step, None, None]) -> None:
        """Attach a fresh algorithm generator."""
        self._generator   = generator
        self.current_step = None
        self.state        = StepperState.RUNNING

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Pull one Step.  Returns False once the generator is exhausted."""
        if self.state is not StepperState.RUNNING:
            return False
        if not self._fetch_next():
            self.state = StepperState.FINISHED
            return False
        self._notify(self.current_step)
        return True

    def run(self, generator: Optional[Generator[Step, None, None]] = None) -> Optional[Step]:
        """Drive the generator to completion, sleeping between steps.  Returns the final Step."""
        if generator is not None:
            self.start(generator)
        while self.next_step():
            if not self.current_step.is_final and self.delay_ms > 0:
                self._sleep(self.delay_ms / 1000.0)
        return self.current_step

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_delay_ms(self, ms: int) -> None:
        self.delay_ms = max(0, int(ms))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one Step from the generator into current_step."""
        if self._generator is None:
            return False
        try:
            step = next(self._generator)
            self.current_step = step
            return True
        except StopIteration:
            return False

    def _notify(self, step: Step) -> None:
        if self.on_step:
            self.on_step(step)
