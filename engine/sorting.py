"""
sorting.py — Sorting Engine
============================
Facade the UI talks to for the sorting visualizer.

    engine = SortingEngine()
    engine.set_input([5, 2, 9, 1, 7])
    engine.start_sort("bubble", step_delay_ms=500)
    engine.bars       # latest snapshot
    engine.log        # newest first

Starting is gated: a start while a run is active, or with no input, is a
no-op that returns Outcome.IGNORED.
"""

import logging
import time
from typing import Callable, Iterable, Optional, Tuple

from algorithms import SORTING, require_algorithm
from algorithms.step import SortEmitter
from cells.bar import Bar, BarState, bars_from_values
from engine.base import BaseEngine
from engine.controller import Outcome, RunController


logger = logging.getLogger(__name__)

DEFAULT_SORT_DELAY_MS = 500


class SortingEngine(BaseEngine):

    def __init__(
        self,
        sleep: Callable[[float], None] = time.sleep,
        controller: Optional[RunController] = None,
    ):
        super().__init__(DEFAULT_SORT_DELAY_MS, sleep=sleep, controller=controller)

    @property
    def bars(self) -> Tuple[Bar, ...]:
        return self.store.current()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def set_input(self, values: Iterable[int]) -> Outcome:
        """Replace the bars with fresh DEFAULT ones; clears log and status."""
        if not self.controller.try_acquire():
            return self._ignored("set_input")
        try:
            self.store.replace(bars_from_values(values))
            self.store.clear_log()
            self.store.set_status("")
        finally:
            self.controller.release()
        return Outcome.OK

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def start_sort(
        self,
        algorithm: str,
        step_delay_ms: int = DEFAULT_SORT_DELAY_MS,
        blocking: bool = True,
    ) -> Outcome:
        """
        Sort the current bars with `algorithm` (a registry key).

        Raises ValueError for an unknown key.  Returns IGNORED when a run
        is active or there is nothing to sort.
        """
        info = require_algorithm(algorithm, SORTING)
        if not self.controller.try_acquire():
            return self._ignored(f"start_sort({algorithm})")

        bars = self.store.current()
        if not bars:
            self.controller.release()
            logger.debug("start_sort(%s) ignored: no input", algorithm)
            return Outcome.IGNORED

        # a previous run leaves every bar SORTED
        self.store.replace(b.with_state(BarState.DEFAULT) for b in bars)
        self.store.set_status(f"Starting {info.name}...")
        self._delay_ms = max(0, int(step_delay_ms))

        self._launch(info, SortEmitter(self.store), blocking)
        return Outcome.OK
