"""
pathfinding.py — Pathfinding Engine
====================================
Facade the UI talks to for the grid visualizer: edit the grid (modes and
taps), then run BFS / DFS / Dijkstra from START to END.

Every edit is rejected while a run is active.  A run first wipes the
previous visit marks, then checks that START and END exist.  When one is
missing it stops with a status message and no traversal step.
"""

import logging
import time
from typing import Callable, Optional, Tuple, Union

from algorithms import PATHFINDING, require_algorithm
from algorithms.path import missing_endpoints
from algorithms.step import GridEmitter
from cells.grid import GRID_COLS, GRID_ROWS, Grid, GridMode
from cells.node import Node
from engine.base import BaseEngine
from engine.controller import Outcome, RunController


logger = logging.getLogger(__name__)

DEFAULT_PATH_DELAY_MS = 80


class PathfindingEngine(BaseEngine):
    """
    Attributes:
        mode  : Active GridMode for on_cell_tapped.
        _grid : Working grid.  Only edits (outside runs) and the running
                algorithm write to it; readers use the published snapshot.
    """

    def __init__(
        self,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        sleep: Callable[[float], None] = time.sleep,
        controller: Optional[RunController] = None,
    ):
        super().__init__(DEFAULT_PATH_DELAY_MS, sleep=sleep, controller=controller)
        self.mode:  GridMode = GridMode.NONE
        self._grid: Grid     = Grid(rows, cols)
        self.store.replace(self._grid.snapshot())

    @property
    def grid(self) -> Tuple[Tuple[Node, ...], ...]:
        return self.store.current()

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def set_mode(self, mode: Union[GridMode, str]) -> Outcome:
        """Accepts a GridMode or its value ("set_start", …).  ValueError otherwise."""
        mode = GridMode(mode)
        if not self.controller.try_acquire():
            return self._ignored("set_mode")
        try:
            self.mode = mode
        finally:
            self.controller.release()
        return Outcome.OK

    def on_cell_tapped(self, row: int, col: int) -> Outcome:
        """Apply the active mode to (row, col).  Out-of-range taps are ignored."""
        if not self.controller.try_acquire():
            return self._ignored("on_cell_tapped")
        try:
            changed = self._grid.apply(self.mode, row, col)
            if changed:
                self.store.replace(self._grid.snapshot())
        finally:
            self.controller.release()
        if not changed:
            logger.debug("tap at (%s, %s) in mode %s changed nothing", row, col, self.mode.value)
            return Outcome.IGNORED
        return Outcome.OK

    def clear_grid(self) -> Outcome:
        if not self.controller.try_acquire():
            return self._ignored("clear_grid")
        try:
            self._grid.clear()
            self.store.replace(self._grid.snapshot())
            self.store.clear_log()
            self.store.set_status("")
        finally:
            self.controller.release()
        return Outcome.OK

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run_pathfinding(
        self,
        algorithm: str,
        step_delay_ms: int = DEFAULT_PATH_DELAY_MS,
        blocking: bool = True,
    ) -> Outcome:
        """
        Search from START to END with `algorithm` (a registry key).

        Raises ValueError for an unknown key.  Returns IGNORED when a run
        is active, PRECONDITION_FAILED when START or END is missing.
        """
        info = require_algorithm(algorithm, PATHFINDING)
        if not self.controller.try_acquire():
            return self._ignored(f"run_pathfinding({algorithm})")

        self._grid.clear_visits()
        self.store.replace(self._grid.snapshot())
        self._announce(f"Starting {info.name}...")

        problem = missing_endpoints(self._grid)
        if problem is not None:
            self._announce(problem)
            self.controller.release()
            logger.info("run_pathfinding(%s) stopped: %s", algorithm, problem)
            return Outcome.PRECONDITION_FAILED

        self._delay_ms = max(0, int(step_delay_ms))
        self._launch(info, GridEmitter(self.store, self._grid), blocking)
        return Outcome.OK

    def _announce(self, message: str) -> None:
        self.store.set_status(message)
        self.store.append_log(message)
