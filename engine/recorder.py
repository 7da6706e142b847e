"""
recorder.py — Run Recorder & Analytics
========================================
Watches every Step of a run as the Stepper pulls it, then computes the
analytics card the UI shows next to the visualizer.

Usage:
    rec = Recorder(get_algorithm("bubble"))
    rec.begin()
    stepper = Stepper(on_step=rec.record_step)
    stepper.run(gen)
    metrics = rec.finish()          # the analytics card

Steps carry a full snapshot of the cells, so the recorder folds each one
into running totals and lets it go.  A long run costs the same memory as
a short one.
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from algorithms import AlgoInfo
from algorithms.step import Step


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    total_steps:     int   = 0          # number of Steps yielded
    log_lines:       int   = 0          # user-facing log lines written during the run
    comparisons:     int   = 0          # sorting
    swaps:           int   = 0          # sorting: exchanges + rotations
    nodes_visited:   int   = 0          # pathfinding: cells expanded
    path_length:     int   = 0          # pathfinding: moves on the final path
    path_found:      bool  = False
    wall_time_ms:    float = 0.0        # wall-clock time, sleeps included

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        total_steps : Steps seen since begin().
        log_lines   : Log lines those Steps carried.
        metrics     : Computed RunMetrics (available after finish()).
    """

    def __init__(self, info: Optional[AlgoInfo] = None):
        self.total_steps: int                  = 0
        self.log_lines:   int                  = 0
        self.metrics:     Optional[RunMetrics] = None

        self._algo_info:  Optional[AlgoInfo] = info
        self._tally:      Dict[str, Any]     = {}
        self._start_time: float              = 0.0

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def begin(self) -> None:
        self.total_steps = 0
        self.log_lines   = 0
        self.metrics     = None
        self._tally      = {}
        self._start_time = time.monotonic()

    def record_step(self, step: Step) -> None:
        self.total_steps += 1
        self.log_lines   += len(step.log_lines)
        self._tally       = step.metrics

    def finish(self) -> RunMetrics:
        wall_ms = (time.monotonic() - self._start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        m    = self._tally

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            total_steps=self.total_steps,
            log_lines=self.log_lines,
            comparisons=m.get("comparisons", 0),
            swaps=m.get("swaps", 0),
            nodes_visited=m.get("nodes_visited", 0),
            path_length=m.get("path_length", 0),
            path_found=bool(m.get("path_found", False)),
            wall_time_ms=round(wall_ms, 2),
        )
