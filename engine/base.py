"""
base.py — Engine plumbing shared by the sorting and pathfinding facades
=========================================================================
Owns the SnapshotStore, the RunController, the injected sleep and the
per-step delay.  `_launch()` wires an algorithm generator to a Stepper
and a Recorder and hands the whole run to the controller.
"""

import logging
import time
from typing import Callable, Optional

from algorithms import AlgoInfo
from algorithms.step import Step, StepEmitter
from cells.store import SnapshotStore
from engine.controller import Outcome, RunController
from engine.recorder import Recorder, RunMetrics
from engine.stepper import Stepper


logger = logging.getLogger(__name__)


class BaseEngine:
    """
    Attributes:
        store        : Published cells, status and log.
        controller   : Single-flight guard (may be shared between engines).
        last_metrics : RunMetrics of the latest finished run.
    """

    def __init__(
        self,
        delay_ms: int,
        sleep: Callable[[float], None] = time.sleep,
        controller: Optional[RunController] = None,
    ):
        self.store:        SnapshotStore        = SnapshotStore()
        self.controller:   RunController        = controller or RunController()
        self.last_metrics: Optional[RunMetrics] = None
        self._sleep:       Callable[[float], None] = sleep
        self._delay_ms:    int                  = delay_ms
        self._stepper:     Optional[Stepper]    = None
        self.current_algo: Optional[AlgoInfo]   = None

    # ------------------------------------------------------------------
    # Observables
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.controller.is_running

    @property
    def status(self) -> str:
        return self.store.status

    @property
    def log(self):
        return self.store.log

    @property
    def step_delay_ms(self) -> int:
        return self._delay_ms

    @property
    def current_step(self) -> Optional[Step]:
        """Latest Step of the active (or last) run."""
        stepper = self._stepper
        return stepper.current_step if stepper is not None else None

    # ------------------------------------------------------------------
    # Live controls
    # ------------------------------------------------------------------
    def set_step_delay(self, ms: int) -> None:
        """Change the pacing; applies to the active run from its next step."""
        self._delay_ms = max(0, int(ms))
        stepper = self._stepper
        if stepper is not None:
            stepper.set_delay_ms(self._delay_ms)

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.controller.wait(timeout)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _ignored(self, action: str) -> Outcome:
        logger.debug("%s ignored: a run is active", action)
        return Outcome.IGNORED

    def _launch(self, info: AlgoInfo, emitter: StepEmitter, blocking: bool) -> None:
        """Run `info.fn` over `emitter`; the controller flag must already be held."""
        recorder = Recorder(info)
        stepper  = Stepper(on_step=recorder.record_step, sleep=self._sleep, delay_ms=self._delay_ms)
        self._stepper = stepper
        self.current_algo = info

        def job() -> None:
            logger.info("run started: %s (%d ms/step)", info.key, stepper.delay_ms)
            recorder.begin()
            stepper.run(info.fn(emitter))
            self.last_metrics = recorder.finish()
            logger.info(
                "run finished: %s in %d steps (%.1f ms)",
                info.key, self.last_metrics.total_steps, self.last_metrics.wall_time_ms,
            )

        self.controller.launch(job, blocking=blocking, name=f"run-{info.key}")
