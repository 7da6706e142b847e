"""
controller.py — Run Controller
===============================
Single-flight guard for runs.  At most one run is active per controller;
engines that share one controller (the web app shares one between the
sorting and pathfinding engines) are single-flight together.

Design decisions:
  - The running flag is a test-and-set under a threading.Lock.  A second
    start while a run is active is rejected, never queued.
  - User actions never raise for expected conditions.  They return an
    Outcome instead.
  - `launch()` releases the flag in a `finally`, so a run that dies with
    an exception still frees the controller.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class Outcome(Enum):
    OK                  = "ok"
    IGNORED             = "ignored"              # a run is active, or nothing to do
    PRECONDITION_FAILED = "precondition_failed"  # e.g. START / END missing


class RunController:
    """
    Attributes:
        _running : True while a run (or an edit) holds the controller.
        _thread  : Worker thread of the latest background run.
    """

    def __init__(self):
        self._lock:    threading.Lock             = threading.Lock()
        self._running: bool                       = False
        self._thread:  Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def try_acquire(self) -> bool:
        """Set the flag if it is clear.  False means someone else holds it."""
        with self._lock:
            if self._running:
                return False
            self._running = True
            return True

    def release(self) -> None:
        with self._lock:
            self._running = False

    def launch(
        self,
        job: Callable[[], None],
        blocking: bool = True,
        name: str = "visualizer-run",
    ) -> None:
        """
        Run `job` with the flag held (the caller has already acquired it).

        Inline when `blocking`, otherwise on a daemon worker thread.  The
        flag is released when the job returns or raises.
        """
        def body() -> None:
            try:
                job()
            finally:
                self.release()

        if blocking:
            body()
            return
        worker = threading.Thread(target=body, name=name, daemon=True)
        self._thread = worker
        logger.debug("launching %s in the background", name)
        worker.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the background run, if any.  True once nothing is running."""
        worker = self._thread
        if worker is not None and worker is not threading.current_thread():
            worker.join(timeout)
        return not self.is_running

    def __repr__(self) -> str:
        return f"RunController(running={self.is_running})"
