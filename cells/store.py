"""
store.py — Snapshot Store
==========================
Holds the latest published cell collection plus the user-facing run log
and status line.  Renderers and the web layer only ever READ from here;
the running algorithm (through its emitter) is the only writer.

Design decisions:
  - The published collection is always an immutable tuple (a grid is a
    tuple of row tuples), so `current()` can hand it out without copying.
  - The log is newest-first.  `append_log()` prepends, `log` returns a
    tuple copy.
  - Every mutation takes the same RLock.  A run on a worker thread and a
    request thread reading state never observe a half-written update.
  - Observers are notified AFTER the lock is released, with
    `(store, topic)` where topic is "cells", "log" or "status".
"""

import threading
from typing import Any, Callable, List, Sequence, Tuple


TOPIC_CELLS  = "cells"
TOPIC_LOG    = "log"
TOPIC_STATUS = "status"

Observer = Callable[["SnapshotStore", str], None]


class SnapshotStore:
    """
    Attributes:
        _cells     : Latest published snapshot.
        _log       : User-facing log, index 0 is the newest line.
        _status    : One-line status text.
        _observers : Callbacks fired on every publish.
    """

    def __init__(self, cells: Sequence[Any] = ()):
        self._lock:      threading.RLock = threading.RLock()
        self._cells:     Tuple[Any, ...] = tuple(cells)
        self._log:       List[str]       = []
        self._status:    str             = ""
        self._observers: List[Observer]  = []

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    def replace(self, cells: Sequence[Any]) -> None:
        """Atomically swap the published collection."""
        snapshot = tuple(cells)
        with self._lock:
            self._cells = snapshot
        self._notify(TOPIC_CELLS)

    def current(self) -> Tuple[Any, ...]:
        with self._lock:
            return self._cells

    # ------------------------------------------------------------------
    # Log
    # ------------------------------------------------------------------
    def append_log(self, message: str) -> None:
        with self._lock:
            self._log.insert(0, message)
        self._notify(TOPIC_LOG)

    def clear_log(self) -> None:
        with self._lock:
            self._log = []
        self._notify(TOPIC_LOG)

    @property
    def log(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._log)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------
    def set_status(self, text: str) -> None:
        with self._lock:
            self._status = text
        self._notify(TOPIC_STATUS)

    @property
    def status(self) -> str:
        with self._lock:
            return self._status

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Register `callback`; returns a function that unregisters it."""
        with self._lock:
            self._observers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return unsubscribe

    def _notify(self, topic: str) -> None:
        with self._lock:
            observers = list(self._observers)
        for cb in observers:
            cb(self, topic)

    def __repr__(self) -> str:
        return f"SnapshotStore(cells={len(self._cells)}, log={len(self._log)}, status={self._status!r})"
