import threading

import pytest

from algorithms import REGISTRY
from algorithms.step import GridEmitter, SortEmitter
from cells.bar import bars_from_values
from cells.grid import Grid
from cells.store import SnapshotStore


def no_sleep(seconds):
    pass


class GatedSleep:
    """Sleep stand-in that blocks until `gate` is set and records every call."""

    def __init__(self):
        self.gate    = threading.Event()
        self.entered = threading.Event()
        self.calls   = []

    def __call__(self, seconds):
        self.calls.append(seconds)
        self.entered.set()
        self.gate.wait(5)


@pytest.fixture
def gated_sleep():
    gs = GatedSleep()
    yield gs
    gs.gate.set()


def run_sort(key, values):
    """Run a sorting generator to completion.  Returns (store, steps, published)."""
    store = SnapshotStore(bars_from_values(values))
    published = []
    store.subscribe(lambda s, topic: published.append(s.current()) if topic == "cells" else None)
    em = SortEmitter(store)
    steps = list(REGISTRY[key].fn(em))
    return store, steps, published


def run_search(key, grid):
    """Run a pathfinding generator to completion.  Returns (store, steps)."""
    store = SnapshotStore(grid.snapshot())
    em = GridEmitter(store, grid)
    steps = list(REGISTRY[key].fn(em))
    return store, steps


def make_grid(start=(0, 0), end=(9, 9), barriers=(), rows=10, cols=10):
    g = Grid(rows, cols)
    if start is not None:
        g.set_start(*start)
    if end is not None:
        g.set_end(*end)
    for r, c in barriers:
        g.toggle_barrier(r, c)
    return g
