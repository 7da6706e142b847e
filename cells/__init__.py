"""
cells/
------
Cell model and snapshot store.  Public API:

    from cells import Bar, BarState, Node, NodeRole, NodeVis
    from cells import Grid, GridMode, SnapshotStore
"""

from cells.bar   import Bar,  BarState, bars_from_values, values_of
from cells.node  import Node, NodeRole, NodeVis
from cells.grid  import Grid, GridMode, GRID_ROWS, GRID_COLS, DIRECTIONS
from cells.store import SnapshotStore

__all__ = [
    "Bar",       "BarState",  "bars_from_values", "values_of",
    "Node",      "NodeRole",  "NodeVis",
    "Grid",      "GridMode",  "GRID_ROWS", "GRID_COLS", "DIRECTIONS",
    "SnapshotStore",
]
