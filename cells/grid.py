"""
grid.py — Pathfinding Grid
===========================
Fixed-size 2-D grid of Nodes.  Pathfinding algorithms and the grid editor
both talk to this object.

Responsibilities:
  1. Lookup                          (node, in_bounds, start / end)
  2. 4-neighbour queries             (down, up, right, left)
  3. Editing                         (set_start, set_end, toggle_barrier, apply)
  4. Reset helpers                   (clear_visits keeps roles, clear wipes all)
  5. Snapshots                       (snapshot → tuple of row tuples)

Design decisions:
  - Nodes are immutable; the grid keeps a list of row lists and swaps
    whole Node objects in place.  `snapshot()` freezes the current rows.
  - At most one START and one END: placing a new one demotes the old one
    to NORMAL.
  - Latest edit wins.  Drawing a barrier over START / END turns it into
    a barrier (the grid then has no START / END).  Placing START / END
    over a barrier removes the barrier.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from cells.node import Node, NodeRole, NodeVis


GRID_ROWS = 10
GRID_COLS = 10

# (d_row, d_col): down, up, right, left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

Position = Tuple[int, int]
GridSnapshot = Tuple[Tuple[Node, ...], ...]


# ---------------------------------------------------------------------------
# Edit mode: what a tap on a cell does
# ---------------------------------------------------------------------------
class GridMode(Enum):
    SET_START    = "set_start"
    SET_END      = "set_end"
    DRAW_BARRIER = "draw_barrier"
    NONE         = "none"


class Grid:
    """
    Attributes:
        rows, cols : Dimensions (fixed for the lifetime of the grid).
        _cells     : [[Node]] indexed [row][col].
    """

    def __init__(self, rows: int = GRID_ROWS, cols: int = GRID_COLS):
        self.rows: int = rows
        self.cols: int = cols
        self._cells: List[List[Node]] = [
            [Node(r, c) for c in range(cols)] for r in range(rows)
        ]

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node(self, row: int, col: int) -> Node:
        return self._cells[row][col]

    def set_node(self, node: Node) -> None:
        self._cells[node.row][node.col] = node

    def nodes(self) -> Iterator[Node]:
        for row in self._cells:
            yield from row

    def find(self, role: NodeRole) -> Optional[Node]:
        for n in self.nodes():
            if n.role is role:
                return n
        return None

    @property
    def start(self) -> Optional[Node]:
        return self.find(NodeRole.START)

    @property
    def end(self) -> Optional[Node]:
        return self.find(NodeRole.END)

    # ==================================================================
    # ADJACENCY
    # ==================================================================
    def neighbours(self, row: int, col: int) -> List[Node]:
        """In-bounds 4-neighbours, barriers included (callers filter)."""
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                result.append(self._cells[nr][nc])
        return result

    # ==================================================================
    # EDITING
    # ==================================================================
    def set_start(self, row: int, col: int) -> None:
        self._place_unique(row, col, NodeRole.START)

    def set_end(self, row: int, col: int) -> None:
        self._place_unique(row, col, NodeRole.END)

    def toggle_barrier(self, row: int, col: int) -> None:
        n = self._cells[row][col]
        role = NodeRole.NORMAL if n.role is NodeRole.BARRIER else NodeRole.BARRIER
        self._cells[row][col] = n.with_role(role)

    def apply(self, mode: GridMode, row: int, col: int) -> bool:
        """Apply one tap in `mode`.  False when the tap changes nothing."""
        if not self.in_bounds(row, col):
            return False
        if mode is GridMode.SET_START:
            self.set_start(row, col)
        elif mode is GridMode.SET_END:
            self.set_end(row, col)
        elif mode is GridMode.DRAW_BARRIER:
            self.toggle_barrier(row, col)
        else:
            return False
        return True

    def _place_unique(self, row: int, col: int, role: NodeRole) -> None:
        for n in list(self.nodes()):
            if n.role is role:
                self.set_node(n.with_role(NodeRole.NORMAL))
        self._cells[row][col] = self._cells[row][col].with_role(role)

    # ==================================================================
    # RESET
    # ==================================================================
    def clear_visits(self) -> None:
        """Keep roles, wipe every visit mark — called before each run."""
        for r in range(self.rows):
            for c in range(self.cols):
                self._cells[r][c] = self._cells[r][c].with_vis(NodeVis.NONE)

    def clear(self) -> None:
        self._cells = [
            [Node(r, c) for c in range(self.cols)] for r in range(self.rows)
        ]

    # ==================================================================
    # SNAPSHOTS
    # ==================================================================
    def snapshot(self) -> GridSnapshot:
        return tuple(tuple(row) for row in self._cells)

    def cells_with(self, vis: NodeVis) -> List[Position]:
        return [n.pos for n in self.nodes() if n.vis is vis]

    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "nodes": [[n.to_dict() for n in row] for row in self._cells],
        }

    def __repr__(self) -> str:
        s, e = self.start, self.end
        return (
            f"Grid({self.rows}x{self.cols}, start={s.pos if s else None}, "
            f"end={e.pos if e else None})"
        )

