from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


# ---------------------------------------------------------------------------
# Role: what the user placed on the cell (persists across runs)
# ---------------------------------------------------------------------------
class NodeRole(Enum):
    NORMAL  = "normal"
    START   = "start"      # blue: where every search begins
    END     = "end"        # red: the goal
    BARRIER = "barrier"    # black: impassable, never visited


# ---------------------------------------------------------------------------
# Visit state: what the algorithm did to the cell (wiped every run)
# ---------------------------------------------------------------------------
class NodeVis(Enum):
    NONE    = "none"
    VISITED = "visited"    # pink: expanded by the search
    PATH    = "path"       # yellow: on the reconstructed path


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Node:
    """
    One grid cell.

    Attributes:
        row, col : Position in the grid (0-based).
        role     : NodeRole placed by the user.
        vis      : NodeVis written by the running algorithm.
    """

    row:  int
    col:  int
    role: NodeRole = NodeRole.NORMAL
    vis:  NodeVis  = NodeVis.NONE

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def pos(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_terminal(self) -> bool:
        """Start and End are never painted Visited / Path."""
        return self.role in (NodeRole.START, NodeRole.END)

    @property
    def passable(self) -> bool:
        return self.role is not NodeRole.BARRIER

    def with_role(self, role: NodeRole) -> "Node":
        # every edit wipes the visit state of the edited cell
        return replace(self, role=role, vis=NodeVis.NONE)

    def with_vis(self, vis: NodeVis) -> "Node":
        if vis is self.vis:
            return self
        return replace(self, vis=vis)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "row":  self.row,
            "col":  self.col,
            "role": self.role.value,
            "vis":  self.vis.value,
        }

    def __repr__(self) -> str:
        return f"Node({self.row},{self.col}, role={self.role.value}, vis={self.vis.value})"
