"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, name, label, fn, pseudocode, kind, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engines and UI both consume it
so adding a new algorithm is: write the generator, add one entry here.
Sorting generators take a SortEmitter, pathfinding generators a
GridEmitter.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.bfs            import bfs            as _bfs,       PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs            as _dfs,       PSEUDOCODE as _dfs_pc
from algorithms.dijkstra       import dijkstra       as _dijkstra,  PSEUDOCODE as _dij_pc


SORTING     = "sorting"
PATHFINDING = "pathfinding"


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    name:             str                    # short name used in status lines, e.g. "BFS"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    kind:             str                    # SORTING or PATHFINDING
    stable:           bool      = False      # sorting only: equal keys keep input order
    shortest_path:    bool      = False      # pathfinding only: guarantees a shortest path
    complexity_time:  str       = ""         # e.g. "O(n²)"
    complexity_space: str       = ""         # e.g. "O(1)"
    description:      str       = ""         # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", name="Bubble Sort", label="Bubble Sort",
        fn=_bubble, pseudocode=_bubble_pc, kind=SORTING,
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent pairs; the largest value bubbles to the end each pass.",
    ),

    "selection": AlgoInfo(
        key="selection", name="Selection Sort", label="Selection Sort",
        fn=_selection, pseudocode=_selection_pc, kind=SORTING,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted part and swaps it to the front.",
    ),

    "insertion": AlgoInfo(
        key="insertion", name="Insertion Sort", label="Insertion Sort",
        fn=_insertion, pseudocode=_insertion_pc, kind=SORTING,
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Slides each element left into the sorted prefix.",
    ),

    "merge": AlgoInfo(
        key="merge", name="Merge Sort", label="Merge Sort",
        fn=_merge, pseudocode=_merge_pc, kind=SORTING,
        stable=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts both halves, then merges them. Ties favour the left half.",
    ),

    "quick": AlgoInfo(
        key="quick", name="Quick Sort", label="Quick Sort",
        fn=_quick, pseudocode=_quick_pc, kind=SORTING,
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then sorts both sides.",
    ),

    "bfs": AlgoInfo(
        key="bfs", name="BFS", label="Breadth-First Search",
        fn=_bfs, pseudocode=_bfs_pc, kind=PATHFINDING,
        shortest_path=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds shortest path by hop count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", name="DFS", label="Depth-First Search",
        fn=_dfs, pseudocode=_dfs_pc, kind=PATHFINDING,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", name="Dijkstra's", label="Dijkstra's Algorithm",
        fn=_dijkstra, pseudocode=_dij_pc, kind=PATHFINDING,
        shortest_path=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest cell. Uniform cost, so it matches BFS on length.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str, kind: Optional[str] = None) -> AlgoInfo:
    """Like get_algorithm but raises ValueError for an unknown key or wrong kind."""
    info = REGISTRY.get(key)
    if info is None or (kind is not None and info.kind != kind):
        raise ValueError(f"Unknown algorithm: {key}")
    return info


def list_algorithms(kind: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order, optionally of one kind."""
    return [a for a in REGISTRY.values() if kind is None or a.kind == kind]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SORTING",
    "PATHFINDING",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
]
