"""
path.py — Shared pathfinding helpers
=====================================
Precondition check, predecessor walk-back and the path-painting tail
that BFS, DFS and Dijkstra all finish with.
"""

from typing import Dict, Generator, List, Optional

from cells.grid import Grid, Position
from algorithms.step import GridEmitter, Step


Parents = Dict[Position, Position]


def missing_endpoints(grid: Grid) -> Optional[str]:
    """Status message when START or END is missing, else None."""
    has_start = grid.start is not None
    has_end   = grid.end is not None
    if not has_start and not has_end:
        return "Place a Start and an End first"
    if not has_start:
        return "Place a Start first"
    if not has_end:
        return "Place an End first"
    return None


def reconstruct(parent: Parents, start: Position, end: Position) -> List[Position]:
    """
    Walk predecessor links back from `end`.  The result runs start→end
    and EXCLUDES start, so len(result) is the number of moves.
    """
    path: List[Position] = []
    cur = end
    while cur != start:
        path.append(cur)
        if cur not in parent:
            break
        cur = parent[cur]
    path.reverse()
    return path


def trace_path(
    em: GridEmitter,
    parent: Parents,
    start: Position,
    end: Position,
    line: int,
    path_as_status: bool = False,
) -> Generator[Step, None, None]:
    """Paint the found path one cell per frame, then report its length."""
    em.set_status("End found. Backtracking path...")
    path = reconstruct(parent, start, end)
    for pos in path:
        if pos == end:
            continue
        em.mark_path(pos)
        yield em.delay(line)
        message = f"Path cell[{pos[0]}][{pos[1]}]"
        if path_as_status:
            em.set_status(message)
        else:
            em.log(message)
    em.metrics["path_length"] = len(path)
    em.metrics["path_found"]  = True
    em.set_status(f"Completed. Path length: {len(path)}")


def no_path(em: GridEmitter) -> None:
    em.set_status("No path found.")
