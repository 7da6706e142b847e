"""
dfs.py — Depth-First Search
============================
DFS driven by an explicit stack of (cell, neighbour iterator) frames, so
the descent depth is not tied to the interpreter recursion limit.  Each
frame resumes its neighbours where it left off, which keeps the
recursive visit order, and the search stops as soon as END is reached.

Does NOT guarantee a shortest path: the path is whatever branch of the
down / up / right / left exploration reached END first.
"""

from typing import Generator, Iterator, List, Optional, Set, Tuple

from cells.grid import Position
from cells.node import Node
from algorithms.path import Parents, no_path, trace_path
from algorithms.step import GridEmitter, Step


PSEUDOCODE: List[str] = [
    "def DFS(cell):",                               # 0
    "    if cell == end: return FOUND",             # 1
    "    visited.add(cell)",                        # 2
    "    for nbr in adj(cell):",                    # 3
    "        if nbr not visited and not wall:",     # 4
    "            parent[nbr] ← cell",               # 5
    "            if DFS(nbr): return FOUND",        # 6
    "    return NOT FOUND",                         # 7
]


def dfs(em: GridEmitter) -> Generator[Step, None, None]:
    grid  = em.grid
    start = grid.start.pos
    end   = grid.end.pos

    parent: Parents = {}

    em.set_status("DFS: exploring...")
    found = yield from _search(em, start, end, parent)

    if found:
        yield from trace_path(em, parent, start, end, line=1)
        yield em.finish(1)
    else:
        no_path(em)
        yield em.finish(7)


def _search(
    em: GridEmitter,
    start: Position,
    end: Position,
    parent: Parents,
) -> Generator[Step, None, bool]:
    visited: Set[Position] = set()
    frames:  List[Tuple[Position, Iterator[Node]]] = []
    cur: Optional[Position] = start

    while cur != end:
        visited.add(cur)
        em.mark_visited(cur)
        if not em.grid.node(*cur).is_terminal:
            yield em.delay(2)
        frames.append((cur, iter(em.grid.neighbours(*cur))))

        # resume the innermost frame that still has an unvisited neighbour
        cur = None
        while frames and cur is None:
            owner, nbrs = frames[-1]
            for nbr in nbrs:
                if nbr.pos not in visited and nbr.passable:
                    parent[nbr.pos] = owner
                    cur = nbr.pos
                    break
            else:
                frames.pop()
        if cur is None:
            return False
    return True
