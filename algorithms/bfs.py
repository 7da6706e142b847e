"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over the grid.  Yields a Step at every meaningful event:
  1. Dequeue a cell  →  mark it VISITED, one frame
  2. Enqueue each unseen passable neighbour (logged, no frame)
  3. END dequeued  →  walk back and paint the shortest path

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.

Barriers are never enqueued.  START and END are expanded but never
painted.
"""

from collections import deque
from typing import Deque, Generator, List

from cells.grid import Position
from algorithms.path import Parents, no_path, trace_path
from algorithms.step import GridEmitter, Step


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",                   # 0
    "    queue ← [start]",                          # 1
    "    seen ← {start}",                           # 2
    "    while queue is not empty:",                # 3
    "        cell ← queue.dequeue()",               # 4
    "        if cell == end: return path",          # 5
    "        for nbr in adj(cell):",                # 6
    "            if nbr not seen and not wall:",    # 7
    "                seen.add(nbr)",                # 8
    "                parent[nbr] ← cell",           # 9
    "                queue.enqueue(nbr)",           # 10
    "    return NOT FOUND",                         # 11
]


def bfs(em: GridEmitter) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every dequeue and every path cell.

    Args:
        em : Emitter wrapping the grid; START and END must both be placed.
    """
    grid  = em.grid
    start = grid.start.pos
    end   = grid.end.pos

    queue:  Deque[Position] = deque([start])
    seen                    = {start}
    parent: Parents         = {}

    em.set_status(f"BFS: enqueued start cell[{start[0]}][{start[1]}]")

    found = False
    while queue:
        cur = queue.popleft()
        em.set_status(f"Visiting cell[{cur[0]}][{cur[1]}]")
        em.mark_visited(cur)
        yield em.delay(4)

        if cur == end:
            found = True
            break

        for nbr in grid.neighbours(*cur):
            if nbr.pos in seen or not nbr.passable:
                continue
            seen.add(nbr.pos)
            parent[nbr.pos] = cur
            queue.append(nbr.pos)
            em.set_status(f"Queued cell[{nbr.row}][{nbr.col}]")

    if found:
        yield from trace_path(em, parent, start, end, line=5, path_as_status=True)
        yield em.finish(5)
    else:
        no_path(em)
        yield em.finish(11)
