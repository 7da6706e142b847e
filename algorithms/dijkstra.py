"""
dijkstra.py — Dijkstra's Algorithm
===================================
Uniform-cost Dijkstra over the grid (every move costs 1).

Design decisions:
  - Binary heap of (distance, insertion_counter, cell).  The counter makes
    ties pop in the order they were pushed, so runs are deterministic.
  - Lazy deletion: a cell may sit in the heap several times; stale entries
    are skipped when popped.
  - Stops as soon as END is popped.
"""

import heapq
import itertools
from typing import Dict, Generator, List, Set, Tuple

from cells.grid import Position
from algorithms.path import Parents, no_path, trace_path
from algorithms.step import GridEmitter, Step


PSEUDOCODE: List[str] = [
    "def Dijkstra(grid, start, end):",              # 0
    "    dist[start] ← 0;  pq ← [(0, start)]",      # 1
    "    while pq is not empty:",                   # 2
    "        (d, cell) ← pq.pop_min()",             # 3
    "        if cell done: continue",               # 4
    "        mark cell done",                       # 5
    "        if cell == end: return path",          # 6
    "        for nbr in adj(cell):",                # 7
    "            if d + 1 < dist[nbr]:",            # 8
    "                dist[nbr] ← d + 1",            # 9
    "                pq.push((d + 1, nbr))",        # 10
    "    return NOT FOUND",                         # 11
]


def dijkstra(em: GridEmitter) -> Generator[Step, None, None]:
    grid  = em.grid
    start = grid.start.pos
    end   = grid.end.pos

    counter = itertools.count()
    dist:   Dict[Position, int] = {start: 0}
    parent: Parents             = {}
    done:   Set[Position]       = set()
    pq:     List[Tuple[int, int, Position]] = [(0, next(counter), start)]

    em.set_status("Dijkstra: starting...")

    while pq:
        d, _, cur = heapq.heappop(pq)
        if cur in done:
            continue
        done.add(cur)
        em.mark_visited(cur)
        if not grid.node(*cur).is_terminal:
            yield em.delay(5)

        if cur == end:
            break

        for nbr in grid.neighbours(*cur):
            if not nbr.passable or nbr.pos in done:
                continue
            nd = d + 1
            if nd < dist.get(nbr.pos, float("inf")):
                dist[nbr.pos]   = nd
                parent[nbr.pos] = cur
                heapq.heappush(pq, (nd, next(counter), nbr.pos))
                em.log(f"Relaxed cell[{nbr.row}][{nbr.col}] with distance {nd}")

    if end in done:
        yield from trace_path(em, parent, start, end, line=6)
        yield em.finish(6)
    else:
        no_path(em)
        yield em.finish(11)
