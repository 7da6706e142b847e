"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort, split at (l + r) // 2.

Design decisions:
  - The merge runs in place.  When the right head is smaller it is
    rotated into the left head's slot (everything between slides one
    to the right), so no snapshot ever shows a value twice or loses one.
  - Heads are compared with `<=`: on a tie the left element wins, which
    keeps the sort stable.
  - Every merged position gets its own frame, whether it was written by a
    rotation or was already in place.
"""

from typing import Generator, List

from cells.bar import BarState
from algorithms.step import SortEmitter, Step


PSEUDOCODE: List[str] = [
    "def merge_sort(a, l, r):",                     # 0
    "    if l ≥ r: return",                         # 1
    "    m ← (l + r) / 2",                          # 2
    "    merge_sort(a, l, m)",                      # 3
    "    merge_sort(a, m+1, r)",                    # 4
    "    i ← l,  j ← m+1",                          # 5
    "    while i ≤ m and j ≤ r:",                   # 6
    "        if a[i] ≤ a[j]: take a[i]",            # 7
    "        else: take a[j]",                      # 8
    "    copy the rest, write back a[l..r]",        # 9
]


def merge_sort(em: SortEmitter) -> Generator[Step, None, None]:
    yield from _sort_range(em, 0, em.n - 1)

    em.mark_all_sorted()
    em.set_status("All elements sorted")
    yield em.finish(0)


def _sort_range(em: SortEmitter, l: int, r: int) -> Generator[Step, None, None]:
    if l >= r:
        return
    m = (l + r) // 2
    yield from _sort_range(em, l, m)
    yield from _sort_range(em, m + 1, r)
    yield from _merge(em, l, m, r)


def _merge(em: SortEmitter, l: int, m: int, r: int) -> Generator[Step, None, None]:
    i, mid, j = l, m, m + 1
    while i <= mid and j <= r:
        em.set_annotations([i, j], BarState.COMPARING)
        em.log(f"Comparing array[{i}]={em.value(i)} with array[{j}]={em.value(j)}")
        em.tally("comparisons")
        yield em.delay(6)

        if em.value(i) <= em.value(j):
            em.reset([i, j])
            yield em.delay(7)
        else:
            em.reset([i, j])
            em.rotate(i, j)
            mid += 1
            j   += 1
            yield em.delay(8)
        i += 1

    # the tail is already in place
    for _ in range(i, r + 1):
        yield em.delay(9)
