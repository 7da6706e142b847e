"""
quick_sort.py — Quick Sort
===========================
Lomuto partition with the last element as pivot.  The pivot's final slot
is marked SORTED as soon as the partition returns, before either side is
sorted.  Pending ranges live on an explicit stack (left side on top), so
already-sorted input does not recurse once per element.
"""

from typing import Generator, List, Tuple

from cells.bar import BarState
from algorithms.step import SortEmitter, Step


PSEUDOCODE: List[str] = [
    "def quick_sort(a, lo, hi):",                   # 0
    "    if lo ≥ hi: return",                       # 1
    "    pivot ← a[hi]",                            # 2
    "    i ← lo - 1",                               # 3
    "    for j in lo .. hi-1:",                     # 4
    "        if a[j] ≤ pivot:",                     # 5
    "            i ← i + 1; swap(a[i], a[j])",      # 6
    "    swap(a[i+1], a[hi])",                      # 7
    "    quick_sort(a, lo, i)",                     # 8
    "    quick_sort(a, i+2, hi)",                   # 9
]


def quick_sort(em: SortEmitter) -> Generator[Step, None, None]:
    ranges: List[Tuple[int, int]] = [(0, em.n - 1)]
    while ranges:
        lo, hi = ranges.pop()
        if lo >= hi:
            continue
        p = yield from _partition(em, lo, hi)
        em.set_annotations([p], BarState.SORTED)
        ranges.append((p + 1, hi))
        ranges.append((lo, p - 1))

    em.mark_all_sorted()
    em.set_status("All elements sorted")
    yield em.finish(0)


def _partition(em: SortEmitter, lo: int, hi: int) -> Generator[Step, None, int]:
    pivot = em.value(hi)
    em.set_annotations([hi], BarState.PIVOT)
    em.log(f"Pivot array[{hi}]={pivot}")
    yield em.delay(2)

    i = lo - 1
    for j in range(lo, hi):
        em.set_annotations([j], BarState.COMPARING)
        em.log(f"Compare array[{j}]={em.value(j)} with pivot={pivot}")
        em.tally("comparisons")
        yield em.delay(5)

        if em.value(j) <= pivot:
            i += 1
            if i != j:
                em.set_annotations([i, j], BarState.SWAPPING)
                em.log(f"Swap array[{i}] and array[{j}]")
                yield em.delay(6)
                em.swap(i, j)
                yield em.delay(6)
                em.reset([i])
        em.reset([j])

    if i + 1 != hi:
        em.set_annotations([i + 1, hi], BarState.SWAPPING)
        em.log(f"Place pivot from array[{hi}] to array[{i + 1}]")
        yield em.delay(7)
        em.swap(i + 1, hi)
        yield em.delay(7)
    em.reset([i + 1, hi])
    return i + 1
