"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix.  The key bar (PIVOT) walks left one slot at a
time while its left neighbour is larger.

Design decisions:
  - Each shift is performed as an exchange of the key with its larger
    neighbour, so every published snapshot holds exactly the input values.
    The textbook "copy a[j] to a[j+1], drop the key in at the end" would
    show a duplicated value between the two.
  - Strict `>` keeps equal keys in input order (stable).
"""

from typing import Generator, List

from cells.bar import BarState
from algorithms.step import SortEmitter, Step


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 1 .. n-1:",                       # 1
    "        key ← a[i]",                           # 2
    "        j ← i - 1",                            # 3
    "        while j ≥ 0 and a[j] > key:",          # 4
    "            a[j+1] ← a[j]",                    # 5
    "            j ← j - 1",                        # 6
    "        a[j+1] ← key",                         # 7
    "    return a",                                 # 8
]


def insertion_sort(em: SortEmitter) -> Generator[Step, None, None]:
    n = em.n
    for i in range(1, n):
        key = em.value(i)
        em.set_annotations([i], BarState.PIVOT)
        em.log(f"Insert array[{i}]={key}")
        yield em.delay(2)

        j = i - 1
        while j >= 0:
            em.tally("comparisons")
            if em.value(j) <= key:
                break
            em.set_annotations([j, j + 1], BarState.SWAPPING)
            em.log(f"Shift array[{j}]={em.value(j)} to array[{j + 1}]")
            yield em.delay(5)
            em.swap(j, j + 1)
            em.reset([j, j + 1])
            j -= 1

        # everything up to i is now ordered relative to itself
        em.set_annotations(range(i + 1), BarState.SORTED)
        yield em.delay(7)

    em.mark_all_sorted()
    em.set_status("All elements sorted")
    yield em.finish(8)
