"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Two adjacent bars are compared       →  COMPARING
  2. They are out of order                →  SWAPPING, then exchanged
  3. End of a pass                        →  index n-i-1 is SORTED

Stops early when a whole pass makes no swap.
"""

from typing import Generator, List

from cells.bar import BarState
from algorithms.step import SortEmitter, Step


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-1:",                       # 1
    "        swapped ← false",                      # 2
    "        for j in 0 .. n-i-2:",                 # 3
    "            if a[j] > a[j+1]:",                # 4
    "                swap(a[j], a[j+1])",           # 5
    "                swapped ← true",               # 6
    "        a[n-i-1] is in place",                 # 7
    "        if not swapped: break",                # 8
    "    return a",                                 # 9
]


def bubble_sort(em: SortEmitter) -> Generator[Step, None, None]:
    n = em.n
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            em.set_annotations([j, j + 1], BarState.COMPARING)
            em.log(f"Comparing array[{j}]={em.value(j)} with array[{j + 1}]={em.value(j + 1)}")
            em.tally("comparisons")
            yield em.delay(4)

            if em.value(j) > em.value(j + 1):
                em.set_annotations([j, j + 1], BarState.SWAPPING)
                em.log(f"Swapping array[{j}] and array[{j + 1}]")
                yield em.delay(5)
                em.swap(j, j + 1)
                swapped = True
                yield em.delay(6)

            em.reset([j, j + 1])

        last = n - i - 1
        em.set_annotations([last], BarState.SORTED)
        em.log(f"array[{last}] placed (sorted)")
        if not swapped:
            break

    em.mark_all_sorted()
    em.set_status("All elements sorted")
    yield em.finish(9)
