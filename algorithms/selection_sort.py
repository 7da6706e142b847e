"""
selection_sort.py — Selection Sort
===================================
For every slot i, scan the unsorted suffix for the minimum, then swap it
into i.  The running minimum is shown as PIVOT so the learner can watch
it move.
"""

from typing import Generator, List

from cells.bar import BarState
from algorithms.step import SortEmitter, Step


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-1:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]:",                # 4
    "                min ← j",                      # 5
    "        swap(a[i], a[min])",                   # 6
    "        a[i] is in place",                     # 7
    "    return a",                                 # 8
]


def selection_sort(em: SortEmitter) -> Generator[Step, None, None]:
    n = em.n
    for i in range(n):
        min_idx = i
        em.set_annotations([i], BarState.PIVOT)
        yield em.delay(2)

        for j in range(i + 1, n):
            em.set_annotations([j], BarState.COMPARING)
            em.log(
                f"Comparing array[{j}]={em.value(j)} with current min "
                f"array[{min_idx}]={em.value(min_idx)}"
            )
            em.tally("comparisons")
            yield em.delay(4)

            if em.value(j) < em.value(min_idx):
                if min_idx != i:
                    em.reset([min_idx])
                min_idx = j
                em.set_annotations([min_idx], BarState.PIVOT)
                em.log(f"New min at array[{min_idx}]={em.value(min_idx)}")
                yield em.delay(5)
            else:
                em.reset([j])

        if min_idx != i:
            em.set_annotations([i, min_idx], BarState.SWAPPING)
            em.log(f"Swapping array[{i}] and array[{min_idx}]")
            yield em.delay(6)
            em.swap(i, min_idx)
            yield em.delay(6)

        em.set_annotations([i], BarState.SORTED)
        if min_idx != i:
            em.reset([min_idx])

    em.mark_all_sorted()
    em.set_status("All elements sorted")
    yield em.finish(8)
