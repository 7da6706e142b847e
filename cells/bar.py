"""
bar.py — Sorting Bar
====================
One element of the array being sorted.  Carries its integer value and a
visual state so the renderer can colour-code bars as Comparing / Swapping /
Pivot / Sorted exactly as the algorithm touches them.

Design decisions:
  - Bars are frozen.  An algorithm never edits a bar in place; it swaps
    bars between positions or replaces one with `with_state()`.  That way
    every published snapshot is safe to hand to another thread.
  - `id` is the bar's index in the submitted input.  Equal values keep
    distinct ids, which is how stability is observed.  It never takes part
    in ordering.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Tuple


# ---------------------------------------------------------------------------
# Bar State Enum: visual encoding for the renderer
# ---------------------------------------------------------------------------
class BarState(Enum):
    DEFAULT   = "default"     # neutral
    COMPARING = "comparing"   # two bars being compared RIGHT NOW
    SWAPPING  = "swapping"    # about to exchange / shift
    PIVOT     = "pivot"       # quick-sort pivot, selection-sort running min, insertion key
    SORTED    = "sorted"      # in its final position


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Bar:
    value: int
    state: BarState = BarState.DEFAULT
    id:    int      = 0

    def with_state(self, state: BarState) -> "Bar":
        if state is self.state:
            return self
        return replace(self, state=state)

    def to_dict(self) -> dict:
        return {"value": self.value, "state": self.state.value, "id": self.id}

    def __repr__(self) -> str:
        return f"Bar({self.value}, {self.state.value}, id={self.id})"


def bars_from_values(values: Iterable[int]) -> Tuple[Bar, ...]:
    """Fresh DEFAULT bars, ids numbered by input position."""
    return tuple(Bar(value=int(v), id=i) for i, v in enumerate(values))


def values_of(bars: Iterable[Bar]) -> List[int]:
    return [b.value for b in bars]
