"""
step.py — Algorithm Step Snapshot & Emitter
============================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The whole cell collection (bars, or the grid as row tuples)
    • Which cells changed annotation since the previous frame
    • The log lines written since the previous frame
    • The status line and which line of pseudocode is executing
    • Running counters (comparisons, swaps, nodes visited, …)

Algorithms never build Steps by hand.  They drive an emitter:

    em.set_annotations([j, j + 1], BarState.COMPARING)
    em.log("Comparing …")
    yield em.delay(3)

`delay()` is the ONLY suspension point.  The generator stops there and
the driver (engine.stepper.Stepper) waits the configured interval before
pulling the next Step.  Everything published before the yield is already
visible in the SnapshotStore.

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT.  The emitter is the
    only writer; the stepper / recorder / renderer are pure readers.
  - `delta` only holds cells whose annotation CHANGED since the previous
    Step, so a renderer can patch instead of redraw.
  - The emitter publishes to the store on every mutation, not only at
    delay points.  A reader never sees a swap half done because a swap is
    one publish.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from cells.bar   import Bar, BarState
from cells.grid  import Grid, Position
from cells.node  import NodeVis
from cells.store import SnapshotStore


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        cells           : Published snapshot at the moment of the step.
        log_lines       : Log lines added since the previous step, oldest first.
        delta           : {position: annotation_value} — only cells that CHANGED.
        status          : Status line at the moment of the step.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        metrics         : Running tally: comparisons, swaps, nodes_visited, …
        is_final        : True on the very last step of the run.
    """

    step_number:      int                   = 0
    cells:            Tuple[Any, ...]       = ()
    log_lines:        Tuple[str, ...]       = ()
    delta:            Dict[Hashable, str]   = field(default_factory=dict)
    status:           str                   = ""
    pseudocode_line:  int                   = 0
    metrics:          Dict[str, Any]        = field(default_factory=dict)
    is_final:         bool                  = False

    @property
    def log_line(self) -> str:
        """Most recent log line of this step ("" when it wrote none)."""
        return self.log_lines[-1] if self.log_lines else ""


# ---------------------------------------------------------------------------
# Base emitter
# ---------------------------------------------------------------------------
class StepEmitter:
    """
    Shared machinery: step numbering, pending log lines, annotation deltas
    and metrics.  Subclasses own the working copy of the cells.
    """

    METRIC_KEYS: Tuple[str, ...] = ()

    def __init__(self, store: SnapshotStore):
        self.store:    SnapshotStore          = store
        self.metrics:  Dict[str, Any]         = {k: 0 for k in self.METRIC_KEYS}
        self._step_no: int                    = 0
        self._pending: List[str]              = []
        self._delta:   Dict[Hashable, str]    = {}

    # -- subclass hooks --
    def _valid(self, pos: Any) -> bool:
        raise NotImplementedError

    def _annotate(self, pos: Any, annotation: Any) -> None:
        raise NotImplementedError

    def snapshot(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    # -- helpers --
    def publish(self) -> None:
        self.store.replace(self.snapshot())

    def set_annotations(self, positions: Iterable[Any], annotation: Any) -> None:
        """Overwrite the annotation of every valid position, then publish."""
        for pos in positions:
            if self._valid(pos):
                self._annotate(pos, annotation)
        self.publish()

    def log(self, message: str) -> None:
        self.store.append_log(message)
        self._pending.append(message)

    def set_status(self, message: str) -> None:
        """Status line and log line in one go."""
        self.store.set_status(message)
        self.log(message)

    def tally(self, counter: str, amount: int = 1) -> None:
        self.metrics[counter] = self.metrics.get(counter, 0) + amount

    def delay(self, line: int = 0) -> Step:
        """Build the Step the algorithm yields at a suspension point."""
        return self._build(line, is_final=False)

    def finish(self, line: int = 0) -> Step:
        """Last Step of a run; the driver does not wait after it."""
        return self._build(line, is_final=True)

    def _build(self, line: int, is_final: bool) -> Step:
        step = Step(
            step_number=self._step_no,
            cells=self.snapshot(),
            log_lines=tuple(self._pending),
            delta=dict(self._delta),
            status=self.store.status,
            pseudocode_line=line,
            metrics=dict(self.metrics),
            is_final=is_final,
        )
        self._step_no += 1
        self._pending = []
        self._delta   = {}
        return step


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
class SortEmitter(StepEmitter):
    """Works on integer positions of a bar list."""

    METRIC_KEYS = ("comparisons", "swaps")

    def __init__(self, store: SnapshotStore, bars: Optional[Iterable[Bar]] = None):
        super().__init__(store)
        self._bars: List[Bar] = list(store.current() if bars is None else bars)

    @property
    def n(self) -> int:
        return len(self._bars)

    def value(self, i: int) -> int:
        return self._bars[i].value

    def snapshot(self) -> Tuple[Bar, ...]:
        return tuple(self._bars)

    def _valid(self, pos: Any) -> bool:
        return isinstance(pos, int) and 0 <= pos < len(self._bars)

    def _annotate(self, pos: int, annotation: BarState) -> None:
        if self._bars[pos].state is not annotation:
            self._bars[pos] = self._bars[pos].with_state(annotation)
            self._delta[pos] = annotation.value

    # -- mutations --
    def swap(self, i: int, j: int) -> None:
        """Exchange the bars at i and j (one publish, one swap counted)."""
        self._bars[i], self._bars[j] = self._bars[j], self._bars[i]
        self._delta[i] = self._bars[i].state.value
        self._delta[j] = self._bars[j].state.value
        self.tally("swaps")
        self.publish()

    def rotate(self, i: int, j: int) -> None:
        """Move the bar at j to i, shifting i..j-1 one slot right."""
        if j <= i:
            return
        moved = self._bars.pop(j)
        self._bars.insert(i, moved)
        for k in range(i, j + 1):
            self._delta[k] = self._bars[k].state.value
        self.tally("swaps")
        self.publish()

    def reset(self, positions: Iterable[int]) -> None:
        """Back to DEFAULT, except bars already SORTED."""
        for pos in positions:
            if self._valid(pos) and self._bars[pos].state is not BarState.SORTED:
                self._annotate(pos, BarState.DEFAULT)
        self.publish()

    def mark_all_sorted(self) -> None:
        self.set_annotations(range(len(self._bars)), BarState.SORTED)


# ---------------------------------------------------------------------------
# Pathfinding
# ---------------------------------------------------------------------------
class GridEmitter(StepEmitter):
    """Works on (row, col) positions of a Grid."""

    METRIC_KEYS = ("nodes_visited", "path_length")

    def __init__(self, store: SnapshotStore, grid: Grid):
        super().__init__(store)
        self.grid: Grid = grid
        self.metrics["path_found"] = False

    def snapshot(self):
        return self.grid.snapshot()

    def _valid(self, pos: Any) -> bool:
        try:
            row, col = pos
        except (TypeError, ValueError):
            return False
        return self.grid.in_bounds(row, col)

    def _annotate(self, pos: Position, annotation: NodeVis) -> None:
        row, col = pos
        node = self.grid.node(row, col)
        if node.vis is not annotation:
            self.grid.set_node(node.with_vis(annotation))
            self._delta[(row, col)] = annotation.value

    def mark_visited(self, pos: Position) -> None:
        """Count the expansion; paint it unless it is START / END."""
        self.tally("nodes_visited")
        if not self.grid.node(*pos).is_terminal:
            self.set_annotations([pos], NodeVis.VISITED)

    def mark_path(self, pos: Position) -> None:
        if not self.grid.node(*pos).is_terminal:
            self.set_annotations([pos], NodeVis.PATH)
