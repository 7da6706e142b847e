import pytest

from cells.bar import BarState
from cells.grid import GridMode
from cells.node import NodeRole, NodeVis
from engine import Outcome, PathfindingEngine, RunController, SortingEngine

from conftest import no_sleep


# ---------------------------------------------------------------------------
# Sorting engine
# ---------------------------------------------------------------------------
def test_sorting_engine_classroom_run():
    engine = SortingEngine(sleep=no_sleep)
    assert engine.set_input([5, 2, 9, 1, 7]) is Outcome.OK

    assert engine.start_sort("bubble") is Outcome.OK

    assert [b.value for b in engine.bars] == [1, 2, 5, 7, 9]
    assert all(b.state is BarState.SORTED for b in engine.bars)
    assert engine.log[0] == "All elements sorted"
    assert engine.status == "All elements sorted"
    assert not engine.is_running


def test_start_with_empty_input_is_ignored():
    engine = SortingEngine(sleep=no_sleep)
    assert engine.start_sort("quick") is Outcome.IGNORED

    engine.set_input([])
    assert engine.start_sort("quick") is Outcome.IGNORED
    assert engine.last_metrics is None
    assert engine.current_step is None
    assert not engine.is_running


def test_unknown_algorithm_raises():
    engine = SortingEngine(sleep=no_sleep)
    engine.set_input([1])
    with pytest.raises(ValueError):
        engine.start_sort("bogo")
    with pytest.raises(ValueError):
        engine.start_sort("bfs")
    assert not engine.is_running


def test_set_input_clears_log_and_status():
    engine = SortingEngine(sleep=no_sleep)
    engine.set_input([2, 1])
    engine.start_sort("selection")
    assert engine.log

    engine.set_input([3, 4])
    assert engine.log == ()
    assert engine.status == ""
    assert [b.state for b in engine.bars] == [BarState.DEFAULT, BarState.DEFAULT]


def test_rerun_on_sorted_bars_starts_from_default_states():
    engine = SortingEngine(sleep=no_sleep)
    engine.set_input([3, 1, 2])
    engine.start_sort("merge")

    published = []
    engine.store.subscribe(lambda s, topic: published.append(s.current()) if topic == "cells" else None)
    engine.start_sort("merge")

    assert not any(b.state is BarState.SORTED for b in published[0])
    assert engine.current_step.is_final


def test_metrics_are_recorded():
    engine = SortingEngine(sleep=no_sleep)
    engine.set_input([5, 2, 9, 1, 7])
    engine.start_sort("bubble")

    m = engine.last_metrics
    assert m.algo_key == "bubble"
    assert m.total_steps == engine.current_step.step_number + 1
    assert m.comparisons > 0
    assert m.swaps > 0
    assert m.log_lines == len(engine.log)


def test_second_start_while_running_is_ignored(gated_sleep):
    engine = SortingEngine(sleep=gated_sleep)
    engine.set_input([5, 2, 9, 1, 7])

    assert engine.start_sort("bubble", blocking=False) is Outcome.OK
    assert gated_sleep.entered.wait(5)
    assert engine.is_running

    assert engine.start_sort("quick", blocking=False) is Outcome.IGNORED
    assert engine.set_input([1, 2]) is Outcome.IGNORED

    gated_sleep.gate.set()
    assert engine.wait(5)
    assert not engine.is_running
    assert [b.value for b in engine.bars] == [1, 2, 5, 7, 9]
    assert engine.last_metrics.algo_key == "bubble"


def test_step_delay_can_change_mid_run(gated_sleep):
    engine = SortingEngine(sleep=gated_sleep)
    engine.set_input([3, 2, 1])

    engine.start_sort("bubble", step_delay_ms=500, blocking=False)
    assert gated_sleep.entered.wait(5)
    engine.set_step_delay(10)
    gated_sleep.gate.set()
    assert engine.wait(5)

    assert gated_sleep.calls[0] == pytest.approx(0.5)
    assert gated_sleep.calls[-1] == pytest.approx(0.01)


def test_zero_delay_never_sleeps():
    calls = []
    engine = SortingEngine(sleep=calls.append)
    engine.set_input([2, 1])
    engine.start_sort("insertion", step_delay_ms=0)
    assert calls == []


# ---------------------------------------------------------------------------
# Pathfinding engine
# ---------------------------------------------------------------------------
def place(engine, start=(0, 0), end=(9, 9)):
    if start is not None:
        engine.set_mode(GridMode.SET_START)
        engine.on_cell_tapped(*start)
    if end is not None:
        engine.set_mode(GridMode.SET_END)
        engine.on_cell_tapped(*end)


def vis_count(engine, vis):
    return sum(1 for row in engine.grid for n in row if n.vis is vis)


def test_pathfinding_engine_corner_to_corner():
    engine = PathfindingEngine(sleep=no_sleep)
    place(engine)

    assert engine.run_pathfinding("bfs") is Outcome.OK

    assert engine.status == "Completed. Path length: 18"
    assert vis_count(engine, NodeVis.PATH) == 17
    assert list(reversed(engine.log))[0] == "Starting BFS..."
    assert engine.last_metrics.path_length == 18
    assert engine.last_metrics.path_found


def test_missing_end_fails_without_traversal():
    engine = PathfindingEngine(sleep=no_sleep)
    place(engine, end=None)

    assert engine.run_pathfinding("dijkstra") is Outcome.PRECONDITION_FAILED
    assert engine.status == "Place an End first"
    assert engine.log[:2] == ("Place an End first", "Starting Dijkstra's...")
    assert engine.current_step is None
    assert vis_count(engine, NodeVis.VISITED) == 0
    assert not engine.is_running


def test_missing_both_endpoints_message():
    engine = PathfindingEngine(sleep=no_sleep)
    assert engine.run_pathfinding("dfs") is Outcome.PRECONDITION_FAILED
    assert engine.status == "Place a Start and an End first"


def test_each_run_starts_from_a_clean_grid():
    engine = PathfindingEngine(sleep=no_sleep)
    place(engine)
    engine.run_pathfinding("dfs")
    assert vis_count(engine, NodeVis.PATH) > 17

    engine.run_pathfinding("bfs")
    assert vis_count(engine, NodeVis.PATH) == 17


def test_tap_applies_the_active_mode():
    engine = PathfindingEngine(sleep=no_sleep)
    assert engine.on_cell_tapped(3, 3) is Outcome.IGNORED   # mode NONE

    engine.set_mode("draw_barrier")
    assert engine.on_cell_tapped(3, 3) is Outcome.OK
    assert engine.grid[3][3].role is NodeRole.BARRIER
    assert engine.on_cell_tapped(10, 3) is Outcome.IGNORED


def test_invalid_mode_raises():
    engine = PathfindingEngine(sleep=no_sleep)
    with pytest.raises(ValueError):
        engine.set_mode("teleport")


def test_edits_are_rejected_while_running(gated_sleep):
    engine = PathfindingEngine(sleep=gated_sleep)
    place(engine)
    engine.set_mode(GridMode.DRAW_BARRIER)

    assert engine.run_pathfinding("bfs", blocking=False) is Outcome.OK
    assert gated_sleep.entered.wait(5)

    assert engine.on_cell_tapped(5, 5) is Outcome.IGNORED
    assert engine.set_mode(GridMode.SET_START) is Outcome.IGNORED
    assert engine.clear_grid() is Outcome.IGNORED
    assert engine.run_pathfinding("dfs") is Outcome.IGNORED

    gated_sleep.gate.set()
    assert engine.wait(5)
    assert engine.grid[5][5].role is NodeRole.NORMAL
    assert engine.mode is GridMode.DRAW_BARRIER


def test_clear_grid_resets_everything():
    engine = PathfindingEngine(sleep=no_sleep)
    place(engine)
    engine.run_pathfinding("bfs")

    assert engine.clear_grid() is Outcome.OK
    assert all(n.role is NodeRole.NORMAL and n.vis is NodeVis.NONE for row in engine.grid for n in row)
    assert engine.log == ()
    assert engine.status == ""


def test_custom_grid_size():
    engine = PathfindingEngine(rows=4, cols=6, sleep=no_sleep)
    place(engine, (0, 0), (3, 5))
    engine.run_pathfinding("bfs")

    assert (engine.rows, engine.cols) == (4, 6)
    assert engine.status == "Completed. Path length: 8"


# ---------------------------------------------------------------------------
# Shared controller
# ---------------------------------------------------------------------------
def test_shared_controller_is_single_flight_across_engines(gated_sleep):
    controller = RunController()
    sorter = SortingEngine(sleep=gated_sleep, controller=controller)
    finder = PathfindingEngine(sleep=no_sleep, controller=controller)
    sorter.set_input([2, 1])
    place(finder)

    sorter.start_sort("bubble", blocking=False)
    assert gated_sleep.entered.wait(5)

    assert finder.run_pathfinding("bfs") is Outcome.IGNORED
    assert finder.is_running

    gated_sleep.gate.set()
    assert sorter.wait(5)
    assert finder.run_pathfinding("bfs") is Outcome.OK


def test_controller_releases_after_a_failing_job():
    controller = RunController()
    assert controller.try_acquire()

    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        controller.launch(boom)
    assert not controller.is_running
    assert controller.try_acquire()


def test_dfs_on_a_large_grid_finishes():
    engine = PathfindingEngine(rows=40, cols=40, sleep=no_sleep)
    place(engine, (0, 0), (0, 39))

    assert engine.run_pathfinding("dfs", 0) is Outcome.OK
    assert engine.status.startswith("Completed. Path length: ")
    assert engine.last_metrics.path_found
    assert engine.last_metrics.path_length >= 39


def test_dfs_on_a_large_walled_off_grid_reports_no_path():
    engine = PathfindingEngine(rows=40, cols=40, sleep=no_sleep)
    place(engine, (0, 0), (39, 39))
    engine.set_mode(GridMode.DRAW_BARRIER)
    engine.on_cell_tapped(38, 39)
    engine.on_cell_tapped(39, 38)

    assert engine.run_pathfinding("dfs", 0) is Outcome.OK
    assert engine.status == "No path found."
    assert engine.last_metrics.nodes_visited == 40 * 40 - 3



class CountingController(RunController):
    def __init__(self):
        super().__init__()
        self.acquired = 0

    def try_acquire(self):
        ok = super().try_acquire()
        self.acquired += ok
        return ok


def test_set_mode_takes_the_controller_like_other_edits():
    controller = CountingController()
    engine = PathfindingEngine(sleep=no_sleep, controller=controller)

    assert engine.set_mode(GridMode.SET_END) is Outcome.OK
    assert controller.acquired == 1
    assert engine.mode is GridMode.SET_END
    assert not controller.is_running

    assert controller.try_acquire()
    assert engine.set_mode(GridMode.SET_START) is Outcome.IGNORED
    assert engine.mode is GridMode.SET_END
    controller.release()
