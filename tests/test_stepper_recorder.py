import gc
import weakref

import pytest

from algorithms import get_algorithm
from algorithms.step import SortEmitter
from cells.bar import bars_from_values
from cells.store import SnapshotStore
from engine import SortingEngine
from engine.recorder import Recorder
from engine.stepper import Stepper, StepperState

from conftest import no_sleep


def bubble_gen(values):
    store = SnapshotStore(bars_from_values(values))
    return store, get_algorithm("bubble").fn(SortEmitter(store))


def test_next_step_advances_one_step_at_a_time():
    store, gen = bubble_gen([2, 1])
    seen = []
    stepper = Stepper(on_step=seen.append)
    stepper.start(gen)

    assert stepper.state is StepperState.RUNNING
    assert stepper.current_step is None
    assert stepper.next_step()
    assert stepper.current_step is seen[0]
    assert seen[0].log_line == "Comparing array[0]=2 with array[1]=1"
    # nothing beyond the first step has happened yet
    assert store.log == ("Comparing array[0]=2 with array[1]=1",)

    while stepper.next_step():
        pass
    assert stepper.state is StepperState.FINISHED
    assert stepper.current_step.is_final
    assert stepper.current_step is seen[-1]
    assert not stepper.next_step()


def test_run_sleeps_between_steps_but_not_after_the_last():
    _, gen = bubble_gen([3, 1, 2])
    calls = []
    seen = []
    stepper = Stepper(on_step=seen.append, sleep=calls.append, delay_ms=250)

    final = stepper.run(gen)

    assert final.is_final
    assert len(calls) == len(seen) - 1
    assert all(c == pytest.approx(0.25) for c in calls)


def test_delay_floor():
    stepper = Stepper()
    stepper.set_delay_ms(-5)
    assert stepper.delay_ms == 0


def test_recorder_builds_metrics_from_the_run():
    _, gen = bubble_gen([5, 2, 9, 1, 7])
    seen = []
    rec = Recorder(get_algorithm("bubble"))
    rec.begin()

    def on_step(step):
        seen.append(step)
        rec.record_step(step)

    Stepper(on_step=on_step, sleep=no_sleep).run(gen)
    metrics = rec.finish()

    assert metrics.algo_key == "bubble"
    assert metrics.algo_label == "Bubble Sort"
    assert metrics.total_steps == len(seen)
    assert metrics.log_lines == sum(len(s.log_lines) for s in seen)
    assert metrics.comparisons == seen[-1].metrics["comparisons"]
    assert metrics.path_found is False
    assert metrics.wall_time_ms >= 0


def test_begin_starts_a_fresh_tally():
    rec = Recorder(get_algorithm("bubble"))
    rec.begin()
    Stepper(on_step=rec.record_step, sleep=no_sleep).run(bubble_gen([2, 1])[1])
    rec.begin()
    metrics = rec.finish()

    assert metrics.total_steps == 0
    assert metrics.comparisons == 0


def test_a_run_keeps_only_its_latest_step():
    _, gen = bubble_gen(list(range(40, 0, -1)))
    refs = []
    rec = Recorder(get_algorithm("bubble"))
    rec.begin()

    def on_step(step):
        refs.append(weakref.ref(step))
        rec.record_step(step)

    stepper = Stepper(on_step=on_step, sleep=no_sleep)
    stepper.run(gen)
    gc.collect()

    alive = [r() for r in refs if r() is not None]
    assert alive == [stepper.current_step]
    assert rec.finish().total_steps == len(refs)


def test_engine_does_not_hold_per_step_snapshots(monkeypatch):
    refs = []
    record_step = Recorder.record_step

    def spy(self, step):
        refs.append(weakref.ref(step))
        record_step(self, step)

    monkeypatch.setattr(Recorder, "record_step", spy)
    engine = SortingEngine(sleep=no_sleep)
    engine.set_input(range(30, 0, -1))

    engine.start_sort("insertion", step_delay_ms=0)
    gc.collect()

    assert engine.last_metrics.total_steps == len(refs) > 100
    alive = [r() for r in refs if r() is not None]
    assert alive == [engine.current_step]
