"""
engine/
-------
Run control, playback & recording layer.

    from engine import SortingEngine, PathfindingEngine, RunController, Outcome
"""

from engine.controller  import Outcome, RunController
from engine.stepper     import Stepper, StepperState, SPEED_PRESETS
from engine.recorder    import Recorder, RunMetrics
from engine.sorting     import SortingEngine, DEFAULT_SORT_DELAY_MS
from engine.pathfinding import PathfindingEngine, DEFAULT_PATH_DELAY_MS

__all__ = [
    "Outcome",
    "RunController",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "SortingEngine",
    "DEFAULT_SORT_DELAY_MS",
    "PathfindingEngine",
    "DEFAULT_PATH_DELAY_MS",
]
