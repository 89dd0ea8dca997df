"""
engine/
-------
Search engine, playback & recording layer.

    from engine import SearchEngine, create, Stepper, Recorder, compare
"""

from engine.search   import SearchEngine, create, advance, is_terminal, reconstruct_path
from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, DEFAULT_MAX_STEPS
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare, compare_strategies

__all__ = [
    "SearchEngine",
    "create",
    "advance",
    "is_terminal",
    "reconstruct_path",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "DEFAULT_MAX_STEPS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "compare_strategies",
]
