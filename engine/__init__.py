"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.recorder import Recorder, RunSummary, ComparisonResult, Outcome, compare

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunSummary",
    "ComparisonResult",
    "Outcome",
    "compare",
]
