"""
engine/
-------
Playback & comparison layer.

    from engine import Stepper, DebuggerContext, Comparison
"""

from engine.stepper    import Stepper, StepperState, SPEED_PRESETS
from engine.clock      import Ticker
from engine.config     import ComparisonConfig, DEFAULT_CONFIG
from engine.timeline   import build_comparison_timeline, classify_event, describe_action, EventType
from engine.work       import WorkEstimate, estimate_work, work_winner
from engine.scheduler  import Lane, DualLaneScheduler
from engine.resolver   import SpeedVerdict, resolve_speed
from engine.comparison import Comparison
from engine.context    import DebuggerContext, parse_array_input, parse_target, random_array

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Ticker",
    "ComparisonConfig",
    "DEFAULT_CONFIG",
    "build_comparison_timeline",
    "classify_event",
    "describe_action",
    "EventType",
    "WorkEstimate",
    "estimate_work",
    "work_winner",
    "Lane",
    "DualLaneScheduler",
    "SpeedVerdict",
    "resolve_speed",
    "Comparison",
    "DebuggerContext",
    "parse_array_input",
    "parse_target",
    "random_array",
]
