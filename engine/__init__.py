"""
engine/
-------
State store, playback & recording layer.

    from engine import VisualizerState, ReplayEngine, TraversalPlayer
    from engine import Recorder, compare
"""

from engine.replay    import (ReplayEngine, ReplayState, ReplayBusyError, delay_for_speed, clamp_speed,
                              MIN_SPEED, MAX_SPEED, DEFAULT_SPEED, CHECKPOINT_INTERVAL)
from engine.effects   import apply_step
from engine.state     import VisualizerState
from engine.traversal import TraversalPlayer
from engine.recorder  import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "ReplayEngine",
    "ReplayState",
    "ReplayBusyError",
    "delay_for_speed",
    "clamp_speed",
    "MIN_SPEED",
    "MAX_SPEED",
    "DEFAULT_SPEED",
    "CHECKPOINT_INTERVAL",
    "apply_step",
    "VisualizerState",
    "TraversalPlayer",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
