"""Langton's ant simulator package exports."""
from .behavior import Behavior, Color, ConditionRule, TurnRule, PRESETS, preset
from .config import SceneConfig, ANT_COUNTS
from .errors import InvariantViolation, UnknownAgentCount, UnknownBehavior
from .geometry import Direction, LoopValue, Position, Vector, ROW_STEP, COL_STEP
from .state import Ant, Field, Scene, starting_ants

__all__ = [
    "Behavior",
    "Color",
    "ConditionRule",
    "TurnRule",
    "PRESETS",
    "preset",
    "SceneConfig",
    "ANT_COUNTS",
    "InvariantViolation",
    "UnknownAgentCount",
    "UnknownBehavior",
    "Direction",
    "LoopValue",
    "Position",
    "Vector",
    "ROW_STEP",
    "COL_STEP",
    "Ant",
    "Field",
    "Scene",
    "starting_ants",
]
