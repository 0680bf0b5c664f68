"""
Core drill models shared across all DrillTempo modules.
"""

from drill_tempo.core.models import (
    Action,
    ActionKind,
    Agent,
    Drill,
    PathType,
    Point,
    SpeedGovernor,
)

__all__ = ["Action", "ActionKind", "Agent", "Drill", "PathType", "Point", "SpeedGovernor"]
