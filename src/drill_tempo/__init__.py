"""
DrillTempo — timing scheduler for multi-player football drills.

Usage::

    from drill_tempo import load_drill, optimize, save_drill

    drill = load_drill("drill.json")
    optimize(drill)          # writes speed / wait_before on every action
    save_drill(drill, "drill.scheduled.json")
"""

from importlib.metadata import version
__version__ = version("drill-tempo")

# Configuration
from drill_tempo.config import DEFAULT_CONFIG, PropagationMode, SchedulerConfig, SyncPolicy

# Core models
from drill_tempo.core.models import Action, ActionKind, Agent, Drill, PathType, Point

# Scheduling
from drill_tempo.scheduling.models import SchedulePlan, SpeedAssignment
from drill_tempo.scheduling.optimizer import optimize, plan_schedule
from drill_tempo.scheduling.timeline import (
    Timeline,
    idle_time,
    natural_timeline,
    scheduled_timeline,
)

# Data
from drill_tempo.data.drill_json import drill_to_dict, load_drill, parse_drill, save_drill

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "PropagationMode",
    "SchedulerConfig",
    "SyncPolicy",
    # Core
    "Action",
    "ActionKind",
    "Agent",
    "Drill",
    "PathType",
    "Point",
    # Scheduling
    "SchedulePlan",
    "SpeedAssignment",
    "Timeline",
    "idle_time",
    "natural_timeline",
    "optimize",
    "plan_schedule",
    "scheduled_timeline",
    # Data
    "drill_to_dict",
    "load_drill",
    "parse_drill",
    "save_drill",
]
