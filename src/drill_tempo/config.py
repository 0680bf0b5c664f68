"""
Project: DrillTempo
File Name: config.py
Description:
    Scheduler tunables.
    Speeds are in canvas units (px) per second, durations in seconds,
    distances in px — the same units the drawing client stores geometry in.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class PropagationMode(str, Enum):
    """How earliest event times are combined at merge points."""

    CRITICAL_PATH = "critical_path"  # max over predecessors (PERT forward pass)
    SHORTEST_PATH = "shortest_path"  # min over predecessors (Dijkstra, legacy)


class SyncPolicy(str, Enum):
    """Which receiving actions a pass is linked to."""

    ALL = "all"          # every run/dribble ending within the sync radius
    NEAREST = "nearest"  # closest in-range run/dribble per receiving agent


@dataclass(frozen=True)
class SchedulerConfig:
    """Physical bounds and matching thresholds for the drill scheduler.

    Defaults mirror the drawing client's animation constants so that the
    computed timings play back as scheduled.
    """

    max_agent_speed: float = 350.0
    min_agent_speed: float = 100.0
    ball_speed: float = 500.0
    baseline_duration: float = 0.5  # tackle / turn, independent of geometry
    curvature_factor: float = 1.2   # freehand path drawn without points
    sync_radius: float = 30.0
    slack_tolerance: float = 0.05
    propagation: PropagationMode = PropagationMode.CRITICAL_PATH
    sync_policy: SyncPolicy = SyncPolicy.ALL

    def __post_init__(self) -> None:
        for name in ("max_agent_speed", "min_agent_speed", "ball_speed"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.min_agent_speed > self.max_agent_speed:
            raise ValueError(
                f"min_agent_speed ({self.min_agent_speed}) exceeds "
                f"max_agent_speed ({self.max_agent_speed})"
            )
        for name in ("baseline_duration", "curvature_factor", "sync_radius", "slack_tolerance"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        # Accept plain strings from CLI / JSON callers
        object.__setattr__(self, "propagation", PropagationMode(self.propagation))
        object.__setattr__(self, "sync_policy", SyncPolicy(self.sync_policy))

    def replace(self, **overrides) -> SchedulerConfig:
        """Return a copy with the given fields overridden."""
        return replace(self, **overrides)


# Default configuration — used when no overrides are supplied.
DEFAULT_CONFIG = SchedulerConfig()
