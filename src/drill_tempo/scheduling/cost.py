"""
Project: DrillTempo
File Name: scheduling/cost.py
Description:
    Action cost model — path length and physical minimum duration.

    Length is dispatched on the path type:
      straight  → start→end distance
      freehand  → polyline length, or start→end × curvature factor
                  when the client sent no points

    Minimum duration is dispatched on the action's speed governor:
      ball   (pass, shoot)   → length / ball_speed
      agent  (run, dribble)  → length / max_agent_speed
      fixed  (tackle, turn)  → baseline_duration
"""

from __future__ import annotations

from collections.abc import Callable

from drill_tempo.config import DEFAULT_CONFIG, SchedulerConfig
from drill_tempo.core.models import Action, PathType, Point, SpeedGovernor
from drill_tempo.geometry.distance import point_distance, polyline_length


def _straight_length(action: Action, config: SchedulerConfig) -> float:
    return point_distance(action.start, action.end)


def _freehand_length(action: Action, config: SchedulerConfig) -> float:
    if action.points:
        return polyline_length(action.points)
    return point_distance(action.start, action.end) * config.curvature_factor


_LENGTH_RULES: dict[PathType, Callable[[Action, SchedulerConfig], float]] = {
    PathType.STRAIGHT: _straight_length,
    PathType.FREEHAND: _freehand_length,
}

_DURATION_RULES: dict[SpeedGovernor, Callable[[float, SchedulerConfig], float]] = {
    SpeedGovernor.BALL: lambda length, cfg: length / cfg.ball_speed,
    SpeedGovernor.AGENT: lambda length, cfg: length / cfg.max_agent_speed,
    SpeedGovernor.FIXED: lambda length, cfg: cfg.baseline_duration,
}


def action_length(action: Action, config: SchedulerConfig = DEFAULT_CONFIG) -> float:
    """Distance covered by the action's path (px)."""
    return _LENGTH_RULES[action.path_type](action, config)


def min_duration(action: Action, config: SchedulerConfig = DEFAULT_CONFIG) -> float:
    """Shortest physically possible duration of the action (seconds)."""
    length = action_length(action, config)
    return _DURATION_RULES[action.kind.governor](length, config)


def arrival_point(action: Action) -> Point:
    """Point where the action ends — where a pass lands or a run finishes."""
    return action.arrival_point
