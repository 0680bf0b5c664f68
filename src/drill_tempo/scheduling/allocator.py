"""
Project: DrillTempo
File Name: scheduling/allocator.py
Description:
    Slack allocator — turns propagated event times into a speed and a
    pre-action wait for every action.

    For each chain edge:
        available = t(end) − t(start)
        slack     = available − min_duration

    slack > tolerance  → slow the action down to fill its window:
        speed = floor(length / available)
        if that is below min_agent_speed for a player-governed action,
        run at min_agent_speed and hold the remainder as wait_before.
    otherwise          → critical: run/dribble at max_agent_speed, other
                         kinds keep an unset speed; no wait.
"""

from __future__ import annotations

import math

from drill_tempo.config import DEFAULT_CONFIG, SchedulerConfig
from drill_tempo.core.models import SpeedGovernor
from drill_tempo.scheduling.cost import action_length
from drill_tempo.scheduling.models import SpeedAssignment, TimingEvent, TimingGraph


def allocate_slack(
    graph: TimingGraph,
    times: dict[TimingEvent, float],
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> list[SpeedAssignment]:
    """Decide speed / wait_before for every action in the graph.

    Args:
        graph: The synchronized timing graph.
        times: Earliest event times from earliest_times().
        config: Speed bounds and slack tolerance.

    Returns:
        One SpeedAssignment per chain edge.  Nothing is written to the
        drill here; see optimizer.apply_plan().
    """
    assignments: list[SpeedAssignment] = []

    for edge in graph.chain_edges():
        action = edge.action
        available = times.get(edge.target, 0.0) - times.get(edge.source, 0.0)
        slack = available - edge.weight
        governor = action.kind.governor

        speed: float | None
        wait = 0.0

        if slack > config.slack_tolerance:
            length = action_length(action, config)
            desired = length / available
            if governor is SpeedGovernor.BALL or desired >= config.min_agent_speed:
                speed = math.floor(desired)
            else:
                speed = config.min_agent_speed
                travel = length / config.min_agent_speed
                wait = available - travel
        elif governor is SpeedGovernor.AGENT:
            speed = config.max_agent_speed
        else:
            speed = None

        assignments.append(
            SpeedAssignment(
                agent_id=edge.target.agent_id,
                action_index=edge.target.action_index,
                speed=speed,
                wait_before=wait,
                available=available,
                min_duration=edge.weight,
            )
        )

    return assignments
