"""
Project: DrillTempo
File Name: scheduling/optimizer.py
Description:
    Main scheduling entry point.

    plan_schedule() runs the whole pipeline without touching the drill:
        build_timing_graph → link_passes → earliest_times → allocate_slack

    optimize() plans, then writes every action's speed and wait_before
    in a single pass.  All assignments are computed before the first
    write, so an exception anywhere in the pipeline leaves the drill
    exactly as it was.
"""

from __future__ import annotations

import logging

from drill_tempo.config import DEFAULT_CONFIG, SchedulerConfig
from drill_tempo.core.models import Drill
from drill_tempo.scheduling.allocator import allocate_slack
from drill_tempo.scheduling.builder import build_timing_graph
from drill_tempo.scheduling.models import SchedulePlan
from drill_tempo.scheduling.propagation import earliest_times
from drill_tempo.scheduling.sync import link_passes
from drill_tempo.scheduling.timeline import Timeline, natural_timeline, scheduled_timeline

logger = logging.getLogger(__name__)


def plan_schedule(
    drill: Drill,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> SchedulePlan:
    """Compute the schedule for a drill without modifying it.

    Args:
        drill: Players and their ordered action chains.
        config: Physical bounds, sync radius and propagation semantics.

    Returns:
        SchedulePlan with the timing graph, event times and one
        SpeedAssignment per action.

    Raises:
        ValueError: On duplicate agent ids or cyclic pass dependencies.
    """
    graph = build_timing_graph(drill, config)
    link_passes(graph, drill, config)
    times = earliest_times(graph, config.propagation)
    assignments = allocate_slack(graph, times, config)
    return SchedulePlan(graph=graph, times=times, assignments=assignments)


def apply_plan(drill: Drill, plan: SchedulePlan) -> Drill:
    """Write a plan's speeds and waits onto the drill's actions."""
    by_agent = {agent.agent_id: agent for agent in drill.agents}
    for a in plan.assignments:
        action = by_agent[a.agent_id].actions[a.action_index]
        action.speed = a.speed
        action.wait_before = a.wait_before
    return drill


def optimize(
    drill: Drill,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> Drill:
    """Assign a speed and a pre-action wait to every action of a drill.

    The drill is annotated in place and returned.  Running it again on
    the unchanged drill yields the same values.
    """
    if logger.isEnabledFor(logging.DEBUG):
        _log_timeline("Natural timings (no synchronization)", natural_timeline(drill, config))

    plan = plan_schedule(drill, config)
    apply_plan(drill, plan)

    logger.info(
        "Scheduled %d agents / %d actions: %d sync edges, makespan %.2fs (%s)",
        len(drill.agents), drill.action_count, len(plan.sync_edges),
        plan.makespan, config.propagation.value,
    )
    if logger.isEnabledFor(logging.DEBUG):
        _log_timeline("Scheduled timings", scheduled_timeline(drill, plan.times, config))

    return drill


def _log_timeline(title: str, timeline: Timeline) -> None:
    logger.debug("%s:", title)
    for e in timeline.entries:
        logger.debug(
            "  [%s] action %d (%s): start=%.2fs end=%.2fs wait=%.2fs speed=%s",
            e.agent_id, e.action_index, e.kind, e.start, e.end, e.wait_before,
            "—" if e.speed is None else f"{e.speed:g}",
        )
