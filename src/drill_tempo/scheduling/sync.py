"""
Project: DrillTempo
File Name: scheduling/sync.py
Description:
    Synchronization linker — ties each pass to the run/dribble that
    receives it.

    A pass is considered received by another agent's run or dribble when
    the two actions end strictly closer than ``sync_radius`` px apart.
    For each such pair a zero-weight sync edge (pass end → receiver end)
    is added: the receiver cannot be "done" before the ball arrives.

    All pass/candidate distances are computed as one matrix.  With
    SyncPolicy.ALL every candidate in range is linked (ambiguous drawings
    produce several edges); with SyncPolicy.NEAREST only the closest
    in-range candidate of each receiving agent is linked.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass

from drill_tempo.config import DEFAULT_CONFIG, SchedulerConfig, SyncPolicy
from drill_tempo.core.models import ActionKind, Drill, Point
from drill_tempo.geometry.distance import pairwise_distances
from drill_tempo.scheduling.cost import arrival_point
from drill_tempo.scheduling.models import EdgeKind, TimingEdge, TimingGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Endpoint:
    agent_id: str
    action_index: int
    point: Point


def _collect(drill: Drill) -> tuple[list[_Endpoint], list[_Endpoint]]:
    """Split action endpoints into passes and potential receptions."""
    passes: list[_Endpoint] = []
    receptions: list[_Endpoint] = []
    for agent in drill.agents:
        for index, action in enumerate(agent.actions):
            ep = _Endpoint(agent.agent_id, index, arrival_point(action))
            if action.kind is ActionKind.PASS:
                passes.append(ep)
            elif action.kind.can_receive:
                receptions.append(ep)
    return passes, receptions


def link_passes(
    graph: TimingGraph,
    drill: Drill,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> list[TimingEdge]:
    """Add sync edges between passes and the actions that receive them.

    Args:
        graph: Graph built by build_timing_graph() for the same drill.
        drill: The drill whose geometry decides the matches.
        config: Supplies sync_radius and sync_policy.

    Returns:
        The sync edges that were added (also present in ``graph``).
        A pass with no receiver in range adds nothing.
    """
    passes, receptions = _collect(drill)
    if not passes or not receptions:
        return []

    dist = pairwise_distances(
        [p.point for p in passes],
        [r.point for r in receptions],
    )

    added: list[TimingEdge] = []
    for i, sender in enumerate(passes):
        # receiving agent → [(distance, candidate)] for candidates in range
        in_range: dict[str, list[tuple[float, _Endpoint]]] = defaultdict(list)
        nearest_miss: dict[str, tuple[float, _Endpoint]] = {}

        for j, candidate in enumerate(receptions):
            if candidate.agent_id == sender.agent_id:
                continue
            d = float(dist[i, j])
            if d < config.sync_radius:
                in_range[candidate.agent_id].append((d, candidate))
            else:
                best = nearest_miss.get(candidate.agent_id)
                if best is None or d < best[0]:
                    nearest_miss[candidate.agent_id] = (d, candidate)

        for receiver_id, (d, candidate) in nearest_miss.items():
            if receiver_id not in in_range:
                logger.debug(
                    "No sync: pass %s[%d] → nearest %s[%d] at %.0fpx (radius %.0fpx)",
                    sender.agent_id, sender.action_index,
                    candidate.agent_id, candidate.action_index,
                    d, config.sync_radius,
                )

        for matches in in_range.values():
            if config.sync_policy is SyncPolicy.NEAREST:
                matches = [min(matches, key=lambda m: m[0])]
            for d, candidate in matches:
                edge = graph.add_edge(
                    TimingEdge(
                        source=TimingGraph.end_event(sender.agent_id, sender.action_index),
                        target=TimingGraph.end_event(candidate.agent_id, candidate.action_index),
                        weight=0.0,
                        kind=EdgeKind.SYNC,
                    )
                )
                added.append(edge)
                logger.debug(
                    "Sync: pass %s[%d] → receiver %s[%d] (dist=%.0fpx)",
                    sender.agent_id, sender.action_index,
                    candidate.agent_id, candidate.action_index, d,
                )

    return added
