"""
Project: DrillTempo
File Name: scheduling/builder.py
Description:
    Builds the raw TimingGraph from a Drill.

    Algorithm:
    1. For each agent, create its start event.
    2. Walk the action chain in order; for each action create an end event
       and a chain edge (previous event → end event) weighted by the
       action's minimum duration.
    3. Create the origin event and a zero-weight edge from it to every
       agent's start event, so propagation has a single source.
"""

from __future__ import annotations

from drill_tempo.config import DEFAULT_CONFIG, SchedulerConfig
from drill_tempo.core.models import Drill
from drill_tempo.scheduling.cost import min_duration
from drill_tempo.scheduling.models import ORIGIN, EdgeKind, TimingEdge, TimingGraph


def build_timing_graph(
    drill: Drill,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> TimingGraph:
    """Build the per-agent action chains of a drill as a timing DAG.

    Args:
        drill: The drill description (agents with ordered action chains).
        config: Physical constants used by the cost model.

    Returns:
        A TimingGraph without synchronization edges.  An empty drill
        yields a graph containing only the origin.

    Raises:
        ValueError: If two agents share the same id.
    """
    graph = TimingGraph()
    seen: set[str] = set()

    for agent in drill.agents:
        if agent.agent_id in seen:
            raise ValueError(f"Duplicate agent id {agent.agent_id!r} in drill")
        seen.add(agent.agent_id)

        prev = graph.add_event(TimingGraph.start_event(agent.agent_id))
        for index, action in enumerate(agent.actions):
            end = graph.add_event(TimingGraph.end_event(agent.agent_id, index))
            graph.add_edge(
                TimingEdge(
                    source=prev,
                    target=end,
                    weight=min_duration(action, config),
                    kind=EdgeKind.CHAIN,
                    action=action,
                )
            )
            prev = end

    graph.add_event(ORIGIN)
    for agent in drill.agents:
        graph.add_edge(
            TimingEdge(
                source=ORIGIN,
                target=TimingGraph.start_event(agent.agent_id),
                weight=0.0,
                kind=EdgeKind.ORIGIN,
            )
        )

    return graph
