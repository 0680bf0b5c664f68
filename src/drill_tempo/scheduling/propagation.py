"""
Project: DrillTempo
File Name: scheduling/propagation.py
Description:
    Earliest-time propagation over a TimingGraph.

    Two semantics are available (see PropagationMode):

    1. CRITICAL_PATH (default) — forward pass in topological order,
       t(v) = max over incoming edges (u→v) of t(u) + w(u→v).
       An event happens only once ALL its prerequisites have, so a
       receiver finishes no earlier than the pass arriving to it.
       Every edge constraint t(v) ≥ t(u) + w holds.

    2. SHORTEST_PATH — single-source Dijkstra from the origin,
       t(v) = min over incoming paths.  Kept for compatibility with the
       legacy optimizer; at merge points (chain edge + sync edges) it can
       under-constrain the later event, so only the edges on the
       shortest-path tree are guaranteed to hold.
"""

from __future__ import annotations

import heapq
from graphlib import CycleError, TopologicalSorter

from drill_tempo.config import PropagationMode
from drill_tempo.scheduling.models import ORIGIN, TimingEvent, TimingGraph


def earliest_times(
    graph: TimingGraph,
    mode: PropagationMode = PropagationMode.CRITICAL_PATH,
) -> dict[TimingEvent, float]:
    """Compute the earliest time of every event, with the origin fixed at 0.

    Args:
        graph: A synchronized timing graph.
        mode: Merge semantics — max (critical path) or min (shortest path).

    Returns:
        TimingEvent → earliest time in seconds, for every event of the graph.

    Raises:
        ValueError: If the graph contains a dependency cycle.
    """
    if PropagationMode(mode) is PropagationMode.SHORTEST_PATH:
        return _shortest_path_times(graph)
    return _critical_path_times(graph)


def topological_order(graph: TimingGraph) -> list[TimingEvent]:
    """Events ordered so that every edge points forward.

    Raises:
        ValueError: If the graph contains a dependency cycle.
    """
    sorter: TopologicalSorter = TopologicalSorter()
    for event in graph.events:
        sorter.add(event, *(e.source for e in graph.incoming(event)))
    try:
        return list(sorter.static_order())
    except CycleError as exc:
        cycle = " → ".join(ev.label for ev in exc.args[1])
        raise ValueError(f"Cyclic action dependencies: {cycle}") from exc


def _critical_path_times(graph: TimingGraph) -> dict[TimingEvent, float]:
    """Longest-path-to-node forward pass (PERT earliest times)."""
    times: dict[TimingEvent, float] = {}
    for event in topological_order(graph):
        incoming = graph.incoming(event)
        if event == ORIGIN or not incoming:
            times[event] = 0.0
            continue
        times[event] = max(0.0, *(times[e.source] + e.weight for e in incoming))
    return times


def _shortest_path_times(graph: TimingGraph) -> dict[TimingEvent, float]:
    """Dijkstra from the origin over non-negative edge weights."""
    # Cycles are rejected in both modes
    topological_order(graph)

    dist: dict[TimingEvent, float] = {ev: float("inf") for ev in graph.events}
    dist[ORIGIN] = 0.0

    # min-heap: (distance, tiebreak, event) — events are not orderable
    heap: list[tuple[float, int, TimingEvent]] = [(0.0, 0, ORIGIN)]
    counter = 1
    visited: set[TimingEvent] = set()

    while heap:
        d, _, u = heapq.heappop(heap)
        if u in visited:
            continue
        visited.add(u)
        for edge in graph.outgoing(u):
            alt = d + edge.weight
            if alt < dist[edge.target]:
                dist[edge.target] = alt
                heapq.heappush(heap, (alt, counter, edge.target))
                counter += 1

    # Unreachable events cannot occur in a built graph; treat them as t=0
    return {ev: (0.0 if t == float("inf") else t) for ev, t in dist.items()}
