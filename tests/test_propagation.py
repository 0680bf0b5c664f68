"""
Project: DrillTempo
File Name: test_propagation.py
Description:
    Tests for earliest-time propagation (critical path and legacy
    shortest path) and cycle rejection.
"""

import math

import pytest

from drill_tempo.config import PropagationMode, SchedulerConfig
from drill_tempo.core.models import Action, ActionKind, Agent, Drill, Point
from drill_tempo.scheduling.builder import build_timing_graph
from drill_tempo.scheduling.models import ORIGIN, TimingGraph
from drill_tempo.scheduling.propagation import earliest_times, topological_order
from drill_tempo.scheduling.sync import link_passes


def _action(kind: ActionKind, x1: float, y1: float, x2: float, y2: float) -> Action:
    return Action(kind=kind, start=Point(x1, y1), end=Point(x2, y2))


def _synced_graph(drill: Drill) -> TimingGraph:
    config = SchedulerConfig()
    graph = build_timing_graph(drill, config)
    link_passes(graph, drill, config)
    return graph


def _late_pass_drill() -> Drill:
    """A runs 350px (1.0s) to (350, 0); B's 1000px pass (2.0s) lands there."""
    return Drill(agents=[
        Agent("A", [
            _action(ActionKind.RUN, 0, 0, 350, 0),
            _action(ActionKind.DRIBBLE, 350, 0, 700, 0),
        ]),
        Agent("B", [_action(ActionKind.PASS, -650, 0, 350, 0)]),
    ])


def _cyclic_drill() -> Drill:
    """A's pass feeds B's run while B's pass feeds A's earlier run."""
    return Drill(agents=[
        Agent("A", [
            _action(ActionKind.RUN, -100, 0, 0, 0),
            _action(ActionKind.PASS, 0, 0, 500, 0),
        ]),
        Agent("B", [
            _action(ActionKind.RUN, 500, 100, 500, 0),
            _action(ActionKind.PASS, 500, 0, 0, 0),
        ]),
    ])


class TestCriticalPath:
    def test_empty_graph(self):
        times = earliest_times(build_timing_graph(Drill()))
        assert times == {ORIGIN: 0.0}

    def test_single_chain_accumulates(self):
        drill = Drill(agents=[Agent("A", [
            _action(ActionKind.RUN, 0, 0, 350, 0),
            _action(ActionKind.TURN, 350, 0, 350, 0),
            _action(ActionKind.PASS, 350, 0, 350, 250),
        ])])
        times = earliest_times(_synced_graph(drill))
        assert times[TimingGraph.start_event("A")] == 0.0
        assert math.isclose(times[TimingGraph.end_event("A", 0)], 1.0)
        assert math.isclose(times[TimingGraph.end_event("A", 1)], 1.5)
        assert math.isclose(times[TimingGraph.end_event("A", 2)], 2.0)

    def test_receiver_waits_for_pass(self):
        times = earliest_times(_synced_graph(_late_pass_drill()))
        assert math.isclose(times[TimingGraph.end_event("A", 0)], 2.0)
        assert math.isclose(times[TimingGraph.end_event("B", 0)], 2.0)

    def test_delay_carries_down_the_chain(self):
        times = earliest_times(_synced_graph(_late_pass_drill()))
        assert math.isclose(times[TimingGraph.end_event("A", 1)], 3.0)

    def test_every_edge_constraint_holds(self):
        graph = _synced_graph(_late_pass_drill())
        times = earliest_times(graph)
        for edge in graph.edges:
            assert times[edge.target] >= times[edge.source] + edge.weight - 1e-9

    def test_origin_is_zero(self):
        times = earliest_times(_synced_graph(_late_pass_drill()))
        assert times[ORIGIN] == 0.0

    def test_all_events_have_times(self):
        graph = _synced_graph(_late_pass_drill())
        assert set(earliest_times(graph)) == set(graph.events)


class TestShortestPath:
    def test_merge_takes_minimum(self):
        graph = _synced_graph(_late_pass_drill())
        times = earliest_times(graph, PropagationMode.SHORTEST_PATH)
        assert math.isclose(times[TimingGraph.end_event("A", 0)], 1.0)
        assert math.isclose(times[TimingGraph.end_event("A", 1)], 2.0)

    def test_origin_is_zero(self):
        graph = _synced_graph(_late_pass_drill())
        assert earliest_times(graph, PropagationMode.SHORTEST_PATH)[ORIGIN] == 0.0

    def test_agrees_with_critical_path_without_merges(self):
        drill = Drill(agents=[
            Agent("A", [_action(ActionKind.RUN, 0, 0, 350, 0), _action(ActionKind.TACKLE, 0, 0, 0, 0)]),
            Agent("B", [_action(ActionKind.PASS, 0, 0, 0, 500)]),
        ])
        graph = _synced_graph(drill)
        crit = earliest_times(graph, PropagationMode.CRITICAL_PATH)
        short = earliest_times(graph, PropagationMode.SHORTEST_PATH)
        for event in graph.events:
            assert math.isclose(crit[event], short[event])

    def test_accepts_plain_string_mode(self):
        graph = _synced_graph(_late_pass_drill())
        times = earliest_times(graph, "shortest_path")
        assert math.isclose(times[TimingGraph.end_event("A", 0)], 1.0)


class TestCycles:
    def test_topological_order_puts_origin_first(self):
        order = topological_order(_synced_graph(_late_pass_drill()))
        assert order[0] == ORIGIN

    @pytest.mark.parametrize("mode", list(PropagationMode))
    def test_cycle_rejected(self, mode):
        graph = _synced_graph(_cyclic_drill())
        with pytest.raises(ValueError, match="Cyclic"):
            earliest_times(graph, mode)
