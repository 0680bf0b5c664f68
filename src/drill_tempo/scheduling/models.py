"""
Project: DrillTempo
File Name: scheduling/models.py
Description:
    Data models for drill scheduling.

    A TimingGraph is a DAG of timing events:
      nodes: "agent X may start" / "agent X finished action i" / the origin
      edges: chain edges (one per action, weight = minimum duration),
             sync edges (pass end → receiver end, weight 0) and
             origin edges (origin → every agent start, weight 0)

    The graph is an arena built fresh for every scheduling call and
    discarded afterwards.  SpeedAssignment and SchedulePlan hold the
    allocator's output before it is written back onto the drill.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from drill_tempo.core.models import Action


class EventKind(str, Enum):
    ORIGIN = "origin"
    AGENT_START = "agent_start"
    ACTION_END = "action_end"


class EdgeKind(str, Enum):
    CHAIN = "chain"
    SYNC = "sync"
    ORIGIN = "origin"


@dataclass(frozen=True)
class TimingEvent:
    """A point in time in the drill: an agent becoming free, or the origin."""

    kind: EventKind
    agent_id: str | None = None
    action_index: int | None = None

    @property
    def label(self) -> str:
        if self.kind is EventKind.ORIGIN:
            return "origin"
        if self.kind is EventKind.AGENT_START:
            return f"start:{self.agent_id}"
        return f"end:{self.agent_id}:{self.action_index}"


ORIGIN = TimingEvent(EventKind.ORIGIN)


@dataclass(frozen=True)
class TimingEdge:
    """A directed minimum-delay constraint between two events.

    Chain edges carry a back-reference to the action they represent;
    sync and origin edges carry none.
    """

    source: TimingEvent
    target: TimingEvent
    weight: float
    kind: EdgeKind
    action: Action | None = field(default=None, compare=False, repr=False)

    @property
    def is_sync(self) -> bool:
        return self.kind is EdgeKind.SYNC


@dataclass
class TimingGraph:
    """Directed acyclic graph of timing events for one scheduling call."""

    events: list[TimingEvent] = field(default_factory=list)
    edges: list[TimingEdge] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._known: set[TimingEvent] = set(self.events)
        self._incoming: dict[TimingEvent, list[TimingEdge]] = defaultdict(list)
        self._outgoing: dict[TimingEvent, list[TimingEdge]] = defaultdict(list)
        for edge in self.edges:
            self._index(edge)

    def _index(self, edge: TimingEdge) -> None:
        self._incoming[edge.target].append(edge)
        self._outgoing[edge.source].append(edge)

    def add_event(self, event: TimingEvent) -> TimingEvent:
        if event not in self._known:
            self._known.add(event)
            self.events.append(event)
        return event

    def add_edge(self, edge: TimingEdge) -> TimingEdge:
        if edge.weight < 0:
            raise ValueError(f"Negative edge weight {edge.weight} on {edge.source.label} → {edge.target.label}")
        for event in (edge.source, edge.target):
            if event not in self._known:
                raise ValueError(f"Unknown event {event.label}")
        self.edges.append(edge)
        self._index(edge)
        return edge

    def __contains__(self, event: object) -> bool:
        return event in self._known

    def incoming(self, event: TimingEvent) -> list[TimingEdge]:
        return list(self._incoming.get(event, ()))

    def outgoing(self, event: TimingEvent) -> list[TimingEdge]:
        return list(self._outgoing.get(event, ()))

    def chain_edges(self) -> list[TimingEdge]:
        return [e for e in self.edges if e.kind is EdgeKind.CHAIN]

    def sync_edges(self) -> list[TimingEdge]:
        return [e for e in self.edges if e.kind is EdgeKind.SYNC]

    @staticmethod
    def start_event(agent_id: str) -> TimingEvent:
        return TimingEvent(EventKind.AGENT_START, agent_id=agent_id)

    @staticmethod
    def end_event(agent_id: str, action_index: int) -> TimingEvent:
        return TimingEvent(EventKind.ACTION_END, agent_id=agent_id, action_index=action_index)


# ---------------------------------------------------------------------------
# Allocator output types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SpeedAssignment:
    """Timing decided for one action, before it is written onto the drill."""

    agent_id: str
    action_index: int
    speed: float | None
    wait_before: float

    available: float
    """Time window between the action's start and end events (seconds)."""

    min_duration: float
    """Physical minimum duration — the chain edge's weight (seconds)."""

    @property
    def slack(self) -> float:
        return self.available - self.min_duration


@dataclass(frozen=True)
class SchedulePlan:
    """Everything computed for one drill, without touching the drill.

    times: TimingEvent → earliest time (seconds)
    assignments: one SpeedAssignment per action, in graph order
    """

    graph: TimingGraph
    times: dict[TimingEvent, float]
    assignments: list[SpeedAssignment]

    @property
    def sync_edges(self) -> list[TimingEdge]:
        return self.graph.sync_edges()

    @property
    def makespan(self) -> float:
        """Earliest time at which every agent has finished."""
        return max(self.times.values(), default=0.0)

    def assignment_for(self, agent_id: str, action_index: int) -> SpeedAssignment | None:
        for a in self.assignments:
            if a.agent_id == agent_id and a.action_index == action_index:
                return a
        return None

    def critical_actions(self, tolerance: float = 0.05) -> list[SpeedAssignment]:
        """Actions with no usable slack — the ones setting the drill's pace."""
        return [a for a in self.assignments if a.slack <= tolerance]
