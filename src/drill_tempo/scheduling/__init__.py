"""Drill scheduling — timing graph, synchronization, propagation and pacing."""

from drill_tempo.scheduling.allocator import allocate_slack
from drill_tempo.scheduling.builder import build_timing_graph
from drill_tempo.scheduling.cost import action_length, arrival_point, min_duration
from drill_tempo.scheduling.models import (
    EdgeKind,
    EventKind,
    SchedulePlan,
    SpeedAssignment,
    TimingEdge,
    TimingEvent,
    TimingGraph,
)
from drill_tempo.scheduling.optimizer import apply_plan, optimize, plan_schedule
from drill_tempo.scheduling.propagation import earliest_times, topological_order
from drill_tempo.scheduling.sync import link_passes
from drill_tempo.scheduling.timeline import (
    Timeline,
    TimelineEntry,
    action_duration,
    idle_time,
    natural_timeline,
    scheduled_timeline,
)

__all__ = [
    "EdgeKind",
    "EventKind",
    "SchedulePlan",
    "SpeedAssignment",
    "Timeline",
    "TimelineEntry",
    "TimingEdge",
    "TimingEvent",
    "TimingGraph",
    "action_duration",
    "action_length",
    "allocate_slack",
    "apply_plan",
    "arrival_point",
    "build_timing_graph",
    "earliest_times",
    "idle_time",
    "link_passes",
    "min_duration",
    "natural_timeline",
    "optimize",
    "plan_schedule",
    "scheduled_timeline",
    "topological_order",
]
