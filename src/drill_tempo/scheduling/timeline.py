"""
Project: DrillTempo
File Name: scheduling/timeline.py
Description:
    Per-action timelines of a drill, before and after scheduling.

      natural_timeline()   — every player runs its chain back-to-back at
                             maximum speed, ignoring passes (the "as drawn"
                             picture)
      scheduled_timeline() — each action starts at its propagated start
                             time plus its wait, and lasts as long as its
                             assigned speed implies

    Also provides idle_time(): how long players stand still between
    actions once they have started moving.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from drill_tempo.config import DEFAULT_CONFIG, SchedulerConfig
from drill_tempo.core.models import Action, Drill, SpeedGovernor
from drill_tempo.scheduling.cost import action_length, min_duration
from drill_tempo.scheduling.models import TimingEvent, TimingGraph

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class TimelineEntry:
    """When one action runs."""

    agent_id: str
    action_index: int
    kind: str
    start: float        # seconds, after wait_before
    end: float
    wait_before: float
    speed: float | None

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass
class Timeline:
    """All actions of a drill laid out in time."""

    entries: list[TimelineEntry] = field(default_factory=list)

    @property
    def makespan(self) -> float:
        """Time at which the last action finishes."""
        return max((e.end for e in self.entries), default=0.0)

    def for_agent(self, agent_id: str) -> list[TimelineEntry]:
        return [e for e in self.entries if e.agent_id == agent_id]

    def to_df(self) -> pd.DataFrame:
        """Convert the timeline to a DataFrame.

        Columns: agent_id, action_index, kind, wait_before, start, end,
                 duration, speed
        """
        import pandas as _pd

        rows = [
            {
                "agent_id": e.agent_id,
                "action_index": e.action_index,
                "kind": e.kind,
                "wait_before": e.wait_before,
                "start": e.start,
                "end": e.end,
                "duration": e.duration,
                "speed": e.speed,
            }
            for e in self.entries
        ]
        return _pd.DataFrame(
            rows,
            columns=["agent_id", "action_index", "kind", "wait_before",
                     "start", "end", "duration", "speed"],
        )


def action_duration(action: Action, config: SchedulerConfig = DEFAULT_CONFIG) -> float:
    """Duration of an action under its currently assigned speed.

    Unset (or non-positive) speed falls back to the physical minimum
    duration; fixed-duration kinds always take the baseline.
    """
    if action.kind.governor is SpeedGovernor.FIXED:
        return config.baseline_duration
    if action.speed is None or action.speed <= 0:
        return min_duration(action, config)
    return action_length(action, config) / action.speed


def natural_timeline(drill: Drill, config: SchedulerConfig = DEFAULT_CONFIG) -> Timeline:
    """Back-to-back chains at maximum speed, with no synchronization."""
    entries: list[TimelineEntry] = []
    for agent in drill.agents:
        t = 0.0
        for index, action in enumerate(agent.actions):
            dur = min_duration(action, config)
            entries.append(
                TimelineEntry(
                    agent_id=agent.agent_id,
                    action_index=index,
                    kind=action.kind.value,
                    start=t,
                    end=t + dur,
                    wait_before=0.0,
                    speed=None,
                )
            )
            t += dur
    return Timeline(entries)


def scheduled_timeline(
    drill: Drill,
    times: dict[TimingEvent, float],
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> Timeline:
    """Timeline implied by the assigned speeds and waits.

    Each action's window opens at the propagated time of its start event
    (the agent's start, or the end of its previous action).
    """
    entries: list[TimelineEntry] = []
    for agent in drill.agents:
        prev = TimingGraph.start_event(agent.agent_id)
        for index, action in enumerate(agent.actions):
            start = times.get(prev, 0.0) + action.wait_before
            entries.append(
                TimelineEntry(
                    agent_id=agent.agent_id,
                    action_index=index,
                    kind=action.kind.value,
                    start=start,
                    end=start + action_duration(action, config),
                    wait_before=action.wait_before,
                    speed=action.speed,
                )
            )
            prev = TimingGraph.end_event(agent.agent_id, index)
    return Timeline(entries)


def idle_time(drill: Drill) -> float:
    """Total time players hold still after having already moved.

    The wait before a player's first action is a delayed start, not
    idling, and is not counted.
    """
    total = 0.0
    for agent in drill.agents:
        for action in agent.actions[1:]:
            total += max(0.0, action.wait_before)
    return total
