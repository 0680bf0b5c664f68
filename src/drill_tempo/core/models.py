"""
Project: DrillTempo
File Name: core/models.py
Description:
    Drill data models shared across all DrillTempo modules.
    Coordinates are canvas pixels as stored by the drawing client
    (origin top-left, y grows downwards); the scheduler never depends
    on orientation, only on distances.

    Only Action.speed and Action.wait_before are written by the
    scheduler. Everything else is treated as read-only input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SpeedGovernor(str, Enum):
    """What bounds an action's duration."""

    BALL = "ball"    # ball travel speed
    AGENT = "agent"  # player running speed
    FIXED = "fixed"  # fixed baseline, geometry-independent


class ActionKind(str, Enum):
    """Kinds of action a player can perform in a drill."""

    RUN = "run"
    DRIBBLE = "dribble"
    PASS = "pass"
    SHOOT = "shoot"
    TACKLE = "tackle"
    TURN = "turn"

    @property
    def governor(self) -> SpeedGovernor:
        return _GOVERNORS[self]

    @property
    def is_ball_action(self) -> bool:
        return self.governor is SpeedGovernor.BALL

    @property
    def can_receive(self) -> bool:
        """True for actions that can end at a pass's arrival point."""
        return self.governor is SpeedGovernor.AGENT


_GOVERNORS: dict[ActionKind, SpeedGovernor] = {
    ActionKind.RUN: SpeedGovernor.AGENT,
    ActionKind.DRIBBLE: SpeedGovernor.AGENT,
    ActionKind.PASS: SpeedGovernor.BALL,
    ActionKind.SHOOT: SpeedGovernor.BALL,
    ActionKind.TACKLE: SpeedGovernor.FIXED,
    ActionKind.TURN: SpeedGovernor.FIXED,
}


class PathType(str, Enum):
    STRAIGHT = "straight"
    FREEHAND = "freehand"


@dataclass(frozen=True)
class Point:
    """A point on the drill canvas."""

    x: float
    y: float


@dataclass
class Action:
    """One atomic movement or event in a player's action chain.

    A straight action is fully described by start → end.  A freehand
    action is described by its polyline ``points`` when present; start
    and end are still kept for the fallback length estimate.
    """

    kind: ActionKind
    start: Point
    end: Point
    path_type: PathType = PathType.STRAIGHT
    points: list[Point] = field(default_factory=list)
    action_id: str | None = None

    # Scheduler output
    speed: float | None = None  # px/s; None = client default / not speed-governed
    wait_before: float = 0.0    # seconds to hold before starting

    # Wire fields the scheduler does not interpret (config, gesture, ...)
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def arrival_point(self) -> Point:
        """Where the action ends: last polyline point for freehand paths."""
        if self.path_type is PathType.FREEHAND and self.points:
            return self.points[-1]
        return self.end


@dataclass
class Agent:
    """A player and the ordered chain of actions it executes."""

    agent_id: str
    actions: list[Action] = field(default_factory=list)
    team: str | None = None
    number: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass
class Drill:
    """The full drill description — the scheduler's input and output."""

    agents: list[Agent] = field(default_factory=list)

    @property
    def action_count(self) -> int:
        return sum(len(a.actions) for a in self.agents)

    def find_agent(self, agent_id: str) -> Agent | None:
        for agent in self.agents:
            if agent.agent_id == agent_id:
                return agent
        return None
