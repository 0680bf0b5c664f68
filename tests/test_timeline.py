"""
Project: DrillTempo
File Name: test_timeline.py
Description:
    Tests for natural / scheduled timelines and idle time.
"""

import math

from drill_tempo.core.models import Action, ActionKind, Agent, Drill, Point
from drill_tempo.scheduling.optimizer import optimize, plan_schedule
from drill_tempo.scheduling.timeline import (
    action_duration,
    idle_time,
    natural_timeline,
    scheduled_timeline,
)


def _action(kind: ActionKind, x1: float, y1: float, x2: float, y2: float, **kw) -> Action:
    return Action(kind=kind, start=Point(x1, y1), end=Point(x2, y2), **kw)


def _drill() -> Drill:
    return Drill(agents=[
        Agent("A", [
            _action(ActionKind.RUN, 0, 0, 350, 0),
            _action(ActionKind.TURN, 350, 0, 350, 0),
        ]),
        Agent("B", [_action(ActionKind.PASS, -2150, 0, 350, 0)]),
    ])


class TestActionDuration:
    def test_unset_speed_uses_min_duration(self):
        assert math.isclose(action_duration(_action(ActionKind.RUN, 0, 0, 350, 0)), 1.0)

    def test_assigned_speed(self):
        action = _action(ActionKind.RUN, 0, 0, 350, 0, speed=175)
        assert math.isclose(action_duration(action), 2.0)

    def test_fixed_kind_ignores_speed(self):
        action = _action(ActionKind.TACKLE, 0, 0, 100, 0, speed=10)
        assert action_duration(action) == 0.5


class TestNaturalTimeline:
    def test_back_to_back(self):
        timeline = natural_timeline(_drill())
        run, turn = timeline.for_agent("A")
        assert run.start == 0.0
        assert math.isclose(run.end, 1.0)
        assert math.isclose(turn.start, 1.0)
        assert math.isclose(turn.end, 1.5)

    def test_makespan_ignores_sync(self):
        assert math.isclose(natural_timeline(_drill()).makespan, 5.0)


class TestScheduledTimeline:
    def test_wait_delays_start(self):
        drill = _drill()
        plan = plan_schedule(drill)
        optimize(drill)
        run, turn = scheduled_timeline(drill, plan.times).for_agent("A")
        assert math.isclose(run.wait_before, 1.5)
        assert math.isclose(run.start, 1.5)
        assert math.isclose(run.end, 5.0)
        assert math.isclose(turn.start, 5.0)
        assert math.isclose(turn.end, 5.5)

    def test_to_df(self):
        drill = optimize(_drill())
        df = natural_timeline(drill).to_df()
        assert list(df.columns) == [
            "agent_id", "action_index", "kind", "wait_before",
            "start", "end", "duration", "speed",
        ]
        assert len(df) == 3


class TestIdleTime:
    def test_first_wait_not_counted(self):
        drill = Drill(agents=[Agent("A", [
            _action(ActionKind.RUN, 0, 0, 10, 0, wait_before=2.0),
            _action(ActionKind.RUN, 10, 0, 20, 0, wait_before=0.5),
            _action(ActionKind.RUN, 20, 0, 30, 0, wait_before=0.25),
        ])])
        assert math.isclose(idle_time(drill), 0.75)

    def test_no_waits(self):
        assert idle_time(_drill()) == 0.0

    def test_delayed_start_after_scheduling_is_not_idle(self):
        drill = optimize(_drill())
        assert idle_time(drill) == 0.0
