"""
Project: DrillTempo
File Name: test_viz.py
Description:
    Smoke tests for the schedule timeline figures.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from drill_tempo.core.models import Action, ActionKind, Agent, Drill, Point  # noqa: E402
from drill_tempo.scheduling.optimizer import optimize, plan_schedule  # noqa: E402
from drill_tempo.scheduling.timeline import Timeline, scheduled_timeline  # noqa: E402
from drill_tempo.viz import build_timeline_figure, plot_timeline  # noqa: E402


def _scheduled() -> Timeline:
    drill = Drill(agents=[
        Agent("A", [Action(ActionKind.RUN, Point(0, 0), Point(350, 0))]),
        Agent("B", [Action(ActionKind.PASS, Point(-2150, 0), Point(350, 0))]),
    ])
    plan = plan_schedule(drill)
    optimize(drill)
    return scheduled_timeline(drill, plan.times)


class TestPlotlyTimeline:
    def test_traces_per_kind_and_wait(self):
        fig = build_timeline_figure(_scheduled(), title="drill")
        names = [t.name for t in fig.data]
        assert names == ["wait", "run", "pass"]

    def test_empty_timeline(self):
        fig = build_timeline_figure(Timeline())
        assert len(fig.data) == 0


class TestMplTimeline:
    def test_draws_one_row_per_player(self):
        fig, ax = plot_timeline(_scheduled())
        assert [t.get_text() for t in ax.get_yticklabels()] == ["A", "B"]
        plt.close(fig)

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        fig2, ax2 = plot_timeline(_scheduled(), ax=ax)
        assert ax2 is ax and fig2 is fig
        plt.close(fig)
