"""
Project: DrillTempo
File Name: viz/plotly_timeline.py
Description:
    Plotly Gantt view of a drill schedule.

    One row per player; each action is a horizontal bar from its start to
    its end, preceded by a hatched bar for its wait_before.  Hovering an
    action shows its kind, timing and assigned speed.

    Usage:
        fig = build_timeline_figure(scheduled_timeline(drill, plan.times))
        fig.show()
"""

from __future__ import annotations

import plotly.graph_objects as go

from drill_tempo.scheduling.timeline import Timeline

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

KIND_COLORS: dict[str, str] = {
    "run": "#3498db",
    "dribble": "#9b59b6",
    "pass": "#e8b838",
    "shoot": "#e74c3c",
    "tackle": "#2ecc71",
    "turn": "#95a5a6",
}
_WAIT_COLOR = "rgba(200, 200, 200, 0.35)"
_BG_COLOR = "#1a2332"
_FONT_COLOR = "rgba(255, 255, 255, 0.85)"


def build_timeline_figure(
    timeline: Timeline,
    *,
    title: str | None = None,
) -> go.Figure:
    """Build a horizontal-bar timeline of every action in the drill.

    Args:
        timeline: Output of natural_timeline() or scheduled_timeline().
        title: Optional figure title.

    Returns:
        A Plotly Figure.
    """
    fig = go.Figure()
    shown_kinds: set[str] = set()

    waits = [e for e in timeline.entries if e.wait_before > 0]
    if waits:
        fig.add_trace(go.Bar(
            y=[e.agent_id for e in waits],
            x=[e.wait_before for e in waits],
            base=[e.start - e.wait_before for e in waits],
            orientation="h",
            name="wait",
            marker=dict(color=_WAIT_COLOR, pattern=dict(shape="/")),
            hovertemplate="wait %{x:.2f}s<extra></extra>",
        ))

    for kind, color in KIND_COLORS.items():
        entries = [e for e in timeline.entries if e.kind == kind]
        if not entries:
            continue
        shown_kinds.add(kind)
        fig.add_trace(go.Bar(
            y=[e.agent_id for e in entries],
            x=[e.duration for e in entries],
            base=[e.start for e in entries],
            orientation="h",
            name=kind,
            marker=dict(color=color, line=dict(color="white", width=1)),
            customdata=[
                [e.action_index, e.start, e.end, "—" if e.speed is None else f"{e.speed:g}"]
                for e in entries
            ],
            hovertemplate=(
                f"<b>{kind}</b> #%{{customdata[0]}}<br>"
                "%{customdata[1]:.2f}s → %{customdata[2]:.2f}s<br>"
                "speed: %{customdata[3]}<extra></extra>"
            ),
        ))

    fig.update_layout(
        barmode="overlay",
        title=title,
        plot_bgcolor=_BG_COLOR,
        paper_bgcolor=_BG_COLOR,
        font=dict(color=_FONT_COLOR),
        xaxis=dict(title="time (s)", range=[0, max(timeline.makespan, 0.1) * 1.05], gridcolor="rgba(255,255,255,0.1)"),
        yaxis=dict(title="player", autorange="reversed"),
        legend=dict(orientation="h", y=-0.2),
        showlegend=bool(shown_kinds),
    )
    return fig
