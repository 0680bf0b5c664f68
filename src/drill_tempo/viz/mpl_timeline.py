"""
Project: DrillTempo
File Name: viz/mpl_timeline.py
Description:
    Matplotlib Gantt view of a drill schedule (static counterpart of
    plotly_timeline).
"""

from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Patch

from drill_tempo.scheduling.timeline import Timeline
from drill_tempo.viz.plotly_timeline import KIND_COLORS


def plot_timeline(
    timeline: Timeline,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 4),
    title: str | None = None,
) -> tuple[Figure, Axes]:
    """Draw the timeline as one broken bar row per player.

    Returns:
        (fig, ax) tuple.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    agents = list(dict.fromkeys(e.agent_id for e in timeline.entries))
    row_height = 0.6

    for row, agent_id in enumerate(agents):
        y = row - row_height / 2
        for e in timeline.for_agent(agent_id):
            if e.wait_before > 0:
                ax.broken_barh(
                    [(e.start - e.wait_before, e.wait_before)], (y, row_height),
                    facecolors="lightgrey", hatch="//", alpha=0.5,
                )
            ax.broken_barh(
                [(e.start, e.duration)], (y, row_height),
                facecolors=KIND_COLORS.get(e.kind, "grey"), edgecolors="white",
            )

    ax.set_yticks(range(len(agents)))
    ax.set_yticklabels(agents)
    ax.invert_yaxis()
    ax.set_xlabel("time (s)")
    ax.set_xlim(0, max(timeline.makespan, 0.1) * 1.05)

    used = {e.kind for e in timeline.entries}
    handles = [Patch(color=c, label=k) for k, c in KIND_COLORS.items() if k in used]
    if any(e.wait_before > 0 for e in timeline.entries):
        handles.append(Patch(facecolor="lightgrey", hatch="//", label="wait"))
    if handles:
        ax.legend(handles=handles, loc="upper right", fontsize=8)
    if title:
        ax.set_title(title)

    return fig, ax
