"""Schedule visualization (matplotlib + Plotly)."""

from drill_tempo.viz.mpl_timeline import plot_timeline
from drill_tempo.viz.plotly_timeline import build_timeline_figure

__all__ = ["build_timeline_figure", "plot_timeline"]
