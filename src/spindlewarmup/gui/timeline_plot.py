"""Time/RPM plot widget backed by matplotlib's Qt canvas."""

from __future__ import annotations

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from ..core.timeline import CommandBar, Timeline, TimelineAxes
from .timeline_drawing import draw_command_bars, draw_step_series


class TimelinePlot(FigureCanvasQTAgg):
    """Shows either the step-line series or the per-command bar view."""

    def __init__(self, parent=None, width: float = 7.6, height: float = 6.8, dpi: int = 100):
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

    def show_timeline(self, timeline: Timeline, axes: TimelineAxes) -> None:
        draw_step_series(self.ax, timeline, axes)
        self._redraw()

    def show_bars(self, bars: list[CommandBar], width: float, height: float, max_rpm) -> None:
        draw_command_bars(self.ax, bars, width, height, max_rpm)
        self._redraw()

    def _redraw(self) -> None:
        self.fig.tight_layout()
        self.draw_idle()
