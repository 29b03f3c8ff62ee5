"""Matplotlib drawing routines for the timeline views.

Kept free of Qt so the same routines draw onto any matplotlib Axes.
"""

from __future__ import annotations

from matplotlib.patches import Rectangle
from matplotlib.ticker import FuncFormatter, NullLocator

from ..core.timeline import CommandBar, Timeline, TimelineAxes
from ..core.units import format_time_ms

EMPTY_MESSAGE = "Add a command to see the spindle timeline"


def elapsed_formatter(epoch_ms: float) -> FuncFormatter:
    """Tick formatter showing ``mm:ss.mmm`` elapsed since *epoch_ms*."""
    return FuncFormatter(lambda value, _pos: format_time_ms(int(value - epoch_ms)))


def _empty_note(ax) -> None:
    ax.text(
        0.5, 0.5, EMPTY_MESSAGE,
        horizontalalignment="center", verticalalignment="center",
        transform=ax.transAxes, color="#888",
    )


def draw_step_series(ax, timeline: Timeline, axes: TimelineAxes) -> None:
    """Draw the step function as one connected line series."""
    ax.clear()
    ax.xaxis.set_major_formatter(elapsed_formatter(timeline.epoch_ms))

    if timeline.is_empty:
        _empty_note(ax)
    else:
        ax.plot(timeline.times_ms, timeline.rpms, "-", color="tab:blue")

    x0, x1 = axes.x_range
    if x1 > x0:
        ax.set_xlim(x0 + timeline.epoch_ms, x1 + timeline.epoch_ms)
    y0, y1 = axes.y_range
    if y1 > y0:
        ax.set_ylim(y0, y1)

    ax.set_xlabel(axes.x_label)
    ax.set_ylabel(axes.y_label)
    ax.grid(True)


def draw_command_bars(
    ax,
    bars: list[CommandBar],
    width: float,
    height: float,
    max_rpm,
) -> None:
    """Draw one filled rectangle per command inside a *width* x *height* box.

    Bar coordinates have y pointing down, so the y axis is inverted and
    the rectangles are placed as given.
    """
    ax.clear()
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.xaxis.set_major_locator(NullLocator())
    ax.yaxis.set_major_locator(NullLocator())
    ax.axhline(0, color="black")
    ax.text(0, 0, f"{max_rpm} rpm", fontsize=9, verticalalignment="top")

    if not bars:
        _empty_note(ax)
        return

    for bar in bars:
        ax.add_patch(Rectangle(
            (bar.x, bar.y), bar.width, bar.height,
            facecolor="tab:blue", edgecolor="none",
        ))
