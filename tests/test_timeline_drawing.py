"""Tests for the matplotlib timeline drawing routines."""

import pytest
from matplotlib.figure import Figure

from spindlewarmup.core.command import CommandSequence
from spindlewarmup.core.timeline import TimelineProjector
from spindlewarmup.gui.timeline_drawing import (
    EMPTY_MESSAGE,
    draw_command_bars,
    draw_step_series,
    elapsed_formatter,
)


@pytest.fixture
def ax():
    return Figure().add_subplot(111)


@pytest.fixture
def warmup() -> CommandSequence:
    return CommandSequence.from_pairs([(0, 5000), (12000, 10000)])


class TestStepSeries:
    def test_single_line_through_samples(self, ax, warmup):
        projector = TimelineProjector()
        draw_step_series(ax, projector.project(warmup), projector.axes(warmup, 24000))
        assert len(ax.lines) == 1
        assert ax.lines[0].get_xdata().tolist() == [0, 5000, 5000, 15000]
        assert ax.get_xlim() == (0.0, 15000.0)
        assert ax.get_ylim() == (0.0, 24000.0)
        assert ax.get_ylabel() == "RPM"

    def test_empty_sequence_shows_note(self, ax):
        seq = CommandSequence()
        projector = TimelineProjector()
        draw_step_series(ax, projector.project(seq), projector.axes(seq, 24000))
        assert len(ax.lines) == 0
        assert ax.texts[0].get_text() == EMPTY_MESSAGE

    def test_ticks_show_elapsed_time(self):
        fmt = elapsed_formatter(100)
        assert fmt(5100, None) == "00:05.000"


class TestCommandBars:
    def test_one_rectangle_per_command(self, ax, warmup):
        bars = TimelineProjector.project_bars(warmup, 720, 800, 24000)
        draw_command_bars(ax, bars, 720, 800, 24000)
        assert len(ax.patches) == 2
        on = ax.patches[1]
        assert on.get_x() == pytest.approx(240.0)
        assert on.get_y() == pytest.approx(400.0)
        assert on.get_width() == pytest.approx(480.0)
        assert on.get_height() == pytest.approx(400.0)

    def test_y_axis_points_down(self, ax, warmup):
        bars = TimelineProjector.project_bars(warmup, 720, 800, 24000)
        draw_command_bars(ax, bars, 720, 800, 24000)
        assert ax.get_ylim() == (800.0, 0.0)
        assert any(t.get_text() == "24000 rpm" for t in ax.texts)

    def test_redraw_replaces_previous_bars(self, ax, warmup):
        bars = TimelineProjector.project_bars(warmup, 720, 800, 24000)
        draw_command_bars(ax, bars, 720, 800, 24000)
        draw_command_bars(ax, bars[:1], 720, 800, 24000)
        assert len(ax.patches) == 1

    def test_no_bars_shows_note(self, ax):
        draw_command_bars(ax, [], 720, 800, 24000)
        assert len(ax.patches) == 0
        assert any(t.get_text() == EMPTY_MESSAGE for t in ax.texts)
