"""Project a command sequence onto a plottable time/RPM step function."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .command import CommandSequence


@dataclass
class Timeline:
    """Paired sample points of the commanded RPM over time.

    Each command contributes two samples with the same RPM, one at its
    start and one at its end.  Drawn as connected line segments this gives
    flat runs with vertical edges at every transition.
    """
    times_ms: np.ndarray
    rpms: np.ndarray
    epoch_ms: float = 0.0

    def __len__(self) -> int:
        return len(self.times_ms)

    @property
    def is_empty(self) -> bool:
        return len(self.times_ms) == 0

    @property
    def end_ms(self) -> float:
        """Last sample time, or the epoch for an empty timeline."""
        if self.is_empty:
            return self.epoch_ms
        return float(self.times_ms[-1])


@dataclass
class TimelineAxes:
    """Axis configuration handed to the charting layer."""
    x_range: tuple[float, float]
    y_range: tuple[float, float]
    x_label: str = "Time"
    y_label: str = "RPM"


@dataclass
class CommandBar:
    """Filled rectangle for one command in a bar-style rendering."""
    command_id: int
    x: float
    y: float
    width: float
    height: float


class TimelineProjector:
    """Stateless projector from a CommandSequence to plot data."""

    def __init__(self, epoch_ms: float = 0.0):
        self.epoch_ms = epoch_ms

    def project(self, sequence: CommandSequence) -> Timeline:
        n = len(sequence)
        times = np.empty(2 * n, dtype=float)
        rpms = np.empty(2 * n, dtype=float)

        clock = self.epoch_ms
        for i, cmd in enumerate(sequence):
            times[2 * i] = clock
            rpms[2 * i] = cmd.rpm
            clock += cmd.duration_ms
            times[2 * i + 1] = clock
            rpms[2 * i + 1] = cmd.rpm

        return Timeline(times_ms=times, rpms=rpms, epoch_ms=self.epoch_ms)

    @staticmethod
    def axes(sequence: CommandSequence, max_rpm: float) -> TimelineAxes:
        return TimelineAxes(
            x_range=(0, sequence.total_duration()),
            y_range=(0, max_rpm),
        )

    @staticmethod
    def project_bars(
        sequence: CommandSequence,
        width: float,
        height: float,
        max_rpm: float,
    ) -> list[CommandBar]:
        """Scale every command to a rectangle inside a *width* x *height* box.

        The y axis points down (screen coordinates), so bars grow upward
        from ``y = height``.
        """
        total = sequence.total_duration()
        per_ms = width / total if total else 0.0
        per_rpm = height / max_rpm if max_rpm else 0.0

        bars: list[CommandBar] = []
        for i, cmd in enumerate(sequence):
            h = cmd.rpm * per_rpm
            bars.append(CommandBar(
                command_id=cmd.id,
                x=sequence.start_time_of(i) * per_ms,
                y=height - h,
                width=cmd.duration_ms * per_ms,
                height=h,
            ))
        return bars
