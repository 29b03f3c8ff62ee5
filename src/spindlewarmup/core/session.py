"""Editing session: the owned state behind the editor window.

The session holds the CommandSequence, the program title and the display
max RPM.  The GUI calls the mutation methods in response to user actions
and re-renders from the derived views; listeners are notified
synchronously after every change so both outputs are always recomputed
from the same sequence.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..config.defaults import DEFAULT_MAX_RPM, DEFAULT_TITLE, TIMELINE_EPOCH_MS
from ..gcode.program import CodeGenerator
from .command import CommandSequence, SpindleCommand
from .timeline import CommandBar, Timeline, TimelineAxes, TimelineProjector
from .units import format_time_ms

logger = logging.getLogger(__name__)

Listener = Callable[["EditorSession"], None]


class EditorSession:
    """Single-writer, in-memory state for one editing session."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        max_rpm: int = DEFAULT_MAX_RPM,
        epoch_ms: float = TIMELINE_EPOCH_MS,
    ):
        self.sequence = CommandSequence()
        self._title = title
        self._max_rpm = max_rpm
        self._projector = TimelineProjector(epoch_ms=epoch_ms)
        self._generator = CodeGenerator()
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self)

    # ------------------------------------------------------------------
    # Program settings
    # ------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        if title == self._title:
            return
        self._title = title
        self._notify()

    @property
    def max_rpm(self):
        return self._max_rpm

    def set_max_rpm(self, max_rpm) -> None:
        if max_rpm == self._max_rpm:
            return
        self._max_rpm = max_rpm
        self._notify()

    # ------------------------------------------------------------------
    # Command editing
    # ------------------------------------------------------------------

    def add_command(self) -> SpindleCommand:
        cmd = self.sequence.append()
        logger.debug("Added command %d", cmd.id)
        self._notify()
        return cmd

    def update_command(self, command_id: int, field: str, value) -> bool:
        """Set one field of a command; unknown ids are ignored."""
        if field not in ("rpm", "duration_ms"):
            raise ValueError(f"Unknown command field: {field!r}")
        changed = self.sequence.update(command_id, **{field: value})
        if not changed:
            logger.debug("Update of unknown command %d ignored", command_id)
            return False
        logger.debug("Command %d: %s = %r", command_id, field, value)
        self._notify()
        return True

    def remove_command(self, command_id: int) -> bool:
        removed = self.sequence.remove(command_id)
        if not removed:
            logger.debug("Remove of unknown command %d ignored", command_id)
            return False
        logger.debug("Removed command %d", command_id)
        self._notify()
        return True

    def load_template(self, pairs: Iterable[tuple[int, int]]) -> None:
        """Append ``(rpm, duration_ms)`` pairs after the current commands."""
        count = 0
        for rpm, duration_ms in pairs:
            self.sequence.append(rpm=rpm, duration_ms=duration_ms)
            count += 1
        logger.info("Loaded %d template command(s)", count)
        self._notify()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def gcode(self) -> str:
        return self._generator.generate(self.sequence, self._title)

    def timeline(self) -> Timeline:
        return self._projector.project(self.sequence)

    def axes(self) -> TimelineAxes:
        return self._projector.axes(self.sequence, self._max_rpm)

    def bars(self, width: float, height: float) -> list[CommandBar]:
        return self._projector.project_bars(
            self.sequence, width, height, self._max_rpm
        )

    def start_time_label(self, index: int) -> str:
        return format_time_ms(self.sequence.start_time_of(index))

    def total_time_label(self) -> str:
        return format_time_ms(self.sequence.total_duration())
