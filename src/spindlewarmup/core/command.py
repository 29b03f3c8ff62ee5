"""Spindle command data model.

A CommandSequence is the single source of truth for a warm-up program.
Start times and the total duration are always derived from the ordered
durations, never stored on the commands themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class SpindleCommand:
    """One step of the spindle speed timeline.

    ``rpm == 0`` means spindle off.  Both numeric fields hold whatever the
    editing form produced, which can be NaN for malformed input.
    """
    id: int
    rpm: int = 0
    duration_ms: int = 0


_EDITABLE_FIELDS = frozenset(f.name for f in fields(SpindleCommand)) - {"id"}


class CommandSequence:
    """Ordered, in-memory list of spindle commands.

    Insertion order is execution order.  Ids come from a monotonic counter
    and are never handed out twice, even after the command is removed.
    """

    def __init__(self) -> None:
        self._commands: list[SpindleCommand] = []
        self._next_id = 0
        self._version = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]]) -> CommandSequence:
        """Build a sequence from ``(rpm, duration_ms)`` pairs."""
        seq = cls()
        for rpm, duration_ms in pairs:
            seq.append(rpm=rpm, duration_ms=duration_ms)
        return seq

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, rpm: int = 0, duration_ms: int = 0) -> SpindleCommand:
        cmd = SpindleCommand(id=self._next_id, rpm=rpm, duration_ms=duration_ms)
        self._next_id += 1
        self._commands.append(cmd)
        self._version += 1
        return cmd

    def update(self, command_id: int, **patch) -> bool:
        """Replace fields of the command with *command_id*.

        Returns False (and changes nothing) when no command has that id
        or the patch is empty.
        """
        unknown = set(patch) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        if not patch:
            return False

        index = self.index_of(command_id)
        if index is None:
            return False
        self._commands[index] = replace(self._commands[index], **patch)
        self._version += 1
        return True

    def remove(self, command_id: int) -> bool:
        index = self.index_of(command_id)
        if index is None:
            return False
        del self._commands[index]
        self._version += 1
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        """Bumped on every mutation that actually changed the sequence."""
        return self._version

    @property
    def commands(self) -> tuple[SpindleCommand, ...]:
        return tuple(self._commands)

    def get(self, command_id: int) -> Optional[SpindleCommand]:
        index = self.index_of(command_id)
        return None if index is None else self._commands[index]

    def index_of(self, command_id: int) -> Optional[int]:
        for i, cmd in enumerate(self._commands):
            if cmd.id == command_id:
                return i
        return None

    def start_time_of(self, index: int) -> int:
        """Sum of durations of every command strictly before *index*.

        Out-of-range indices never raise: positions past the end count as
        zero duration and a negative index has nothing before it.
        """
        total = 0
        for cmd in self._commands[:max(index, 0)]:
            total += cmd.duration_ms
        return total

    def total_duration(self) -> int:
        return sum((cmd.duration_ms for cmd in self._commands), 0)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[SpindleCommand]:
        return iter(tuple(self._commands))

    def __getitem__(self, index: int) -> SpindleCommand:
        return self._commands[index]

    def __repr__(self) -> str:
        return f"CommandSequence({self._commands!r})"
