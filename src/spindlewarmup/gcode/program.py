"""Spindle warm-up program generator.

Output layout::

    (<title>)
    M05 | S<rpm> M03      one pair per command
    G04 P<duration_ms>
    ...
    M05
    M30

The generator keeps no state between calls, so the same sequence and
title always produce byte-identical text.  RPM values are not checked
against any machine limit.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.command import CommandSequence, SpindleCommand
from .gcode_writer import comment, dwell, program_end, spindle_on_cw, spindle_stop


@dataclass
class ProgramConfig:
    """Text-level options for the generated program."""

    line_ending: str = "\n"


class CodeGenerator:
    """Serialize a CommandSequence into G-code."""

    def __init__(self, config: ProgramConfig | None = None):
        self.config = config or ProgramConfig()

    def get_lines(self, sequence: CommandSequence, title: str) -> list[str]:
        """Return program lines without line terminators."""
        lines = [comment(title)]
        for cmd in sequence:
            lines.extend(self._command(cmd))
        lines.extend(self._postamble())
        return lines

    def generate(self, sequence: CommandSequence, title: str) -> str:
        """Return the full program text, every line terminated."""
        eol = self.config.line_ending
        return "".join(line + eol for line in self.get_lines(sequence, title))

    def _command(self, cmd: SpindleCommand) -> list[str]:
        if cmd.rpm == 0:
            head = spindle_stop()
        else:
            head = spindle_on_cw(cmd.rpm)
        return [head, dwell(cmd.duration_ms)]

    def _postamble(self) -> list[str]:
        return [spindle_stop(), program_end()]


def generate_gcode(sequence: CommandSequence, title: str) -> str:
    return CodeGenerator().generate(sequence, title)
