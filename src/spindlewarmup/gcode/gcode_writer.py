"""Low-level G-code line formatting helpers."""

from __future__ import annotations

import math


def fmt_int(value) -> str:
    """Format a numeric word argument.

    Integral floats drop the ".0"; every other value is written out
    unchanged, so non-finite input gives degenerate but lossless text.
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def comment(text: str) -> str:
    """Wrap *text* verbatim in a parenthetical comment."""
    return f"({text})"


def spindle_stop() -> str:
    """M05 spindle stop."""
    return "M05"


def spindle_on_cw(rpm) -> str:
    """S word followed by M03 spindle on clockwise."""
    return f"S{fmt_int(rpm)} M03"


def dwell(duration_ms) -> str:
    """G04 dwell, P in milliseconds."""
    return f"G04 P{fmt_int(duration_ms)}"


def program_end() -> str:
    """M30 program end and rewind."""
    return "M30"
