"""Duration units, form-input parsing and time formatting helpers."""

import math
import re
from enum import Enum

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class DurationUnit(Enum):
    MILLISECONDS = "ms"
    SECONDS = "s"

    def to_ms(self, value):
        if self is DurationUnit.MILLISECONDS:
            return value
        return value * 1000

    def from_ms(self, value):
        if self is DurationUnit.MILLISECONDS:
            return value
        return value / 1000

    def label(self) -> str:
        return "ms" if self is DurationUnit.MILLISECONDS else "secs"


def parse_int(text: str):
    """Lenient integer parse of a form field.

    Takes the leading optionally-signed digits and ignores the rest, so
    ``"12abc"`` gives 12.  Returns NaN when there are no leading digits.
    """
    m = _INT_PREFIX.match(text or "")
    if m is None:
        return math.nan
    return int(m.group(1))


def format_time_ms(time_ms) -> str:
    """Render a millisecond count as ``mm:ss.mmm``."""
    if isinstance(time_ms, float) and not math.isfinite(time_ms):
        return "--:--.---"
    time_ms = int(time_ms)
    sign = "-" if time_ms < 0 else ""
    # truncate toward zero
    time_ms = abs(time_ms)
    minutes = time_ms // 60000
    seconds = (time_ms % 60000) // 1000
    millis = time_ms % 1000
    return f"{sign}{minutes:02d}:{seconds:02d}.{millis:03d}"
