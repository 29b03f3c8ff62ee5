"""Default editor values and the starter warm-up program.

The starter program is a conservative staged ramp; users should adjust
step lengths and speeds to their spindle manufacturer's guidance.
"""

from ..core.command import CommandSequence

DEFAULT_MAX_RPM = 24000
DEFAULT_TITLE = ""
TITLE_PLACEHOLDER = "Spindle Warm-up"

# Plot clock origin.  Only differences between samples matter.
TIMELINE_EPOCH_MS = 0

# Drawing box for the bar view, in arbitrary screen units.
BAR_VIEW_WIDTH = 720
BAR_VIEW_HEIGHT = 800

APP_NAME = "Spindle Warm-up Editor"
APP_ORGANIZATION = "spindlewarmup"

# Fractions of max RPM held for each stage of the starter ramp.
_WARMUP_STAGES = (0.25, 0.5, 0.75, 1.0)
_WARMUP_STAGE_MS = 120_000


def build_warmup_template(max_rpm: int = DEFAULT_MAX_RPM) -> CommandSequence:
    """Return a CommandSequence ramping the spindle up in equal stages.

    Each stage holds a fraction of *max_rpm* for two minutes and the
    program finishes with a short spindle-off pause.  A missing or
    non-positive *max_rpm* falls back to DEFAULT_MAX_RPM.
    """
    if not isinstance(max_rpm, int) or max_rpm <= 0:
        max_rpm = DEFAULT_MAX_RPM
    pairs = [(int(max_rpm * frac), _WARMUP_STAGE_MS) for frac in _WARMUP_STAGES]
    pairs.append((0, 5_000))
    return CommandSequence.from_pairs(pairs)
