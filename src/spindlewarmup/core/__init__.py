"""Command model, timeline projection and the editing session."""

from .command import CommandSequence, SpindleCommand
from .timeline import CommandBar, Timeline, TimelineAxes, TimelineProjector

__all__ = [
    "CommandSequence",
    "SpindleCommand",
    "CommandBar",
    "Timeline",
    "TimelineAxes",
    "TimelineProjector",
]
