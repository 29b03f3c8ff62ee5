"""Spindle warm-up program editor: G-code and time/RPM plot from one command list."""

__version__ = "0.1.0"
