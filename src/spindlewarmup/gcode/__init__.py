"""G-code generation."""

from .program import CodeGenerator, ProgramConfig, generate_gcode

__all__ = ["CodeGenerator", "ProgramConfig", "generate_gcode"]
