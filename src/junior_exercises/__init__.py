"""Public package surface exposing lesson rendering, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: exercise inputs, conversions, operators, lesson rendering
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.enums import Lesson
from .domain.errors import InvalidNumericLiteral
from .domain.lessons import render_all, render_lesson
from .domain.values import ExerciseInputs

__all__ = [
    "ExerciseInputs",
    "InvalidNumericLiteral",
    "Lesson",
    "get_config",
    "print_info",
    "render_all",
    "render_lesson",
]
