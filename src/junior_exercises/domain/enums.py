"""Type-safe domain enums for lessons and output formats."""

from __future__ import annotations

from enum import Enum


class Lesson(str, Enum):
    """Course lessons in the order they are run.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        INTRODUCTION: Greeting, introduction lines, and a simple sum.
        VARIABLES: Primitive values, conversions, and inferred types.
        OPERATORS: Inventory counter and overtime salary.

    Example:
        >>> Lesson.VARIABLES.value
        'variables'
        >>> [lesson.value for lesson in Lesson]
        ['introduction', 'variables', 'operators']
    """

    INTRODUCTION = "introduction"
    VARIABLES = "variables"
    OPERATORS = "operators"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Lesson",
    "OutputFormat",
]
