"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidNumericLiteral(ValueError):
    """Text could not be parsed as an integer.

    Raised by :func:`junior_exercises.domain.conversions.parse_integer`. The
    run is not recovered: the error travels up to the CLI boundary, and lines
    printed before the failure stay printed. Inherits from ValueError so
    generic ``except ValueError`` handlers still see it.

    Attributes:
        text: The offending text.

    Example:
        >>> from junior_exercises.domain.errors import InvalidNumericLiteral
        >>> err = InvalidNumericLiteral("abc")
        >>> str(err)
        "Invalid numeric literal: 'abc'"
        >>> err.text
        'abc'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid numeric literal: {text!r}")
        self.text = text


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[exercises]`` configuration section holds values that
    fail validation. Caught at CLI boundaries to provide a readable message.

    Example:
        >>> from junior_exercises.domain.errors import ConfigurationError
        >>> err = ConfigurationError("exercises.age: Input should be a valid integer")
        >>> str(err)
        'exercises.age: Input should be a valid integer'
    """


__all__ = [
    "ConfigurationError",
    "InvalidNumericLiteral",
]
