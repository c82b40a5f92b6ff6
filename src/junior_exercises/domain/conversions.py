"""Type conversions and mixed-type arithmetic used by the variables lesson."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from .errors import InvalidNumericLiteral

# Optional sign and ASCII digits, surrounding whitespace allowed.
_INTEGER_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*")


def widen_to_float(value: int) -> float:
    """Return ``value`` as a float.

    Example:
        >>> widen_to_float(10)
        10.0
    """
    return float(value)


def truncate_to_int(value: float) -> int:
    """Narrow a float to an integer by discarding the fractional part.

    Truncates toward zero, never rounds.

    Example:
        >>> truncate_to_int(19.99)
        19
        >>> truncate_to_int(-19.99)
        -19
    """
    return math.trunc(value)


def parse_integer(text: str) -> int:
    """Parse decimal integer text.

    Accepts an optional sign and surrounding whitespace. Python's looser
    literal forms (underscores, non-ASCII digits) are rejected.

    Args:
        text: Text holding the integer.

    Returns:
        The parsed integer.

    Raises:
        InvalidNumericLiteral: If ``text`` is not a decimal integer.

    Examples:
        >>> parse_integer("123")
        123
        >>> parse_integer(" -7 ")
        -7
        >>> parse_integer("12a")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidNumericLiteral: Invalid numeric literal: '12a'
    """
    if not _INTEGER_TEXT.fullmatch(text):
        raise InvalidNumericLiteral(text)
    try:
        return int(text)
    except ValueError as exc:  # longer than sys.get_int_max_str_digits()
        raise InvalidNumericLiteral(text) from exc


def add_int_and_float(left: int, right: float) -> float:
    """Add an integer and a float; the result is a float.

    Example:
        >>> add_int_and_float(10, 5.5)
        15.5
    """
    return left + right


def multiply_decimal(amount: Decimal, factor: int) -> Decimal:
    """Multiply a fixed-point decimal by an integer with exact decimal semantics.

    Example:
        >>> multiply_decimal(Decimal("3.5"), 2)
        Decimal('7.0')
    """
    return amount * factor


def inferred_type_name(value: object) -> str:
    """Return the name of the type inferred from ``value``.

    Example:
        >>> [inferred_type_name(v) for v in (42, "Hello, World!", 3.14, True)]
        ['int', 'str', 'float', 'bool']
    """
    return type(value).__name__


__all__ = [
    "add_int_and_float",
    "inferred_type_name",
    "multiply_decimal",
    "parse_integer",
    "truncate_to_int",
    "widen_to_float",
]
