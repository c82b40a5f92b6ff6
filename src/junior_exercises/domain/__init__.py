"""Domain layer - pure exercise logic with no I/O or framework dependencies.

Contents:
    * :mod:`.values` - Immutable exercise inputs (PersonalInfo, Payroll, ExerciseInputs)
    * :mod:`.conversions` - Widening, truncation, integer parsing, mixed arithmetic
    * :mod:`.operators` - Inventory counter and overtime salary
    * :mod:`.lessons` - Lesson catalogue and lazy line rendering
    * :mod:`.enums` - Domain enumerations (Lesson, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .conversions import (
    add_int_and_float,
    inferred_type_name,
    multiply_decimal,
    parse_integer,
    truncate_to_int,
    widen_to_float,
)
from .enums import Lesson, OutputFormat
from .errors import ConfigurationError, InvalidNumericLiteral
from .lessons import CATALOGUE, Exercise, render_all, render_lesson
from .operators import INVENTORY_STEPS, InventoryStep, compute_salary, simulate_inventory
from .values import ExerciseInputs, Payroll, PersonalInfo

__all__ = [
    # Values
    "ExerciseInputs",
    "Payroll",
    "PersonalInfo",
    # Conversions
    "add_int_and_float",
    "inferred_type_name",
    "multiply_decimal",
    "parse_integer",
    "truncate_to_int",
    "widen_to_float",
    # Operators
    "INVENTORY_STEPS",
    "InventoryStep",
    "compute_salary",
    "simulate_inventory",
    # Lessons
    "CATALOGUE",
    "Exercise",
    "render_all",
    "render_lesson",
    # Enums
    "Lesson",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidNumericLiteral",
]
