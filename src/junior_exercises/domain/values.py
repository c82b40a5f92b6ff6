"""Immutable input values for the course exercises.

Contents:
    * :class:`PersonalInfo` - the student's personal details.
    * :class:`Payroll` - hours worked and hourly rate for the salary exercise.
    * :class:`ExerciseInputs` - every literal the lessons print or compute with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class PersonalInfo:
    """Personal details declared in the variables lesson.

    Example:
        >>> info = PersonalInfo()
        >>> info.name, info.age, info.grade
        ('Jefry Astacio', 26, 'A')
    """

    name: str = "Jefry Astacio"
    age: int = 26
    height: float = 5.4
    profession: str = "Desarrollador de software"
    is_student: bool = True
    grade: str = "A"


@dataclass(frozen=True, slots=True)
class Payroll:
    """Hours worked and hourly rate feeding the salary rule."""

    hours_worked: int = 45
    hourly_rate: int = 20


def _default_personal_info() -> PersonalInfo:
    return PersonalInfo()


def _default_payroll() -> Payroll:
    return Payroll()


@dataclass(frozen=True, slots=True)
class ExerciseInputs:
    """All literals used by the lessons, defaulting to the course values.

    Attributes:
        personal: Personal details printed by the introduction and variables lessons.
        integer_value: Integer widened to float in the conversion exercise.
        price: Float narrowed to an integer by truncation.
        numeric_text: Text parsed to an integer; invalid text aborts the run.
        addend_a: First operand of the simple sum.
        addend_b: Second operand of the simple sum.
        float_operand: Float added to ``integer_value`` in mixed arithmetic.
        decimal_operand: Fixed-point decimal multiplied by ``decimal_factor``.
        decimal_factor: Integer factor for the decimal product.
        inventory_start: Initial inventory count.
        payroll: Inputs of the salary computation.

    Example:
        >>> inputs = ExerciseInputs()
        >>> inputs.decimal_operand * inputs.decimal_factor
        Decimal('7.0')
    """

    personal: PersonalInfo = field(default_factory=_default_personal_info)
    integer_value: int = 10
    price: float = 19.99
    numeric_text: str = "123"
    addend_a: int = 10
    addend_b: int = 15
    float_operand: float = 5.5
    decimal_operand: Decimal = Decimal("3.5")
    decimal_factor: int = 2
    inventory_start: int = 20
    payroll: Payroll = field(default_factory=_default_payroll)


__all__ = [
    "ExerciseInputs",
    "Payroll",
    "PersonalInfo",
]
