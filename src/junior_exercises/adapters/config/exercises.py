"""Exercise settings model and loader.

Validates the ``[exercises]`` configuration section with Pydantic and
converts it into the domain :class:`~junior_exercises.domain.values.ExerciseInputs`.
Keys that are absent fall back to the course defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from junior_exercises.domain.errors import ConfigurationError
from junior_exercises.domain.values import ExerciseInputs, Payroll, PersonalInfo

_DEFAULTS = ExerciseInputs()


class ExerciseSettings(BaseModel):
    """Validated, immutable ``[exercises]`` section.

    Example:
        >>> settings = ExerciseSettings(hours_worked=38)
        >>> settings.hours_worked, settings.hourly_rate
        (38, 20)
        >>> ExerciseSettings(decimal_operand="3.5").decimal_operand
        Decimal('3.5')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = _DEFAULTS.personal.name
    age: int = _DEFAULTS.personal.age
    height: float = _DEFAULTS.personal.height
    profession: str = _DEFAULTS.personal.profession
    is_student: bool = _DEFAULTS.personal.is_student
    grade: str = Field(default=_DEFAULTS.personal.grade, min_length=1, max_length=1)

    integer_value: int = _DEFAULTS.integer_value
    price: float = _DEFAULTS.price
    numeric_text: str = _DEFAULTS.numeric_text

    addend_a: int = _DEFAULTS.addend_a
    addend_b: int = _DEFAULTS.addend_b
    float_operand: float = _DEFAULTS.float_operand
    decimal_operand: Decimal = _DEFAULTS.decimal_operand
    decimal_factor: int = _DEFAULTS.decimal_factor

    inventory_start: int = _DEFAULTS.inventory_start
    hours_worked: int = Field(default=_DEFAULTS.payroll.hours_worked, ge=0)
    hourly_rate: int = Field(default=_DEFAULTS.payroll.hourly_rate, ge=0)

    @field_validator("name", "profession", "numeric_text", "grade", mode="before")
    @classmethod
    def _coerce_scalar_to_text(cls, v: Any) -> Any:
        """Keep numbers as text.

        ``--set exercises.numeric_text=123`` arrives as the integer 123
        after JSON coercion; the field must still hold the text ``"123"``.

        Examples:
            >>> ExerciseSettings._coerce_scalar_to_text(123)
            '123'
            >>> ExerciseSettings._coerce_scalar_to_text("abc")
            'abc'
        """
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("decimal_operand", mode="before")
    @classmethod
    def _coerce_float_to_decimal_text(cls, v: Any) -> Any:
        """Route floats through their shortest repr so 3.5 stays ``Decimal('3.5')``."""
        if isinstance(v, float):
            return str(v)
        return v

    def to_inputs(self) -> ExerciseInputs:
        """Convert the validated settings into domain inputs."""
        return ExerciseInputs(
            personal=PersonalInfo(
                name=self.name,
                age=self.age,
                height=self.height,
                profession=self.profession,
                is_student=self.is_student,
                grade=self.grade,
            ),
            integer_value=self.integer_value,
            price=self.price,
            numeric_text=self.numeric_text,
            addend_a=self.addend_a,
            addend_b=self.addend_b,
            float_operand=self.float_operand,
            decimal_operand=self.decimal_operand,
            decimal_factor=self.decimal_factor,
            inventory_start=self.inventory_start,
            payroll=Payroll(hours_worked=self.hours_worked, hourly_rate=self.hourly_rate),
        )


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten Pydantic errors into ``exercises.<field>: <message>`` lines."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"exercises.{location}: {error['msg']}")
    return "; ".join(parts)


def load_exercise_inputs(section: Mapping[str, Any]) -> ExerciseInputs:
    """Validate an ``[exercises]`` mapping and return domain inputs.

    Args:
        section: Raw configuration section; may be empty.

    Returns:
        ExerciseInputs with course defaults for absent keys.

    Raises:
        ConfigurationError: If a value has the wrong type, is out of range,
            or the key is unknown.

    Examples:
        >>> load_exercise_inputs({}) == ExerciseInputs()
        True
        >>> load_exercise_inputs({"inventory_start": 5}).inventory_start
        5
        >>> load_exercise_inputs({"grade": "AB"})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: exercises.grade: String should have at most 1 character
    """
    try:
        settings = ExerciseSettings.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error(exc)) from exc
    return settings.to_inputs()


__all__ = [
    "ExerciseSettings",
    "load_exercise_inputs",
]
