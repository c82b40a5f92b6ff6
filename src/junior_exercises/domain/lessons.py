"""Lesson catalogue and line rendering.

Every exercise renders to a lazy iterator of output lines. Consumers write
each line as soon as it is produced, so a failure in a later exercise (an
invalid numeric literal) leaves the earlier lines already printed.

Contents:
    * :class:`Exercise` - title plus renderer (``None`` when never implemented).
    * :data:`CATALOGUE` - lessons mapped to their exercises.
    * :func:`render_lesson` - lines for one lesson.
    * :func:`render_all` - lines for several lessons in canonical order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Final

from .conversions import (
    add_int_and_float,
    inferred_type_name,
    multiply_decimal,
    parse_integer,
    truncate_to_int,
    widen_to_float,
)
from .enums import Lesson
from .operators import INVENTORY_STEPS, compute_salary, simulate_inventory
from .values import ExerciseInputs

Renderer = Callable[[ExerciseInputs], Iterator[str]]

NOT_IMPLEMENTED_NOTE: Final[str] = "(not implemented)"

LESSON_TITLES: Final[Mapping[Lesson, str]] = {
    Lesson.INTRODUCTION: "Lesson 1: Introduction",
    Lesson.VARIABLES: "Lesson 2: Variables and types",
    Lesson.OPERATORS: "Lesson 3: Operators",
}


@dataclass(frozen=True, slots=True)
class Exercise:
    """A titled exercise; ``render`` is ``None`` for exercises left undone."""

    title: str
    render: Renderer | None = None

    @property
    def implemented(self) -> bool:
        return self.render is not None


# ---------------------------------------------------------------- introduction


def _personalized_greeting(inputs: ExerciseInputs) -> Iterator[str]:
    yield f"Hello! My name is {inputs.personal.name}!"


def _multiple_lines(inputs: ExerciseInputs) -> Iterator[str]:
    personal = inputs.personal
    yield "Hello World from Python!"
    yield f"My name is {personal.name}"
    yield f"My age is {personal.age}"
    yield f"My height is {personal.height}"


def _info_sentence(inputs: ExerciseInputs) -> Iterator[str]:
    personal = inputs.personal
    yield (
        f"My name is {personal.name}, I am {personal.age} years old, my height is {personal.height}, "
        f"and I specialize in {personal.profession}"
    )


def _simple_sum(inputs: ExerciseInputs) -> Iterator[str]:
    total = inputs.addend_a + inputs.addend_b
    yield f"The sum of {inputs.addend_a} and {inputs.addend_b} is: {total}"


# ------------------------------------------------------------------- variables


def _personal_info(inputs: ExerciseInputs) -> Iterator[str]:
    personal = inputs.personal
    yield "1. Hello."
    yield f"2. My name is {personal.name}."
    yield f"3. I am {personal.age} years old."
    yield f"4. My height is {personal.height} feet."
    yield f"5. I am a student: {personal.is_student}."
    yield f"6. My grade is {personal.grade}."


def _type_conversions(inputs: ExerciseInputs) -> Iterator[str]:
    yield f"1. Original number: {inputs.integer_value}."
    yield f"2. Converted to float: {widen_to_float(inputs.integer_value)}."
    yield f"3. Original price: {inputs.price}."
    yield f"4. Integer price: {truncate_to_int(inputs.price)}."
    yield f"5. Converted text: {parse_integer(inputs.numeric_text)}."


def _mixed_arithmetic(inputs: ExerciseInputs) -> Iterator[str]:
    total = add_int_and_float(inputs.integer_value, inputs.float_operand)
    product = multiply_decimal(inputs.decimal_operand, inputs.decimal_factor)
    yield f"1. Result 1 (int {inputs.integer_value} + float {inputs.float_operand}): {total}"
    yield f"2. Result 2 (decimal {inputs.decimal_operand} * int {inputs.decimal_factor}): {product}"


def _inferred_types(inputs: ExerciseInputs) -> Iterator[str]:
    number = 42
    text = "Hello, World!"
    decimal_number = 3.14
    is_true = True
    yield f"1. Type of number: {inferred_type_name(number)}"
    yield f"2. Type of text: {inferred_type_name(text)}"
    yield f"3. Type of decimal_number: {inferred_type_name(decimal_number)}"
    yield f"4. Type of is_true: {inferred_type_name(is_true)}"


# ------------------------------------------------------------------- operators


def _inventory(inputs: ExerciseInputs) -> Iterator[str]:
    yield f"Total inventory: {inputs.inventory_start}"
    totals = simulate_inventory(inputs.inventory_start, INVENTORY_STEPS)
    for step, total in zip(INVENTORY_STEPS, totals, strict=True):
        yield f"Total inventory {step.label}: {total}"


def _salary(inputs: ExerciseInputs) -> Iterator[str]:
    payroll = inputs.payroll
    yield f"Hours worked: {payroll.hours_worked}, hourly rate: {payroll.hourly_rate}"
    yield f"Total salary: {compute_salary(payroll.hours_worked, payroll.hourly_rate)}"


CATALOGUE: Final[Mapping[Lesson, tuple[Exercise, ...]]] = {
    Lesson.INTRODUCTION: (
        Exercise("Personalized greeting", _personalized_greeting),
        Exercise("Multiple lines", _multiple_lines),
        Exercise("Personal information", _info_sentence),
        Exercise("Simple sum", _simple_sum),
    ),
    Lesson.VARIABLES: (
        Exercise("Personal info", _personal_info),
        Exercise("Type conversions", _type_conversions),
        Exercise("Calculations with mixed types", _mixed_arithmetic),
        Exercise("Inferred types", _inferred_types),
    ),
    Lesson.OPERATORS: (
        Exercise("Technical inventory", _inventory),
        Exercise("Salary with overtime", _salary),
        Exercise("Access validation"),
        Exercise("Performance comparison"),
        Exercise("Support ticket load"),
    ),
}


def render_lesson(lesson: Lesson, inputs: ExerciseInputs) -> Iterator[str]:
    """Yield the output lines of one lesson.

    Each exercise gets a header line and is followed by a blank line.
    Exercises without an implementation print a note instead of output.

    Args:
        lesson: Lesson to render.
        inputs: Values the exercises print and compute with.

    Yields:
        Output lines without trailing newlines.

    Raises:
        InvalidNumericLiteral: When ``inputs.numeric_text`` is not an integer.
            Raised lazily, after the preceding lines have been yielded.

    Example:
        >>> lines = list(render_lesson(Lesson.OPERATORS, ExerciseInputs()))
        >>> lines[0]
        'Lesson 3: Operators'
        >>> "Total salary: 1000" in lines
        True
    """
    yield LESSON_TITLES[lesson]
    yield ""
    for number, exercise in enumerate(CATALOGUE[lesson], start=1):
        yield f" - Exercise {number}. {exercise.title}"
        if exercise.render is None:
            yield NOT_IMPLEMENTED_NOTE
        else:
            yield from exercise.render(inputs)
        yield ""


def render_all(inputs: ExerciseInputs, lessons: Iterable[Lesson] | None = None) -> Iterator[str]:
    """Yield the lines of ``lessons`` (default: all) in canonical order.

    Requested lessons are de-duplicated and always run in course order,
    so the output for a given selection and inputs is always identical.

    Example:
        >>> lines = list(render_all(ExerciseInputs(), [Lesson.OPERATORS, Lesson.INTRODUCTION]))
        >>> [line for line in lines if line.startswith("Lesson")]
        ['Lesson 1: Introduction', 'Lesson 3: Operators']
    """
    selected = set(Lesson) if lessons is None else set(lessons)
    for lesson in Lesson:
        if lesson in selected:
            yield from render_lesson(lesson, inputs)


__all__ = [
    "CATALOGUE",
    "LESSON_TITLES",
    "NOT_IMPLEMENTED_NOTE",
    "Exercise",
    "Renderer",
    "render_all",
    "render_lesson",
]
