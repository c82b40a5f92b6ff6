"""Unary, compound-assignment, and conditional operator exercises.

Contents:
    * :class:`InventoryStep` - one labelled change to the inventory counter.
    * :data:`INVENTORY_STEPS` - the course's delivery/return/restock sequence.
    * :func:`simulate_inventory` - running totals after each step.
    * :func:`compute_salary` - pay with double rate for overtime hours.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

#: Hours paid at the base rate before overtime applies.
REGULAR_HOURS: Final[int] = 40

#: Factor applied to the hourly rate for overtime hours.
OVERTIME_MULTIPLIER: Final[int] = 2


@dataclass(frozen=True, slots=True)
class InventoryStep:
    """A labelled change applied to the inventory counter."""

    label: str
    delta: int


INVENTORY_STEPS: Final[tuple[InventoryStep, ...]] = (
    InventoryStep("after delivery", -1),
    InventoryStep("after returned delivery", +1),
    InventoryStep("after new devices arrived", +5),
    InventoryStep("after devices delivered", -10),
)


def simulate_inventory(start: int, steps: Sequence[InventoryStep] = INVENTORY_STEPS) -> list[int]:
    """Apply ``steps`` to a counter starting at ``start`` in order.

    Args:
        start: Initial inventory count.
        steps: Changes applied one after another.

    Returns:
        The counter value after each step, one entry per step.

    Example:
        >>> simulate_inventory(20)
        [19, 20, 25, 15]
    """
    inventory = start
    totals: list[int] = []
    for step in steps:
        inventory += step.delta
        totals.append(inventory)
    return totals


def compute_salary(hours_worked: int, hourly_rate: int) -> int:
    """Return pay for ``hours_worked``, overtime paid at double the rate.

    Example:
        >>> compute_salary(45, 20)
        1000
        >>> compute_salary(40, 20)
        800
    """
    return (
        hours_worked * hourly_rate
        if hours_worked <= REGULAR_HOURS
        else REGULAR_HOURS * hourly_rate + (hours_worked - REGULAR_HOURS) * (hourly_rate * OVERTIME_MULTIPLIER)
    )


__all__ = [
    "INVENTORY_STEPS",
    "OVERTIME_MULTIPLIER",
    "REGULAR_HOURS",
    "InventoryStep",
    "compute_salary",
    "simulate_inventory",
]
