"""
Parameter Validation
====================

Assertion helpers used by every checked constructor. Each helper returns the
validated value unchanged, so it can be used inline::

    k = assert_gte(k, 1, name="k")

and raises :class:`ValidationError` describing the failed constraint otherwise.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pysatl_dists.types import Number

log = logging.getLogger(__name__)


class ValidationError(ValueError):
    """
    A parameter did not satisfy its constraint.

    Parameters
    ----------
    constraint : str
        Human-readable description of the constraint, e.g. ``"k >= 1"``.
    name : str
        Name of the validated parameter.
    value : Any
        Offending value.
    bound : Any
        Bound (or ``(low, high)`` pair) the value was checked against.
    """

    def __init__(self, constraint: str, name: str, value: Any, bound: Any) -> None:
        super().__init__(f'Constraint "{constraint}" does not hold (got {name}={value!r})')
        self.constraint = constraint
        self.name = name
        self.value = value
        self.bound = bound


def _fail(constraint: str, name: str, value: Any, bound: Any) -> ValidationError:
    log.debug("Validation failed: %s with %s=%r", constraint, name, value)
    return ValidationError(constraint, name, value, bound)


def assert_gte[T: Number](value: T, bound: Number, *, name: str = "value") -> T:
    """
    Check that ``value >= bound``.

    Raises
    ------
    ValidationError
        If the inequality does not hold (NaN never satisfies it).
    """
    if not value >= bound:
        raise _fail(f"{name} >= {bound}", name, value, bound)
    return value


def assert_lte[T: Number](value: T, bound: Number, *, name: str = "value") -> T:
    """
    Check that ``value <= bound``.

    Raises
    ------
    ValidationError
        If the inequality does not hold (NaN never satisfies it).
    """
    if not value <= bound:
        raise _fail(f"{name} <= {bound}", name, value, bound)
    return value


def assert_in_range[T: Number](value: T, low: Number, high: Number, *, name: str = "value") -> T:
    """
    Check that ``low <= value <= high``.

    Raises
    ------
    ValidationError
        If ``value`` lies outside the closed range or is NaN.
    """
    if not low <= value <= high:
        raise _fail(f"{low} <= {name} <= {high}", name, value, (low, high))
    return value


def assert_integral(value: Number, *, name: str = "value") -> int:
    """
    Check that ``value`` is a finite whole number and return it as ``int``.

    Raises
    ------
    ValidationError
        If ``value`` has a fractional part or is not finite.
    """
    if not float(value).is_integer():
        raise _fail(f"{name} is an integer", name, value, None)
    return int(value)


__all__ = [
    "ValidationError",
    "assert_gte",
    "assert_lte",
    "assert_in_range",
    "assert_integral",
]
