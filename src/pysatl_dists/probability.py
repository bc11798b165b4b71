"""
Probability Value Type
======================

:class:`Probability` is the return type of every ``cdf``/``ccdf``/``pmf``
evaluation. Wrapping the raw float keeps callers from mistaking an arbitrary
number for a probability: a checked construction guarantees ``0 <= p <= 1``.

Notes
-----
- ``Probability(p)`` and :meth:`Probability.new` validate the value.
- :meth:`Probability.new_unchecked` skips validation and is reserved for
  formulas whose result is in ``[0, 1]`` by construction.
- ``~p`` is the complement ``1 - p``.
- Ordering accepts plain numbers on either side (``p <= 0.5``); equality is
  value equality between probabilities only.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import Self

from pysatl_dists.validation import assert_in_range


def _comparable(other: object) -> float | None:
    """Numeric value of an ordering operand, or ``None`` if it is not comparable."""
    if isinstance(other, Probability):
        return other.value
    if isinstance(other, int | float):
        return float(other)
    return None


@dataclass(frozen=True, slots=True)
class Probability:
    """
    Immutable probability value in ``[0, 1]``.

    Parameters
    ----------
    value : float
        Probability value.

    Raises
    ------
    ValidationError
        If ``value`` is outside ``[0, 1]`` or NaN.
    """

    value: float

    def __post_init__(self) -> None:
        assert_in_range(self.value, 0.0, 1.0, name="p")
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def new(cls, p: float) -> Self:
        """Checked constructor, same as ``Probability(p)``."""
        return cls(p)

    @classmethod
    def new_unchecked(cls, p: float) -> Self:
        """
        Build a probability without validating ``p``.

        The caller guarantees ``0 <= p <= 1``.
        """
        obj = object.__new__(cls)
        object.__setattr__(obj, "value", float(p))
        return obj

    @classmethod
    def clamped(cls, p: float) -> Self:
        """
        Build a probability, clamping ``p`` into ``[0, 1]``.

        Useful for values that may drift slightly outside the range due to
        rounding. NaN cannot be clamped and still raises.
        """
        if math.isnan(p):
            return cls(p)
        return cls.new_unchecked(min(max(p, 0.0), 1.0))

    def complement(self) -> Probability:
        """Return ``1 - p``."""
        return Probability.new_unchecked(1.0 - self.value)

    __invert__ = complement

    def ln(self) -> float:
        """Natural logarithm of the probability, ``-inf`` at ``p = 0``."""
        if self.value == 0.0:
            return -math.inf
        return math.log(self.value)

    def isclose(
        self, other: Probability | float, *, rel_tol: float = 1e-9, abs_tol: float = 0.0
    ) -> bool:
        """Compare with another probability within floating-point tolerance."""
        return math.isclose(self.value, float(other), rel_tol=rel_tol, abs_tol=abs_tol)

    def __float__(self) -> float:
        return self.value

    def __lt__(self, other: object) -> bool:
        rhs = _comparable(other)
        return NotImplemented if rhs is None else self.value < rhs

    def __le__(self, other: object) -> bool:
        rhs = _comparable(other)
        return NotImplemented if rhs is None else self.value <= rhs

    def __gt__(self, other: object) -> bool:
        rhs = _comparable(other)
        return NotImplemented if rhs is None else self.value > rhs

    def __ge__(self, other: object) -> bool:
        rhs = _comparable(other)
        return NotImplemented if rhs is None else self.value >= rhs

    def __repr__(self) -> str:
        return f"Probability({self.value!r})"


ZERO = Probability.new_unchecked(0.0)
"""Probability of an impossible event."""

ONE = Probability.new_unchecked(1.0)
"""Probability of a certain event."""


__all__ = [
    "Probability",
    "ZERO",
    "ONE",
]
