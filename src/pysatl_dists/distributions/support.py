"""
Support Descriptors
===================

Stateless descriptors of the domain of a random variable. A distribution
returns its support from the :attr:`Distribution.support` property; supports
have no lifecycle of their own.

- :class:`ContinuousSupport` — an interval of the real line.
- :class:`ExplicitTableDiscreteSupport` — a finite ordered set of points.
- :class:`IntegerLatticeDiscreteSupport` — ``{residue + n * modulus}``,
  optionally bounded.

Common supports are exposed as module constants: :data:`REAL_LINE`,
:data:`NON_NEGATIVE_REALS` and :data:`NON_NEGATIVE_INTEGERS`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_dists.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """
    Finite support given by an explicit table of points.

    Parameters
    ----------
    points : Iterable[Number]
        Support points; duplicates are dropped and the table is sorted.

    Raises
    ------
    ValueError
        If ``points`` is empty.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number]) -> None:
        arr = np.unique(np.asarray(list(points)))
        if arr.size == 0:
            raise ValueError("Points must be non-empty")
        self._points = arr

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x)
        result = np.isin(arr, self._points)
        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[Number]:
        return iter(self._points)

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer lattice ``{residue + n * modulus | n ∈ Z}`` clipped to
    ``[min_k, max_k]`` when bounds are given.
    """

    residue: int = 0
    modulus: int = 1
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0)).astype(np.int64)

        mask = finite & (xf == v) & (((v - self.residue) % self.modulus) == 0)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        """Smallest lattice point, or ``None`` when unbounded on the left or empty."""
        if self.min_k is None:
            return None
        first = self.min_k + (self.residue - self.min_k) % self.modulus
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def iter_points(self) -> Iterator[int]:
        first = self.first()
        if first is None:
            if self.min_k is None:
                raise RuntimeError(
                    "Cannot iterate points of a left-unbounded IntegerLatticeDiscreteSupport. "
                    "Provide min_k to enable enumeration."
                )
            return iter(())

        def _gen() -> Iterator[int]:
            current = first
            while self.max_k is None or current <= self.max_k:
                yield current
                current += self.modulus

        return _gen()

    __iter__ = iter_points


REAL_LINE = ContinuousSupport()
"""The whole real line ``(-inf, inf)``."""

NON_NEGATIVE_REALS = ContinuousSupport(left=0.0)
"""The ray ``[0, inf)``."""

NON_NEGATIVE_INTEGERS = IntegerLatticeDiscreteSupport(min_k=0)
"""The integers ``{0, 1, 2, ...}``."""


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
    "REAL_LINE",
    "NON_NEGATIVE_REALS",
    "NON_NEGATIVE_INTEGERS",
]
