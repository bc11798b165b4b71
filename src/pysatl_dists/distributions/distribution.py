"""
Distribution Contracts
======================

This module defines the abstract contracts every distribution implements:

- :class:`Distribution` – support, ``cdf`` and ``sample`` primitives.
- :class:`DiscreteDistribution` – adds the ``pmf`` primitive.
- :class:`ContinuousDistribution` – adds the ``pdf`` primitive and
  ``loglikelihood``.

Implementers supply the primitives only. Log, complement, batch and sampling
variants are generated once here from the primitives, so the relations

- ``ccdf(x) == cdf(x).complement()``
- ``logcdf(x) == ln(cdf(x))``, ``logccdf(x) == ln(ccdf(x))``
- ``cdf_batch(xs) == [cdf(x) for x in xs]``

hold for every implementer. Generated methods cannot be overridden in
subclasses; doing so raises :class:`TypeError` at class creation. ``ccdf``
is the exception: it may be overridden to keep precision in the upper tail.

Notes
-----
- Probability-valued batches return ``list[Probability]``, float-valued
  batches return a ``float64`` NumPy array.
- Batch evaluation has no cross-element dependency.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from pysatl_dists.distributions.sampling import Sampler
from pysatl_dists.probability import Probability
from pysatl_dists.types import CharacteristicName, Kind
from pysatl_dists.validation import assert_gte

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pysatl_dists.distributions.support import Support
    from pysatl_dists.types import FloatArray, Shape


def _derived[F: Callable[..., Any]](func: F) -> F:
    """Mark a method as generated from the primitives."""
    setattr(func, "__is_derived", True)
    return func


def _ln(value: Probability | float) -> float:
    if isinstance(value, Probability):
        return value.ln()
    if value == 0.0:
        return -math.inf
    return math.log(value)


def _ln_variant(name: CharacteristicName) -> Callable[[Any, Any], float]:
    """Build ``log<name>(x) = ln(<name>(x))``."""

    @_derived
    def method(self: Any, x: Any) -> float:
        return _ln(getattr(self, name)(x))

    method.__name__ = f"log{name}"
    method.__doc__ = f"Evaluate ``ln {name}(x)``."
    return method


def _batch_variant(
    name: str, *, as_array: bool
) -> Callable[[Any, Iterable[Any]], list[Any] | FloatArray]:
    """Build ``<name>_batch(xs)``, the element-wise application of ``<name>``."""

    @_derived
    def method(self: Any, xs: Iterable[Any]) -> list[Any] | FloatArray:
        func = getattr(self, name)
        if as_array:
            return np.asarray([func(x) for x in xs], dtype=np.float64)
        return [func(x) for x in xs]

    method.__name__ = f"{name}_batch"
    method.__doc__ = f"Evaluate ``{name}`` element-wise over ``xs``, preserving order."
    return method


class Distribution[V](ABC):
    """
    Base contract of a probability distribution with values of type ``V``.

    Subclasses implement :attr:`support`, :meth:`cdf` and :meth:`sample`.
    """

    __slots__ = ()

    kind: ClassVar[Kind]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        derived = {
            name
            for base in cls.__mro__[1:]
            for name, attr in vars(base).items()
            if getattr(attr, "__is_derived", False)
        }
        overridden = sorted(derived & vars(cls).keys())
        if overridden:
            raise TypeError(
                f"{cls.__name__} overrides generated method(s) {', '.join(overridden)}; "
                "override the primitive characteristic instead."
            )

    @property
    @abstractmethod
    def support(self) -> Support:
        """Domain of the random variable."""

    @abstractmethod
    def cdf(self, x: V) -> Probability:
        """
        Evaluate the cumulative distribution function at ``x``.

        The CDF is the probability that the random variable takes a value less
        than or equal to ``x``: ``F(x) = P(X <= x)``.
        """

    def ccdf(self, x: V) -> Probability:
        """
        Evaluate the complementary CDF at ``x``: ``P(X > x) = 1 - F(x)``.
        """
        return self.cdf(x).complement()

    logcdf = _ln_variant(CharacteristicName.CDF)
    logccdf = _ln_variant(CharacteristicName.CCDF)

    cdf_batch = _batch_variant(CharacteristicName.CDF, as_array=False)
    ccdf_batch = _batch_variant(CharacteristicName.CCDF, as_array=False)
    logcdf_batch = _batch_variant(CharacteristicName.LOGCDF, as_array=True)
    logccdf_batch = _batch_variant(CharacteristicName.LOGCCDF, as_array=True)

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> V:
        """Draw a single value, advancing ``rng``."""

    @_derived
    def sample_n(self, rng: np.random.Generator, shape: Shape) -> np.ndarray[Any, Any]:
        """
        Draw an array of the requested shape.

        Every cell is filled, in row-major order, by an independent call
        to :meth:`sample`.

        Parameters
        ----------
        rng : numpy.random.Generator
            Random source.
        shape : int or tuple of int
            Shape of the returned array.

        Raises
        ------
        ValidationError
            If a dimension is negative.
        """
        dims = (shape,) if isinstance(shape, int) else shape
        for dim in dims:
            assert_gte(dim, 0, name="shape")
        size = math.prod(dims)
        draws = [self.sample(rng) for _ in range(size)]
        return np.asarray(draws).reshape(shape)

    @_derived
    def sample_iter(self, rng: np.random.Generator) -> Sampler[V]:
        """Infinite, non-restartable iterator of draws bound to ``rng``."""
        return Sampler(self, rng)


class DiscreteDistribution[V](Distribution[V]):
    """Distribution over a countable support, with a probability mass function."""

    __slots__ = ()

    kind = Kind.DISCRETE

    @abstractmethod
    def pmf(self, x: V) -> Probability:
        """
        Evaluate the probability mass function at ``x``: ``P(X = x)``.

        The masses over the whole support sum to one.
        """

    logpmf = _ln_variant(CharacteristicName.PMF)

    pmf_batch = _batch_variant(CharacteristicName.PMF, as_array=False)
    logpmf_batch = _batch_variant(CharacteristicName.LOGPMF, as_array=True)


class ContinuousDistribution[V](Distribution[V]):
    """Absolutely continuous distribution, with a probability density function."""

    __slots__ = ()

    kind = Kind.CONTINUOUS

    @abstractmethod
    def pdf(self, x: V) -> float:
        """
        Evaluate the probability density function at ``x``.

        For univariate distributions the density is the derivative of the CDF,
        ``f(x) = F'(x)``, so ``f(t) dt`` approximates ``P(t < X < t + dt)``.
        Densities are not probabilities and may exceed one.
        """

    logpdf = _ln_variant(CharacteristicName.PDF)

    pdf_batch = _batch_variant(CharacteristicName.PDF, as_array=True)
    logpdf_batch = _batch_variant(CharacteristicName.LOGPDF, as_array=True)

    @_derived
    def loglikelihood(self, xs: Iterable[V]) -> float:
        """
        Log-likelihood of a batch, ``sum(logpdf(x) for x in xs)``.

        The logs are summed directly rather than taking the log of the product
        of densities, which would underflow on large batches.
        Each term is ``ln(pdf(x))``, so a point where ``pdf`` itself underflows
        to zero contributes ``-inf``.
        """
        return float(np.sum(self.logpdf_batch(xs)))


__all__ = [
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
]
