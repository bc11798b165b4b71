"""
Sampling Interfaces
===================

Lazy sampling over a distribution and a caller-owned random source.

Notes
-----
- The random source is a :class:`numpy.random.Generator`. It is never created
  implicitly by a distribution: callers build it (e.g. with
  :func:`default_rng`) and keep control over it, so one seeded source can be
  shared deterministically between several samplers.
- A :class:`Sampler` is an iterator, not an iterable: once consumed it cannot
  be restarted. Build a new one with :meth:`Distribution.sample_iter`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_dists.distributions.distribution import Distribution


def default_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source used throughout the package."""
    return np.random.default_rng(seed)


class Sampler[V]:
    """
    Infinite lazy sequence of independent draws.

    Parameters
    ----------
    distribution : Distribution
        Distribution to draw from.
    rng : numpy.random.Generator
        Random source. The sampler advances it on every draw but does not own it.
    """

    __slots__ = ("distribution", "rng")

    def __init__(self, distribution: Distribution[V], rng: np.random.Generator) -> None:
        self.distribution = distribution
        self.rng = rng

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        return self.distribution.sample(self.rng)

    def take(self, n: int) -> list[V]:
        """Draw the next ``n`` values."""
        return list(islice(self, n))

    def __repr__(self) -> str:
        return f"Sampler({self.distribution})"


__all__ = [
    "Sampler",
    "default_rng",
]
