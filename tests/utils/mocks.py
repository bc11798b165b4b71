from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

import numpy as np

from pysatl_dists.distributions import (
    ContinuousDistribution,
    ContinuousSupport,
    DiscreteDistribution,
    ExplicitTableDiscreteSupport,
)
from pysatl_dists.probability import ONE, ZERO, Probability


@dataclass(frozen=True, slots=True)
class StandaloneBernoulli(DiscreteDistribution[int]):
    """Minimal discrete distribution on {0, 1} used to exercise the discrete contract."""

    p: float

    @property
    def support(self) -> ExplicitTableDiscreteSupport:
        return ExplicitTableDiscreteSupport([0, 1])

    def cdf(self, x: int) -> Probability:
        if x < 0:
            return ZERO
        if x < 1:
            return Probability(1.0 - self.p)
        return ONE

    def pmf(self, x: int) -> Probability:
        if x == 0:
            return Probability(1.0 - self.p)
        if x == 1:
            return Probability(self.p)
        return ZERO

    def sample(self, rng: np.random.Generator) -> int:
        return int(rng.random() < self.p)


@dataclass(frozen=True, slots=True)
class StandaloneUniform(ContinuousDistribution[float]):
    """Continuous uniform distribution on [a, b] used to exercise the continuous contract."""

    a: float = 0.0
    b: float = 1.0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(self.a, self.b)

    def cdf(self, x: float) -> Probability:
        return Probability.clamped((x - self.a) / (self.b - self.a))

    def pdf(self, x: float) -> float:
        return 1.0 / (self.b - self.a) if self.a <= x <= self.b else 0.0

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.a, self.b))
