from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
import pytest

from pysatl_dists.distributions import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
)
from pysatl_dists.families import ChiSquared
from pysatl_dists.probability import Probability
from pysatl_dists.types import Kind
from tests.utils.mocks import StandaloneBernoulli, StandaloneUniform


class DistributionTestBase:
    POINTS = [-1.0, 0.0, 0.25, 0.5, 1.0, 2.0, 7.5]

    def make_distributions(self) -> list[Distribution[Any]]:
        return [StandaloneUniform(0.0, 2.0), ChiSquared(3), StandaloneBernoulli(0.3)]


class TestDerivedCdfVariants(DistributionTestBase):
    @pytest.mark.parametrize("index", [0, 1, 2], ids=["uniform", "chi_squared", "bernoulli"])
    def test_cdf_plus_ccdf_is_one(self, index):
        distr = self.make_distributions()[index]
        for x in self.POINTS:
            assert float(distr.cdf(x)) + float(distr.ccdf(x)) == pytest.approx(1.0, abs=1e-15)

    @pytest.mark.parametrize("index", [0, 1, 2], ids=["uniform", "chi_squared", "bernoulli"])
    def test_ccdf_is_complement(self, index):
        distr = self.make_distributions()[index]
        for x in self.POINTS:
            assert distr.ccdf(x) == distr.cdf(x).complement()

    @pytest.mark.parametrize("index", [0, 1, 2], ids=["uniform", "chi_squared", "bernoulli"])
    def test_log_variants_are_exact(self, index):
        distr = self.make_distributions()[index]
        for x in self.POINTS:
            assert distr.logcdf(x) == distr.cdf(x).ln()
            assert distr.logccdf(x) == distr.ccdf(x).ln()

    def test_logcdf_below_support_is_minus_inf(self):
        assert ChiSquared(2).logcdf(-1.0) == -math.inf
        assert ChiSquared(2).logccdf(-1.0) == 0.0

    @pytest.mark.parametrize("index", [0, 1, 2], ids=["uniform", "chi_squared", "bernoulli"])
    def test_batches_match_scalar_calls(self, index):
        distr = self.make_distributions()[index]
        xs = np.array(self.POINTS)

        assert distr.cdf_batch(xs) == [distr.cdf(x) for x in xs]
        assert distr.ccdf_batch(self.POINTS) == [distr.ccdf(x) for x in self.POINTS]
        np.testing.assert_array_equal(
            distr.logcdf_batch(xs), np.array([distr.logcdf(x) for x in xs])
        )
        np.testing.assert_array_equal(
            distr.logccdf_batch(xs), np.array([distr.logccdf(x) for x in xs])
        )

    def test_batches_preserve_order_and_length(self):
        distr = ChiSquared(4)
        xs = [5.0, 1.0, 3.0, 1.0]
        result = distr.cdf_batch(xs)

        assert len(result) == len(xs)
        assert result[1] == result[3]
        assert result[0] > result[2] > result[1]

    def test_empty_batches(self):
        distr = ChiSquared(4)
        assert distr.cdf_batch([]) == []
        assert distr.logcdf_batch([]).shape == (0,)

    def test_batch_accepts_generators(self):
        distr = StandaloneUniform()
        assert distr.cdf_batch(x / 4 for x in range(5)) == [
            Probability(v) for v in (0.0, 0.25, 0.5, 0.75, 1.0)
        ]


class TestDiscreteContract:
    def test_kind(self):
        assert StandaloneBernoulli(0.3).kind == Kind.DISCRETE
        assert DiscreteDistribution.kind == Kind.DISCRETE

    def test_pmf_variants(self):
        distr = StandaloneBernoulli(0.3)
        xs = [0, 1, 2]

        assert distr.pmf_batch(xs) == [
            Probability(1.0 - 0.3),
            Probability(0.3),
            Probability(0.0),
        ]
        assert distr.logpmf(1) == math.log(0.3)
        assert distr.logpmf(2) == -math.inf
        np.testing.assert_array_equal(distr.logpmf_batch(xs), [distr.logpmf(x) for x in xs])


class TestContinuousContract:
    def test_kind(self):
        assert ChiSquared(1).kind == Kind.CONTINUOUS
        assert ContinuousDistribution.kind == Kind.CONTINUOUS

    def test_pdf_variants(self):
        distr = StandaloneUniform(0.0, 0.5)
        xs = [-1.0, 0.25, 0.5]

        np.testing.assert_array_equal(distr.pdf_batch(xs), [0.0, 2.0, 2.0])
        assert distr.logpdf(0.25) == math.log(2.0)
        assert distr.logpdf(-1.0) == -math.inf
        np.testing.assert_array_equal(distr.logpdf_batch(xs), [distr.logpdf(x) for x in xs])


class TestGeneratedMethodsAreSealed:
    @pytest.mark.parametrize(
        "name", ["logcdf", "cdf_batch", "logccdf_batch", "sample_n", "sample_iter", "loglikelihood"]
    )
    def test_overriding_generated_method_fails(self, name):
        with pytest.raises(TypeError, match=name):
            type("Broken", (StandaloneUniform,), {name: lambda self, *args: None})

    def test_overriding_discrete_generated_method_fails(self):
        with pytest.raises(TypeError, match="logpmf"):
            type("Broken", (StandaloneBernoulli,), {"logpmf": lambda self, x: 0.0})

    def test_ccdf_may_be_overridden(self):
        @dataclass(frozen=True, slots=True)
        class TailUniform(StandaloneUniform):
            def ccdf(self, x: float) -> Probability:
                return Probability.clamped((self.b - x) / (self.b - self.a))

        distr = TailUniform()
        assert distr.ccdf(0.25) == Probability(0.75)
        assert distr.logccdf(0.25) == math.log(0.75)
        assert distr.ccdf_batch([0.25]) == [Probability(0.75)]

    def test_primitives_are_abstract(self):
        with pytest.raises(TypeError):
            Distribution()  # type: ignore[abstract]
        with pytest.raises(TypeError):
            ContinuousDistribution()  # type: ignore[abstract]
