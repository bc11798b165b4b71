from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice

import numpy as np
import pytest

from pysatl_dists.distributions.sampling import Sampler, default_rng
from pysatl_dists.families import ChiSquared
from pysatl_dists.validation import ValidationError
from tests.utils.mocks import StandaloneBernoulli, StandaloneUniform


class TestSampleN:
    @pytest.mark.parametrize(
        "shape, expected", [(5, (5,)), ((3, 4), (3, 4)), ((2, 0), (2, 0)), ((2, 3, 2), (2, 3, 2))]
    )
    def test_shape(self, rng, shape, expected):
        assert ChiSquared(2).sample_n(rng, shape).shape == expected

    @pytest.mark.parametrize("shape", [-1, (2, -3)], ids=["int", "tuple"])
    def test_negative_dimension_is_rejected(self, rng, shape):
        with pytest.raises(ValidationError, match="shape >= 0"):
            ChiSquared(2).sample_n(rng, shape)

    def test_cells_are_sequential_draws(self):
        distr = StandaloneUniform()
        batch = distr.sample_n(default_rng(7), (2, 3))

        rng = default_rng(7)
        expected = [distr.sample(rng) for _ in range(6)]
        np.testing.assert_array_equal(batch.ravel(), expected)

    def test_discrete_values_keep_integer_dtype(self, rng):
        batch = StandaloneBernoulli(0.5).sample_n(rng, 100)
        assert np.issubdtype(batch.dtype, np.integer)
        assert set(batch.tolist()) <= {0, 1}

    def test_uniform_bounds_and_mean(self, rng):
        arr = StandaloneUniform().sample_n(rng, 1000)

        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr <= 1.0)).all()
        assert float(arr.mean()) == pytest.approx(0.5, abs=0.1)


class TestSampler:
    def test_sample_iter_returns_sampler(self, rng):
        distr = ChiSquared(3)
        sampler = distr.sample_iter(rng)

        assert isinstance(sampler, Sampler)
        assert sampler.distribution is distr
        assert sampler.rng is rng

    def test_iterator_is_not_restartable(self, rng):
        sampler = ChiSquared(3).sample_iter(rng)
        assert iter(sampler) is sampler

        first = list(islice(sampler, 3))
        second = list(islice(sampler, 3))
        assert len(first) == len(second) == 3
        assert first != second

    def test_take(self, rng):
        draws = StandaloneUniform().sample_iter(rng).take(10)
        assert len(draws) == 10
        assert all(0.0 <= x <= 1.0 for x in draws)

    def test_shared_source_is_deterministic(self):
        distr = ChiSquared(4)

        shared = default_rng(11)
        left, right = distr.sample_iter(shared), distr.sample_iter(shared)
        interleaved = [next(left), next(right), next(left), next(right)]

        assert interleaved == distr.sample_iter(default_rng(11)).take(4)

    def test_repr(self, rng):
        assert repr(ChiSquared(3).sample_iter(rng)) == "Sampler(ChiSq(3))"
