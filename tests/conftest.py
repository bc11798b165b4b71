from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_dists.distributions.sampling import default_rng


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source shared by sampling tests."""
    return default_rng(20250101)
