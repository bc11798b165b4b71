"""
Distributions subpackage

Contracts and shared machinery for probability distributions:

- distribution contracts with generated derived methods (:mod:`.distribution`);
- summary characteristics (:mod:`.characteristics`);
- convolution algebra (:mod:`.convolution`);
- numerical fitters (:mod:`.fitters`);
- lazy sampling (:mod:`.sampling`);
- support descriptors (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .characteristics import (
    Entropy,
    Modes,
    Quantiles,
    UnivariateMoments,
    UnsupportedCharacteristicError,
)
from .convolution import Convolution, ConvolutionError, ConvolutionFailure
from .distribution import ContinuousDistribution, DiscreteDistribution, Distribution
from .fitters import ppf_from_cdf
from .sampling import Sampler, default_rng
from .support import (
    NON_NEGATIVE_INTEGERS,
    NON_NEGATIVE_REALS,
    REAL_LINE,
    ContinuousSupport,
    DiscreteSupport,
    ExplicitTableDiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # contracts
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    # characteristics
    "UnivariateMoments",
    "Quantiles",
    "Modes",
    "Entropy",
    "UnsupportedCharacteristicError",
    # convolution
    "Convolution",
    "ConvolutionError",
    "ConvolutionFailure",
    # fitters
    "ppf_from_cdf",
    # sampling
    "Sampler",
    "default_rng",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerLatticeDiscreteSupport",
    "REAL_LINE",
    "NON_NEGATIVE_REALS",
    "NON_NEGATIVE_INTEGERS",
]
