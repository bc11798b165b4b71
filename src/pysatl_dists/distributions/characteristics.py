"""
Summary Characteristics
=======================

Optional contracts a distribution may implement in addition to
:class:`~pysatl_dists.distributions.distribution.Distribution`:

- :class:`UnivariateMoments` — mean, variance, skewness and kurtosis.
- :class:`Quantiles` — quantile function and median.
- :class:`Modes` — the set of modes.
- :class:`Entropy` — differential (or Shannon) entropy in nats.

A family without a formula for some characteristic raises
:class:`UnsupportedCharacteristicError` rather than returning a guessed value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_dists.probability import Probability
    from pysatl_dists.types import CharacteristicName


class UnsupportedCharacteristicError(NotImplementedError):
    """
    The characteristic has no implementation for this family.

    Parameters
    ----------
    characteristic : CharacteristicName
        Name of the missing characteristic.
    family : str
        Display name of the family.
    """

    def __init__(self, characteristic: CharacteristicName, family: str) -> None:
        super().__init__(f"'{characteristic}' is not available for {family} distributions")
        self.characteristic = characteristic
        self.family = family


class UnivariateMoments(ABC):
    """Moments of a univariate distribution."""

    __slots__ = ()

    @abstractmethod
    def mean(self) -> float: ...

    @abstractmethod
    def variance(self) -> float: ...

    @abstractmethod
    def skewness(self) -> float: ...

    @abstractmethod
    def excess_kurtosis(self) -> float: ...

    def std_dev(self) -> float:
        """Standard deviation, the square root of the variance."""
        return math.sqrt(self.variance())

    def kurtosis(self, excess: bool = False) -> float:
        """
        Raw or excess kurtosis.

        Parameters
        ----------
        excess : bool, default False
            If ``True`` return the excess kurtosis (raw kurtosis minus 3).
        """
        if excess:
            return self.excess_kurtosis()
        return self.excess_kurtosis() + 3.0


class Quantiles(ABC):
    __slots__ = ()

    @abstractmethod
    def quantile(self, p: Probability) -> float:
        """Smallest ``x`` with ``F(x) >= p``."""

    @abstractmethod
    def median(self) -> float: ...


class Modes(ABC):
    __slots__ = ()

    @abstractmethod
    def modes(self) -> list[float]:
        """All points where the density (or mass) attains its maximum."""


class Entropy(ABC):
    __slots__ = ()

    @abstractmethod
    def entropy(self) -> float:
        """Entropy in nats."""


__all__ = [
    "UnsupportedCharacteristicError",
    "UnivariateMoments",
    "Quantiles",
    "Modes",
    "Entropy",
]
