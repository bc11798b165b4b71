"""
Convolution Algebra
===================

Convolution combines two distributions of the same family into the
distribution of the sum of two independent random variables drawn from them.

A family opts in by inheriting :class:`Convolution` and implementing

- :meth:`Convolution.closes_with` — the family's closure predicate, i.e.
  when the sum stays in the family;
- :meth:`Convolution.convolve_pair` — the parameters of the sum.

When the closure predicate fails the result is a :class:`ConvolutionError`,
never a partially built distribution. Operands are never modified.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, Self

log = logging.getLogger(__name__)


class ConvolutionFailure(StrEnum):
    """
    Reasons a convolution may fail.

    Attributes
    ----------
    MIXED_PARAMETERS
        Operands of the same family carry parameters the family cannot combine.
    INCOMPATIBLE_FAMILY
        Operands belong to different families.
    """

    MIXED_PARAMETERS = "mixed parameters"
    INCOMPATIBLE_FAMILY = "incompatible family"


class ConvolutionError(Exception):
    """
    Two distributions cannot be convolved into a distribution of their family.

    Parameters
    ----------
    reason : ConvolutionFailure
        Why the closure condition failed.
    left, right : Any
        The operands, unchanged.
    """

    def __init__(self, reason: ConvolutionFailure, left: Any, right: Any) -> None:
        super().__init__(f"Cannot convolve {left} with {right}: {reason}")
        self.reason = reason
        self.left = left
        self.right = right


class Convolution(ABC):
    """Closure of a family under addition of independent random variables."""

    __slots__ = ()

    @abstractmethod
    def closes_with(self, other: Any) -> bool:
        """Whether ``self`` and ``other`` convolve into this family."""

    @classmethod
    @abstractmethod
    def convolve_pair(cls, a: Self, b: Self) -> Self:
        """
        Distribution of ``A + B`` for independent ``A ~ a`` and ``B ~ b``.

        Raises
        ------
        ConvolutionError
            If the family's closure predicate does not hold for ``a`` and ``b``.
        """

    def convolve(self, other: Self) -> Self:
        """Convolve with ``other``; see :meth:`convolve_pair`."""
        result = type(self).convolve_pair(self, other)
        log.debug("Convolved %s with %s into %s", self, other, result)
        return result


__all__ = [
    "ConvolutionFailure",
    "ConvolutionError",
    "Convolution",
]
