"""
Numerical Fitters
=================

Numerical fallbacks for characteristics a family does not provide in closed
form. Fitters are opt-in: a family's own ``quantile`` never delegates here
silently.

- :func:`ppf_from_cdf` — invert a monotone univariate CDF by bracket
  expansion and bisection.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from math import inf, isfinite
from typing import TYPE_CHECKING

from pysatl_dists.probability import Probability

if TYPE_CHECKING:
    from pysatl_dists.distributions.distribution import Distribution


def _bracket(
    distribution: Distribution[float],
    q: float,
    *,
    x0: float,
    init_step: float,
    expand_factor: float,
    max_expand: int,
) -> tuple[float, float]:
    """Find ``L < R`` with ``cdf(L) <= q < cdf(R)``."""
    step = init_step
    left, right = x0 - step, x0 + step
    f_left, f_right = float(distribution.cdf(left)), float(distribution.cdf(right))

    for _ in range(max_expand):
        if f_left <= q < f_right:
            return left, right
        if f_left > q:
            step *= expand_factor
            left -= step
            f_left = float(distribution.cdf(left))
        if q >= f_right:
            step *= expand_factor
            right += step
            f_right = float(distribution.cdf(right))

    if not f_left <= q < f_right:
        warnings.warn(
            f"Could not bracket q={q} for {distribution} within {max_expand} expansions; "
            "the result is the closest bound found.",
            UserWarning,
            stacklevel=3,
        )
    return left, right


def ppf_from_cdf(
    distribution: Distribution[float],
    q: Probability | float,
    *,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> float:
    """
    Numerically invert the CDF of a univariate distribution.

    Parameters
    ----------
    distribution : Distribution
        Univariate distribution with a monotone ``cdf``.
    q : Probability or float
        Target probability.
    x0 : float, default 0.0
        Initial bracket center.
    init_step : float, default 1.0
        Initial half-width of the bracket.
    expand_factor : float, default 2.0
        Multiplicative growth of the bracket per expansion.
    max_expand : int, default 60
        Maximum number of bracket expansions.
    x_tol : float, default 1e-12
        Relative tolerance in ``x`` for the bisection.
    max_iter : int, default 200
        Maximum number of bisection steps.

    Returns
    -------
    float
        ``x`` such that ``cdf(x) ≈ q``. ``q <= 0`` maps to ``-inf`` and
        ``q >= 1`` maps to ``+inf``.

    Raises
    ------
    ValidationError
        If ``q`` is a float outside ``[0, 1]``.
    """
    q = float(q if isinstance(q, Probability) else Probability(q))
    if q <= 0.0:
        return -inf
    if q >= 1.0:
        return inf

    left, right = _bracket(
        distribution,
        q,
        x0=x0,
        init_step=init_step,
        expand_factor=expand_factor,
        max_expand=max_expand,
    )
    if not (isfinite(left) and isfinite(right)):
        return right

    for _ in range(max_iter):
        if right - left <= x_tol * (1.0 + max(abs(left), abs(right))):
            break
        mid = 0.5 * (left + right)
        if q < float(distribution.cdf(mid)):
            right = mid
        else:
            left = mid

    return 0.5 * (left + right)


__all__ = [
    "ppf_from_cdf",
]
