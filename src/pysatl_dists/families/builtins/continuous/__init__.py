"""
Built-in continuous distribution families.

This module contains implementations of continuous distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dists.families.builtins.continuous.chi_squared import ChiSquared

__all__ = [
    "ChiSquared",
]
