"""
Distribution families.

Concrete distributions implementing the contracts of
:mod:`pysatl_dists.distributions`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import ChiSquared

__all__ = [
    "ChiSquared",
]
