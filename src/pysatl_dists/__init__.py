"""
PySATL Dists
============

Uniform contract for probability distributions: probability values, support
descriptors, distribution contracts with generated log/complement/batch
variants, summary characteristics, the convolution algebra and built-in
distribution families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .probability import *
from .probability import __all__ as _probability_all
from .types import *
from .types import __all__ as _types_all
from .validation import *
from .validation import __all__ as _validation_all

__version__ = version("pysatl-dists")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_probability_all,
    *_types_all,
    *_validation_all,
]

del _distr_all
del _family_all
del _probability_all
del _types_all
del _validation_all
