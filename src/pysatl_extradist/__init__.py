"""
PySATL extradist
================

Additional probability distributions for PySATL: discrete uniform, discrete
Weibull, Gompertz, Gumbel, Kumaraswamy, Lomax, power, truncated normal and
mixtures of normals. Every family offers vectorized density, cumulative,
quantile and sampling operations with modular recycling of its inputs.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from . import api
from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .families import *
from .families import __all__ as _family_all
from .markers import INVALID, NA, is_invalid, is_na
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-extradist")
__all__ = [
    "__version__",
    "api",
    "NA",
    "INVALID",
    "is_na",
    "is_invalid",
    *_distr_all,
    *_exceptions_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _exceptions_all
del _family_all
del _types_all
