"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.discrete.discrete_uniform import (
    configure_discrete_uniform_family,
)
from pysatl_extradist.families.builtins.discrete.discrete_weibull import (
    configure_discrete_weibull_family,
)

__all__ = [
    "configure_discrete_uniform_family",
    "configure_discrete_weibull_family",
]
