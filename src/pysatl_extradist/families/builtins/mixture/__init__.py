"""
Built-in mixture distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.mixture.normal_mixture import (
    MixtureComponentSamplingStrategy,
    configure_normal_mixture_family,
    select_components,
)

__all__ = [
    "configure_normal_mixture_family",
    "MixtureComponentSamplingStrategy",
    "select_components",
]
