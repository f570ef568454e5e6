"""
Built-in distribution families for PySATL extradist.

This package contains implementations of the distribution families that are
available by default: two discrete families, six continuous families and the
mixture of normal distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.continuous import (
    TruncatedNormalRejectionStrategy,
    configure_gompertz_family,
    configure_gumbel_family,
    configure_kumaraswamy_family,
    configure_lomax_family,
    configure_power_family,
    configure_truncated_normal_family,
)
from pysatl_extradist.families.builtins.discrete import (
    configure_discrete_uniform_family,
    configure_discrete_weibull_family,
)
from pysatl_extradist.families.builtins.mixture import (
    MixtureComponentSamplingStrategy,
    configure_normal_mixture_family,
    select_components,
)

__all__ = [
    "configure_discrete_uniform_family",
    "configure_discrete_weibull_family",
    "configure_gompertz_family",
    "configure_gumbel_family",
    "configure_kumaraswamy_family",
    "configure_lomax_family",
    "configure_power_family",
    "configure_truncated_normal_family",
    "configure_normal_mixture_family",
    "TruncatedNormalRejectionStrategy",
    "MixtureComponentSamplingStrategy",
    "select_components",
]
