"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradist.families.builtins.continuous.gompertz import configure_gompertz_family
from pysatl_extradist.families.builtins.continuous.gumbel import configure_gumbel_family
from pysatl_extradist.families.builtins.continuous.kumaraswamy import (
    configure_kumaraswamy_family,
)
from pysatl_extradist.families.builtins.continuous.lomax import configure_lomax_family
from pysatl_extradist.families.builtins.continuous.power import configure_power_family
from pysatl_extradist.families.builtins.continuous.truncated_normal import (
    TruncatedNormalRejectionStrategy,
    configure_truncated_normal_family,
)

__all__ = [
    "configure_gompertz_family",
    "configure_gumbel_family",
    "configure_kumaraswamy_family",
    "configure_lomax_family",
    "configure_power_family",
    "configure_truncated_normal_family",
    "TruncatedNormalRejectionStrategy",
]
