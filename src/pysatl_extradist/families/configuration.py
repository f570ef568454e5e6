"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL extradist:

- discrete: :class:`Discrete Uniform`, :class:`Discrete Weibull`;
- continuous: :class:`Gompertz`, :class:`Gumbel`, :class:`Kumaraswamy`,
  :class:`Lomax`, :class:`Power`, :class:`Truncated Normal`;
- mixture: :class:`Normal Mixture`.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; each ``configure_*`` helper skips families that
  are already present.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_extradist.families.builtins import (
    configure_discrete_uniform_family,
    configure_discrete_weibull_family,
    configure_gompertz_family,
    configure_gumbel_family,
    configure_kumaraswamy_family,
    configure_lomax_family,
    configure_normal_mixture_family,
    configure_power_family,
    configure_truncated_normal_family,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_discrete_uniform_family()
    configure_discrete_weibull_family()
    configure_gompertz_family()
    configure_gumbel_family()
    configure_kumaraswamy_family()
    configure_lomax_family()
    configure_power_family()
    configure_truncated_normal_family()
    configure_normal_mixture_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
