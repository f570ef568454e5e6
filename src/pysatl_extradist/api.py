"""
Vectorized Entry Points
=======================

Function-call surface over the built-in families. Every function looks the
family up by name (see :class:`~pysatl_extradist.types.FamilyName`) in the
configured register and forwards to the family's vectorized operation.

Examples
--------
>>> from pysatl_extradist import api
>>> api.density("DiscreteUniform", [0, 1, 2, 0.5], 0, 1)
array([0.5, 0.5, 0. , 0. ])
>>> api.quantile("Gumbel", [0.5], mu=0.0, sigma=1.0)
array([0.36651292])
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_extradist.families.configuration import configure_families_register

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_extradist.families.distribution import ParametricFamilyDistribution
    from pysatl_extradist.families.parametric_family import ParametricFamily
    from pysatl_extradist.types import ArrayLike, NumericArray


def family(name: str) -> ParametricFamily:
    """
    Look up a built-in family.

    Raises
    ------
    ValueError
        If no family with this name is registered.
    """
    return configure_families_register().get(name)


def density(
    name: str, x: ArrayLike, *args: Any, log_prob: bool = False, **kwargs: Any
) -> NumericArray:
    """Density (or mass) of family ``name``, see :meth:`ParametricFamily.density`."""
    return family(name).density(x, *args, log_prob=log_prob, **kwargs)


def cumulative(
    name: str,
    x: ArrayLike,
    *args: Any,
    lower_tail: bool = True,
    log_prob: bool = False,
    **kwargs: Any,
) -> NumericArray:
    """Cumulative probability of family ``name``, see :meth:`ParametricFamily.cumulative`."""
    return family(name).cumulative(x, *args, lower_tail=lower_tail, log_prob=log_prob, **kwargs)


def quantile(
    name: str,
    p: ArrayLike,
    *args: Any,
    lower_tail: bool = True,
    log_prob: bool = False,
    **kwargs: Any,
) -> NumericArray:
    """Quantile function of family ``name``, see :meth:`ParametricFamily.quantile`."""
    return family(name).quantile(p, *args, lower_tail=lower_tail, log_prob=log_prob, **kwargs)


def sample(
    name: str,
    n: int,
    *args: Any,
    rng: np.random.Generator | int | None = None,
    **kwargs: Any,
) -> NumericArray:
    """``n`` random variates of family ``name``, see :meth:`ParametricFamily.sample`."""
    return family(name).sample(n, *args, rng=rng, **kwargs)


def mean(name: str, *args: Any, **kwargs: Any) -> NumericArray:
    """Expected value of family ``name`` for every recycled parameter set."""
    return family(name).mean(*args, **kwargs)


def var(name: str, *args: Any, **kwargs: Any) -> NumericArray:
    """Variance of family ``name`` for every recycled parameter set."""
    return family(name).var(*args, **kwargs)


def distribution(name: str, **parameters: Any) -> ParametricFamilyDistribution:
    """Frozen member of family ``name`` with strictly validated ``parameters``."""
    return family(name).distribution(**parameters)


__all__ = [
    "family",
    "density",
    "cumulative",
    "quantile",
    "sample",
    "mean",
    "var",
    "distribution",
]
