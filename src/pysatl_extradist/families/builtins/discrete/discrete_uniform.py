"""
Discrete uniform distribution family implementation.

Contains the Discrete Uniform family on the integers ``min, ..., max``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extradist.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the Discrete Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    DISCRETE_UNIFORM_DOC = """
    Discrete uniform distribution.

    Every integer between ``min`` and ``max`` (both included) has the same
    probability.

    Probability mass function:
        f(x) = 1 / (max - min + 1)              for integer min <= x <= max

    Cumulative distribution function:
        F(x) = (floor(x) - min + 1) / (max - min + 1)
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for discrete uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - min: float (smallest support point, integral)
            - max: float (largest support point, integral)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x); zero for non-integral x and outside the support
        """
        parameters = cast(_MinMax, parameters)

        lo, hi = parameters.min, parameters.max
        inside = (x >= lo) & (x <= hi) & (np.floor(x) == x)
        return cast(NumericArray, np.where(inside, 1.0 / (hi - lo + 1.0), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for discrete uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``min`` and ``max``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_MinMax, parameters)

        lo, hi = parameters.min, parameters.max
        inner = (np.floor(x) - lo + 1.0) / (hi - lo + 1.0)
        return cast(NumericArray, np.where(x < lo, 0.0, np.where(x >= hi, 1.0, inner)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile function for discrete uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``min`` and ``max``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Smallest support point x with F(x) >= p; ``min`` for p = 0
        """
        parameters = cast(_MinMax, parameters)

        lo, hi = parameters.min, parameters.max
        n = hi - lo + 1.0
        inner = np.ceil(p * n + lo - 1.0)
        # rounding may land one step off the smallest x with F(x) >= p
        inner = np.where((inner > lo) & ((inner - lo) / n >= p), inner - 1.0, inner)
        inner = np.where((inner < hi) & ((inner - lo + 1.0) / n < p), inner + 1.0, inner)
        return cast(NumericArray, np.where((p == 0.0) | (lo == hi), lo, inner))

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of discrete uniform distribution."""
        parameters = cast(_MinMax, parameters)
        return cast(NumericArray, (parameters.min + parameters.max) / 2.0)

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of discrete uniform distribution."""
        parameters = cast(_MinMax, parameters)
        n = parameters.max - parameters.min + 1.0
        return cast(NumericArray, (n**2 - 1.0) / 12.0)

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of discrete uniform distribution"""
        parameters = cast(_MinMax, parameters)
        return IntegerLatticeDiscreteSupport(
            min_k=int(parameters.min), max_k=int(parameters.max)
        )

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    DiscreteUniform.__doc__ = DISCRETE_UNIFORM_DOC

    @parametrization(family=DiscreteUniform, name="minMax")
    class _MinMax(Parametrization):
        """
        Standard parametrization of discrete uniform distribution.

        Parameters
        ----------
        min : float
            Smallest support point
        max : float
            Largest support point
        """

        min: float
        max: float

        @constraint(description="min and max are finite integers")
        def check_integral_bounds(self) -> Any:
            """Check that both bounds are finite integers."""
            bounds = np.stack([np.asarray(self.min), np.asarray(self.max)])
            return np.all(np.isfinite(bounds) & (np.floor(bounds) == bounds), axis=0)

        @constraint(description="min <= max")
        def check_ordered_bounds(self) -> Any:
            """Check that the bounds are ordered."""
            return self.min <= self.max

    ParametricFamilyRegister.register(DiscreteUniform)
