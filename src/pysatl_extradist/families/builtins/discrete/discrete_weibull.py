"""
Discrete Weibull distribution family implementation.

Contains the type I Discrete Weibull family of Nakagawa and Osaki (1975),
"The Discrete Weibull Distribution", IEEE Transactions on Reliability,
R-24, pp. 300-301.
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


def configure_discrete_weibull_family() -> None:
    """
    Configure and register the Discrete Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_WEIBULL):
        return

    DISCRETE_WEIBULL_DOC = """
    Discrete Weibull distribution.

    Distribution of the number of trials before failure, supported on the
    non-negative integers, with parameters 0 < q < 1 and beta > 0.

    Probability mass function:
        f(x) = q^(x^beta) - q^((x+1)^beta)

    Cumulative distribution function:
        F(x) = 1 - q^((floor(x)+1)^beta)
    """

    def _exponent(parameters: _QBeta, x: NumericArray) -> NumericArray:
        """``(floor(x) + 1)^beta * log(q)``, the log survival at x."""
        return cast(NumericArray, np.power(np.floor(x) + 1.0, parameters.beta) * np.log(parameters.q))

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for discrete Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - q: float (0 < q < 1)
            - beta: float (shape, beta > 0)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x)
        """
        parameters = cast(_QBeta, parameters)

        log_q = np.log(parameters.q)
        xs = np.where(x >= 0, x, 0.0)
        head = np.power(xs, parameters.beta) * log_q
        tail = np.power(xs + 1.0, parameters.beta) * log_q
        # q^a - q^b == q^a * (1 - q^(b - a))
        mass = np.exp(head) * -np.expm1(tail - head)
        inside = (x >= 0) & (np.floor(x) == x) & np.isfinite(x)
        return cast(NumericArray, np.where(inside, mass, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for discrete Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``q`` and ``beta``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_QBeta, parameters)
        return cast(NumericArray, np.where(x < 0, 0.0, -np.expm1(_exponent(parameters, x))))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function P(X > x) for discrete Weibull distribution."""
        parameters = cast(_QBeta, parameters)
        return cast(NumericArray, np.where(x < 0, 1.0, np.exp(_exponent(parameters, x))))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile function for discrete Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``q`` and ``beta``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Smallest non-negative integer x with F(x) >= p; 0 for p = 0,
            inf for p = 1
        """
        parameters = cast(_QBeta, parameters)

        ratio = np.log1p(-p) / np.log(parameters.q)
        x = np.maximum(np.ceil(np.power(ratio, 1.0 / parameters.beta) - 1.0), 0.0)
        # rounding may land one step off the smallest x with F(x) >= p
        overshot = (x >= 1.0) & (-np.expm1(_exponent(parameters, x - 1.0)) >= p)
        x = np.where(overshot, x - 1.0, x)
        undershot = -np.expm1(_exponent(parameters, x)) < p
        x = np.where(undershot, x + 1.0, x)
        return cast(NumericArray, np.where(p == 0.0, 0.0, x))

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of discrete Weibull distribution"""
        return IntegerLatticeDiscreteSupport(min_k=0)

    DiscreteWeibull = ParametricFamily(
        name=FamilyName.DISCRETE_WEIBULL,
        distr_type=UnivariateDiscrete,
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    DiscreteWeibull.__doc__ = DISCRETE_WEIBULL_DOC

    @parametrization(family=DiscreteWeibull, name="qBeta")
    class _QBeta(Parametrization):
        """
        Standard parametrization of discrete Weibull distribution.

        Parameters
        ----------
        q : float
            Probability-like parameter, 0 < q < 1
        beta : float
            Shape parameter, beta > 0
        """

        q: float
        beta: float

        @constraint(description="0 < q < 1")
        def check_q_in_unit_interval(self) -> Any:
            """Check that q lies strictly inside (0, 1)."""
            return (self.q > 0) & (self.q < 1)

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> Any:
            """Check that shape parameter is positive."""
            return self.beta > 0

    ParametricFamilyRegister.register(DiscreteWeibull)
