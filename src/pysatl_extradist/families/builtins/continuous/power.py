"""
Power distribution family implementation.

Contains the power-function family on ``(0, alpha)`` with shape ``beta``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extradist.distributions.support import ContinuousSupport
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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_power_family() -> None:
    """
    Configure and register the Power distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POWER):
        return

    POWER_DOC = """
    Power distribution.

    Supported on 0 < x < α with shape β; β = 1 gives the uniform
    distribution on (0, α).

        f(x)    = β x^(β-1) / α^β
        F(x)    = x^β / α^β
        F⁻¹(p)  = α p^(1/β)
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function for Power distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (upper bound, α > 0)
            - beta: float (shape, β > 0)
        x : NumericArray
            Points at which to evaluate the log density

        Returns
        -------
        NumericArray
            log f(x); -inf outside (0, α)
        """
        parameters = cast(_BoundShape, parameters)

        alpha, beta = parameters.alpha, parameters.beta
        inside = (x > 0) & (x < alpha)
        xs = np.where(inside, x, 1.0)
        value = np.log(beta) + (beta - 1.0) * np.log(xs) - beta * np.log(alpha)
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Power distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Logarithm of the cumulative distribution function, β log(x/α)."""
        parameters = cast(_BoundShape, parameters)

        alpha, beta = parameters.alpha, parameters.beta
        xs = np.clip(x, 0.0, alpha)
        return cast(NumericArray, beta * (np.log(xs) - np.log(alpha)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Power distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``alpha`` and ``beta``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x); 0 for x ≤ 0 and 1 for x ≥ α
        """
        return cast(NumericArray, np.exp(logcdf(parameters, x)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Power distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``alpha`` and ``beta``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
        """
        parameters = cast(_BoundShape, parameters)
        return cast(NumericArray, parameters.alpha * np.power(p, 1.0 / parameters.beta))

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of Power distribution, αβ / (β + 1)."""
        parameters = cast(_BoundShape, parameters)

        alpha, beta = parameters.alpha, parameters.beta
        return cast(NumericArray, alpha * beta / (beta + 1.0))

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of Power distribution, α²β / ((β + 1)²(β + 2))."""
        parameters = cast(_BoundShape, parameters)

        alpha, beta = parameters.alpha, parameters.beta
        return cast(NumericArray, alpha**2 * beta / ((beta + 1.0) ** 2 * (beta + 2.0)))

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of Power distribution"""
        parameters = cast(_BoundShape, parameters)
        return ContinuousSupport(
            left=0.0, right=float(parameters.alpha), left_closed=False, right_closed=False
        )

    Power = ParametricFamily(
        name=FamilyName.POWER,
        distr_type=UnivariateContinuous,
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Power.__doc__ = POWER_DOC

    @parametrization(family=Power, name="boundShape")
    class _BoundShape(Parametrization):
        """
        Standard parametrization of Power distribution.

        Parameters
        ----------
        alpha : float
            Upper bound of the support
        beta : float
            Shape parameter
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> Any:
            """Check that the upper bound is positive."""
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> Any:
            """Check that shape parameter is positive."""
            return self.beta > 0

    ParametricFamilyRegister.register(Power)
