"""
Gumbel distribution family implementation.

Contains the Gumbel (type I extreme value, maximum) family with location and
scale parameters.
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


def configure_gumbel_family() -> None:
    """
    Configure and register the Gumbel distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GUMBEL):
        return

    GUMBEL_DOC = """
    Gumbel distribution.

    The limiting distribution of the maximum of many i.i.d. samples with
    exponential-type tails. Parameters are location (μ) and scale (σ > 0).

    With z = (x - μ) / σ:
        f(x)    = 1/σ * exp(-(z + exp(-z)))
        F(x)    = exp(-exp(-z))
        F⁻¹(p)  = μ - σ * log(-log(p))
    """

    def _z(parameters: _LocScale, x: NumericArray) -> NumericArray:
        return cast(NumericArray, (x - parameters.mu) / parameters.sigma)

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function for Gumbel distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - sigma: float (scale)
        x : NumericArray
            Points at which to evaluate the log density

        Returns
        -------
        NumericArray
            log f(x); -inf for infinite x
        """
        parameters = cast(_LocScale, parameters)

        z = _z(parameters, x)
        value = -(z + np.exp(-z)) - np.log(parameters.sigma)
        return cast(NumericArray, np.where(np.isfinite(x), value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Gumbel distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Logarithm of the cumulative distribution function, -exp(-z)."""
        parameters = cast(_LocScale, parameters)
        return cast(NumericArray, -np.exp(-_z(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Gumbel distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``mu`` and ``sigma``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        return cast(NumericArray, np.exp(logcdf(parameters, x)))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function P(X > x) for Gumbel distribution."""
        return cast(NumericArray, -np.expm1(logcdf(parameters, x)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Gumbel distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``mu`` and ``sigma``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p; -inf and inf at p = 0
            and p = 1
        """
        parameters = cast(_LocScale, parameters)
        return cast(NumericArray, parameters.mu - parameters.sigma * np.log(-np.log(p)))

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of Gumbel distribution, μ + σγ."""
        parameters = cast(_LocScale, parameters)
        return cast(NumericArray, parameters.mu + parameters.sigma * np.euler_gamma)

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of Gumbel distribution, π²σ²/6."""
        parameters = cast(_LocScale, parameters)
        return cast(NumericArray, (np.pi * parameters.sigma) ** 2 / 6.0)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Gumbel distribution"""
        return ContinuousSupport()

    Gumbel = ParametricFamily(
        name=FamilyName.GUMBEL,
        distr_type=UnivariateContinuous,
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Gumbel.__doc__ = GUMBEL_DOC

    @parametrization(family=Gumbel, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Gumbel distribution.

        Parameters
        ----------
        mu : float
            Location of the distribution
        sigma : float
            Scale of the distribution
        """

        mu: float = 0.0
        sigma: float = 1.0

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> Any:
            """Check that scale is positive."""
            return self.sigma > 0

    ParametricFamilyRegister.register(Gumbel)
