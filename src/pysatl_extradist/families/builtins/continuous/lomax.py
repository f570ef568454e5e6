"""
Lomax distribution family implementation.

Contains the Lomax (Pareto type II) family with rate ``lambda`` and shape
``kappa``, supported on x > 0.
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


def configure_lomax_family() -> None:
    """
    Configure and register the Lomax distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOMAX):
        return

    LOMAX_DOC = """
    Lomax distribution.

    A heavy-tailed distribution on x > 0, the Pareto distribution shifted to
    start at zero. Parameters are rate λ > 0 (``lambda_``) and shape κ > 0
    (``kappa``).

        f(x)    = λκ / (1 + λx)^(κ+1)
        F(x)    = 1 - (1 + λx)^(-κ)
        F⁻¹(p)  = ((1 - p)^(-1/κ) - 1) / λ
    """

    def _log_sf(parameters: _RateShape, x: NumericArray) -> NumericArray:
        """``-κ log(1 + λx)`` on x > 0."""
        xs = np.maximum(x, 0.0)
        return cast(NumericArray, -parameters.kappa * np.log1p(parameters.lambda_ * xs))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function for Lomax distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate, λ > 0)
            - kappa: float (shape, κ > 0)
        x : NumericArray
            Points at which to evaluate the log density

        Returns
        -------
        NumericArray
            log f(x); -inf for x ≤ 0
        """
        parameters = cast(_RateShape, parameters)

        lam, kappa = parameters.lambda_, parameters.kappa
        xs = np.maximum(x, 0.0)
        value = np.log(lam) + np.log(kappa) - (kappa + 1.0) * np.log1p(lam * xs)
        return cast(NumericArray, np.where(x > 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Lomax distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Lomax distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``lambda_`` and ``kappa``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_RateShape, parameters)
        return cast(NumericArray, np.where(x > 0, -np.expm1(_log_sf(parameters, x)), 0.0))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Logarithm of the cumulative distribution function for Lomax distribution."""
        parameters = cast(_RateShape, parameters)

        log_sf = _log_sf(parameters, x)
        return cast(NumericArray, np.where(x > 0, np.log(-np.expm1(log_sf)), -np.inf))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function P(X > x) for Lomax distribution."""
        parameters = cast(_RateShape, parameters)
        return cast(NumericArray, np.where(x > 0, np.exp(_log_sf(parameters, x)), 1.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Lomax distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``lambda_`` and ``kappa``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p; inf at p = 1
        """
        parameters = cast(_RateShape, parameters)
        return cast(NumericArray, np.expm1(-np.log1p(-p) / parameters.kappa) / parameters.lambda_)

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of Lomax distribution, 1 / (λ(κ - 1)); inf for κ ≤ 1."""
        parameters = cast(_RateShape, parameters)

        lam, kappa = parameters.lambda_, parameters.kappa
        return cast(NumericArray, np.where(kappa > 1, 1.0 / (lam * (kappa - 1.0)), np.inf))

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of Lomax distribution; inf for κ ≤ 2."""
        parameters = cast(_RateShape, parameters)

        lam, kappa = parameters.lambda_, parameters.kappa
        value = kappa / (lam**2 * (kappa - 1.0) ** 2 * (kappa - 2.0))
        return cast(NumericArray, np.where(kappa > 2, value, np.inf))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Lomax distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    Lomax = ParametricFamily(
        name=FamilyName.LOMAX,
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
    Lomax.__doc__ = LOMAX_DOC

    @parametrization(family=Lomax, name="rateShape")
    class _RateShape(Parametrization):
        """
        Rate-shape parametrization of Lomax distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (``lambda`` is reserved in Python)
        kappa : float
            Shape parameter
        """

        lambda_: float
        kappa: float

        @constraint(description="lambda > 0")
        def check_lambda_positive(self) -> Any:
            """Check that rate parameter is positive."""
            return self.lambda_ > 0

        @constraint(description="kappa > 0")
        def check_kappa_positive(self) -> Any:
            """Check that shape parameter is positive."""
            return self.kappa > 0

    ParametricFamilyRegister.register(Lomax)
