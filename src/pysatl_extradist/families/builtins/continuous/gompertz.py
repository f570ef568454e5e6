"""
Gompertz distribution family implementation.

Contains the Gompertz family with shape ``a`` and rate ``b``, see
Lenart, A. (2012). The Gompertz distribution and Maximum Likelihood
Estimation of its parameters - a revision. MPIDR Working Paper WP 2012-008.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import exp1

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


def configure_gompertz_family() -> None:
    """
    Configure and register the Gompertz distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GOMPERTZ):
        return

    GOMPERTZ_DOC = """
    Gompertz distribution.

    A lifetime distribution whose hazard grows exponentially, widely used in
    demography and actuarial science. Supported on x ≥ 0.

        f(x)    = a * exp(b*x - a/b * (exp(b*x) - 1))
        F(x)    = 1 - exp(-a/b * (exp(b*x) - 1))
        F⁻¹(p)  = 1/b * log(1 - b/a * log(1 - p))
    """

    def _log_sf(parameters: _ShapeRate, x: NumericArray) -> NumericArray:
        """``-a/b * (exp(b*x) - 1)`` on x ≥ 0, the log survival function."""
        xs = np.maximum(x, 0.0)
        return cast(NumericArray, -parameters.a / parameters.b * np.expm1(parameters.b * xs))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function for Gompertz distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: float (shape, a > 0)
            - b: float (rate, b > 0)
        x : NumericArray
            Points at which to evaluate the log density

        Returns
        -------
        NumericArray
            log f(x); -inf outside [0, inf)
        """
        parameters = cast(_ShapeRate, parameters)

        xs = np.maximum(x, 0.0)
        value = np.log(parameters.a) + parameters.b * xs + _log_sf(parameters, x)
        inside = (x >= 0) & np.isfinite(x)
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Gompertz distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Gompertz distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``a`` and ``b``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_ShapeRate, parameters)
        return cast(NumericArray, np.where(x < 0, 0.0, -np.expm1(_log_sf(parameters, x))))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function P(X > x) for Gompertz distribution."""
        parameters = cast(_ShapeRate, parameters)
        return cast(NumericArray, np.where(x < 0, 1.0, np.exp(_log_sf(parameters, x))))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Gompertz distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``a`` and ``b``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p; 0 at p = 0 and inf
            at p = 1
        """
        parameters = cast(_ShapeRate, parameters)

        a, b = parameters.a, parameters.b
        return cast(NumericArray, np.log1p(-b / a * np.log1p(-p)) / b)

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of Gompertz distribution, exp(a/b) * E1(a/b) / b."""
        parameters = cast(_ShapeRate, parameters)

        eta = parameters.a / parameters.b
        return cast(NumericArray, np.exp(eta) * exp1(eta) / parameters.b)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Gompertz distribution"""
        return ContinuousSupport(left=0.0)

    Gompertz = ParametricFamily(
        name=FamilyName.GOMPERTZ,
        distr_type=UnivariateContinuous,
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
        },
        support_by_parametrization=_support,
    )
    Gompertz.__doc__ = GOMPERTZ_DOC

    @parametrization(family=Gompertz, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of Gompertz distribution.

        Parameters
        ----------
        a : float
            Shape parameter, a > 0
        b : float
            Rate parameter, b > 0
        """

        a: float = 1.0
        b: float = 1.0

        @constraint(description="a > 0")
        def check_a_positive(self) -> Any:
            """Check that shape parameter is positive."""
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> Any:
            """Check that rate parameter is positive."""
            return self.b > 0

    ParametricFamilyRegister.register(Gompertz)
