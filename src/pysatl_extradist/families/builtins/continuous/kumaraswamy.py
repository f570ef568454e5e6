"""
Kumaraswamy distribution family implementation.

Contains the Kumaraswamy double bounded family on the unit interval, see
Jones, M. C. (2009). Kumaraswamy's distribution: A beta-type distribution
with some tractability advantages. Statistical Methodology, 6, 70-81.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import beta as beta_function
from scipy.special import xlog1py, xlogy

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


def configure_kumaraswamy_family() -> None:
    """
    Configure and register the Kumaraswamy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.KUMARASWAMY):
        return

    KUMARASWAMY_DOC = """
    Kumaraswamy distribution.

    A beta-like distribution on (0, 1) with shape parameters a > 0 and
    b > 0, whose CDF and quantile function have closed forms.

        f(x)    = a*b * x^(a-1) * (1 - x^a)^(b-1)
        F(x)    = 1 - (1 - x^a)^b
        F⁻¹(p)  = (1 - (1 - p)^(1/b))^(1/a)
    """

    def _inside(x: NumericArray) -> NumericArray:
        return cast(NumericArray, (x > 0.0) & (x < 1.0))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function for Kumaraswamy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: float (first shape, a > 0)
            - b: float (second shape, b > 0)
        x : NumericArray
            Points at which to evaluate the log density

        Returns
        -------
        NumericArray
            log f(x); -inf outside (0, 1)
        """
        parameters = cast(_Shapes, parameters)

        a, b = parameters.a, parameters.b
        xs = np.clip(x, 0.0, 1.0)
        value = np.log(a) + np.log(b) + xlogy(a - 1.0, xs) + xlog1py(b - 1.0, -np.power(xs, a))
        return cast(NumericArray, np.where(_inside(x), value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Kumaraswamy distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function (1 - x^a)^b for Kumaraswamy distribution."""
        parameters = cast(_Shapes, parameters)

        xs = np.clip(x, 0.0, 1.0)
        return cast(NumericArray, np.exp(parameters.b * np.log1p(-np.power(xs, parameters.a))))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Kumaraswamy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``a`` and ``b``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x); 0 below 0 and 1 above 1
        """
        parameters = cast(_Shapes, parameters)

        xs = np.clip(x, 0.0, 1.0)
        return cast(NumericArray, -np.expm1(parameters.b * np.log1p(-np.power(xs, parameters.a))))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Kumaraswamy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``a`` and ``b``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
        """
        parameters = cast(_Shapes, parameters)

        inner = -np.expm1(np.log1p(-p) / parameters.b)
        return cast(NumericArray, np.power(inner, 1.0 / parameters.a))

    def _raw_moment(parameters: _Shapes, order: int) -> NumericArray:
        a, b = parameters.a, parameters.b
        return cast(NumericArray, b * beta_function(1.0 + order / a, b))

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of Kumaraswamy distribution, b * B(1 + 1/a, b)."""
        parameters = cast(_Shapes, parameters)
        return _raw_moment(parameters, 1)

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of Kumaraswamy distribution."""
        parameters = cast(_Shapes, parameters)
        return cast(NumericArray, _raw_moment(parameters, 2) - _raw_moment(parameters, 1) ** 2)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Kumaraswamy distribution"""
        return ContinuousSupport(left=0.0, right=1.0, left_closed=False, right_closed=False)

    Kumaraswamy = ParametricFamily(
        name=FamilyName.KUMARASWAMY,
        distr_type=UnivariateContinuous,
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Kumaraswamy.__doc__ = KUMARASWAMY_DOC

    @parametrization(family=Kumaraswamy, name="shapes")
    class _Shapes(Parametrization):
        """
        Standard parametrization of Kumaraswamy distribution.

        Parameters
        ----------
        a : float
            First shape parameter
        b : float
            Second shape parameter
        """

        a: float = 1.0
        b: float = 1.0

        @constraint(description="a > 0")
        def check_a_positive(self) -> Any:
            """Check that first shape parameter is positive."""
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> Any:
            """Check that second shape parameter is positive."""
            return self.b > 0

    ParametricFamilyRegister.register(Kumaraswamy)
