"""
Mixture of normal distributions family implementation.

Contains the finite mixture of ``k`` normal components. Its parameters are
matrices with one row per parameter set and one column per component; rows
are recycled like scalar parameters.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, ClassVar, cast

import numpy as np
from scipy.special import logsumexp

from pysatl_extradist.distributions.strategies import SamplingStrategy
from pysatl_extradist.distributions.support import ContinuousSupport
from pysatl_extradist.exceptions import ComponentMismatchError
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.primitives import normal_cdf, normal_logpdf, normal_pdf, normal_sf
from pysatl_extradist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import NDArray

log = logging.getLogger(__name__)


def _weights(alpha: NumericArray) -> NumericArray:
    """Row-normalized mixture weights."""
    return cast(NumericArray, alpha / alpha.sum(axis=1, keepdims=True))


def select_components(weights: NumericArray, u: NumericArray) -> NDArray[np.intp]:
    """
    Pick one component per row of ``weights`` for the uniform draws ``u``.

    Components are scanned from the last to the first while the remaining
    probability mass ``1 - w[k-1] - ... - w[j]`` is accumulated; the first
    component ``j`` for which ``u`` exceeds that remainder is selected, and
    component 0 is the fallback when none does.

    Parameters
    ----------
    weights : NumericArray
        Normalized weights, shape ``(n, k)``.
    u : NumericArray
        Uniform variates, shape ``(n,)``.

    Returns
    -------
    NDArray[np.intp]
        Selected component index per row.
    """
    k = weights.shape[1]
    remainder = 1.0 - np.cumsum(weights[:, ::-1], axis=1)
    hits = u[:, None] > remainder
    last_hit = k - 1 - np.argmax(hits, axis=1)
    return cast("NDArray[np.intp]", np.where(hits.any(axis=1), last_hit, 0))


class MixtureComponentSamplingStrategy(SamplingStrategy):
    """
    Two-stage sampler for normal mixtures.

    Draws ``u ~ U(0, 1)`` to select a component with
    :func:`select_components`, then one normal variate from that component.
    """

    def sample(
        self,
        family: ParametricFamily,
        parameters: Parametrization,
        rng: np.random.Generator,
        **options: Any,
    ) -> NumericArray:
        mixture = cast("Any", parameters)
        u = rng.random(parameters.size)
        component = select_components(_weights(mixture.alpha), u)
        log.debug(
            "sampling %d variates from %d-component normal mixture",
            parameters.size,
            mixture.alpha.shape[1],
        )
        rows = np.arange(parameters.size)
        return cast(
            NumericArray, rng.normal(mixture.mu[rows, component], mixture.sigma[rows, component])
        )


def configure_normal_mixture_family() -> None:
    """
    Configure and register the Normal Mixture distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL_MIXTURE):
        return

    NORMAL_MIXTURE_DOC = """
    Mixture of normal distributions.

    With component means μⱼ, standard deviations σⱼ and non-negative weights
    αⱼ (normalized to wⱼ = αⱼ / Σα):

        f(x) = Σ wⱼ φ((x - μⱼ)/σⱼ) / σⱼ
        F(x) = Σ wⱼ Φ((x - μⱼ)/σⱼ)

    The quantile function has no closed form and is not provided.
    """

    def _standardized(parameters: _Components, x: NumericArray) -> NumericArray:
        return cast(NumericArray, (x[:, None] - parameters.mu) / parameters.sigma)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for normal mixture.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with matrix fields:
            - mu: component means
            - sigma: component standard deviations
            - alpha: component weights
        x : NumericArray
            Points at which to evaluate the density, one per row

        Returns
        -------
        NumericArray
            Mixture density values
        """
        parameters = cast(_Components, parameters)

        z = _standardized(parameters, x)
        terms = _weights(parameters.alpha) * normal_pdf(z) / parameters.sigma
        return cast(NumericArray, terms.sum(axis=1))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Logarithm of the mixture density, evaluated with ``logsumexp``."""
        parameters = cast(_Components, parameters)

        z = _standardized(parameters, x)
        terms = normal_logpdf(z) - np.log(parameters.sigma)
        return cast(NumericArray, logsumexp(terms, b=_weights(parameters.alpha), axis=1))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal mixture.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with matrix fields ``mu``,
            ``sigma`` and ``alpha``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_Components, parameters)

        z = _standardized(parameters, x)
        return cast(NumericArray, (_weights(parameters.alpha) * normal_cdf(z)).sum(axis=1))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function P(X > x) for normal mixture."""
        parameters = cast(_Components, parameters)

        z = _standardized(parameters, x)
        return cast(NumericArray, (_weights(parameters.alpha) * normal_sf(z)).sum(axis=1))

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of normal mixture, Σ wⱼ μⱼ."""
        parameters = cast(_Components, parameters)
        return cast(NumericArray, (_weights(parameters.alpha) * parameters.mu).sum(axis=1))

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of normal mixture, Σ wⱼ (σⱼ² + μⱼ²) - mean²."""
        parameters = cast(_Components, parameters)

        w = _weights(parameters.alpha)
        mean = (w * parameters.mu).sum(axis=1)
        second = (w * (parameters.sigma**2 + parameters.mu**2)).sum(axis=1)
        return cast(NumericArray, second - mean**2)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal mixture"""
        return ContinuousSupport()

    NormalMixture = ParametricFamily(
        name=FamilyName.NORMAL_MIXTURE,
        distr_type=UnivariateContinuous,
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=MixtureComponentSamplingStrategy(),
        support_by_parametrization=_support,
    )
    NormalMixture.__doc__ = NORMAL_MIXTURE_DOC

    @parametrization(family=NormalMixture, name="components")
    class _Components(Parametrization):
        """
        Component parametrization of normal mixture.

        Parameters
        ----------
        mu : NumericArray
            Component means, shape ``(rows, k)``
        sigma : NumericArray
            Component standard deviations, shape ``(rows, k)``
        alpha : NumericArray
            Component weights, shape ``(rows, k)``; normalized per row
        """

        __matrix_parameters__: ClassVar[frozenset[str]] = frozenset({"mu", "sigma", "alpha"})

        mu: NumericArray
        sigma: NumericArray
        alpha: NumericArray

        @classmethod
        def check_structure(cls, values: Mapping[str, NumericArray]) -> None:
            """
            Check that all matrices have the same number of components.

            Raises
            ------
            ComponentMismatchError
                If the column counts of ``mu``, ``sigma`` and ``alpha`` differ.
            """
            k = values["alpha"].shape[1]
            if values["mu"].shape[1] != k or values["sigma"].shape[1] != k:
                raise ComponentMismatchError("sizes of 'mu', 'sigma', and 'alpha' do not match")

        @constraint(description="alpha >= 0")
        def check_weights_nonnegative(self) -> Any:
            """Check that every weight in a row is non-negative."""
            return np.all(self.alpha >= 0, axis=-1)

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> Any:
            """Check that every standard deviation in a row is positive."""
            return np.all(self.sigma > 0, axis=-1)

        @constraint(description="sum(alpha) > 0")
        def check_weights_not_all_zero(self) -> Any:
            """Check that a row has some positive weight."""
            return np.sum(self.alpha, axis=-1) > 0

    ParametricFamilyRegister.register(NormalMixture)


__all__ = [
    "MixtureComponentSamplingStrategy",
    "configure_normal_mixture_family",
    "select_components",
]
