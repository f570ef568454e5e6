"""
Truncated normal distribution family implementation.

Contains the normal family restricted to ``[a, b]`` together with the
rejection sampler used to draw from it.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extradist.distributions.strategies import SamplingStrategy
from pysatl_extradist.distributions.support import ContinuousSupport
from pysatl_extradist.exceptions import RejectionLimitError
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.primitives import (
    normal_cdf,
    normal_logpdf,
    normal_pdf,
    normal_quantile,
    normal_sf,
)
from pysatl_extradist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_extradist.types import BoolArray

log = logging.getLogger(__name__)

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def _standardized_bounds(parameters: Any) -> tuple[NumericArray, NumericArray]:
    za = (parameters.a - parameters.mu) / parameters.sigma
    zb = (parameters.b - parameters.mu) / parameters.sigma
    return cast(NumericArray, za), cast(NumericArray, zb)


class TruncatedNormalRejectionStrategy(SamplingStrategy):
    """
    Rejection sampler for the truncated normal distribution.

    With standardized bounds ``za`` and ``zb`` the algorithm is chosen once
    per parameter set:

    - ``zb - za < sqrt(2π)``: propose ``r ~ U(za, zb)`` and accept when
      ``u ≤ exp((za² - r²)/2)`` (window above zero), ``u ≤ exp((zb² - r²)/2)``
      (window below zero) or ``u ≤ exp(-r²/2)`` (window around zero);
    - otherwise propose ``r ~ N(0, 1)`` and accept when ``za < r < zb``.

    The variate is ``mu + sigma * r``. All pending parameter sets are handled
    in one vectorized round per iteration.

    Parameters
    ----------
    max_iterations : int or None, default None
        Maximal number of rounds. ``None`` keeps drawing until every variate
        is accepted, which happens with probability one.

    Raises
    ------
    RejectionLimitError
        If ``max_iterations`` rounds leave some variates unaccepted.
    """

    def __init__(self, max_iterations: int | None = None):
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}.")
        self.max_iterations = max_iterations

    def sample(
        self,
        family: ParametricFamily,
        parameters: Parametrization,
        rng: np.random.Generator,
        **options: Any,
    ) -> NumericArray:
        za, zb = _standardized_bounds(parameters)
        za = np.broadcast_to(za, (parameters.size,))
        zb = np.broadcast_to(zb, (parameters.size,))

        narrow = zb - za < _SQRT_2PI
        # reference point of the acceptance ratio, fixed per parameter set
        shift = np.where(za > 0, za, np.where(zb < 0, zb, 0.0))

        result = np.empty(parameters.size, dtype=np.float64)
        pending: BoolArray = np.ones(parameters.size, dtype=bool)
        iterations = 0
        while pending.any():
            if self.max_iterations is not None and iterations >= self.max_iterations:
                raise RejectionLimitError(
                    f"{int(pending.sum())} truncated normal variates were not accepted "
                    f"after {self.max_iterations} iterations."
                )
            iterations += 1

            idx = np.flatnonzero(pending)
            is_narrow = narrow[idx]
            lo, hi = za[idx], zb[idx]

            r = np.empty(idx.size, dtype=np.float64)
            accepted = np.zeros(idx.size, dtype=bool)

            if is_narrow.any():
                r_lo, r_hi = lo[is_narrow], hi[is_narrow]
                proposal = rng.uniform(r_lo, r_hi)
                u = rng.random(proposal.size)
                c = shift[idx][is_narrow]
                r[is_narrow] = proposal
                accepted[is_narrow] = u <= np.exp((c**2 - proposal**2) / 2.0)

            is_wide = ~is_narrow
            if is_wide.any():
                proposal = rng.standard_normal(int(is_wide.sum()))
                r[is_wide] = proposal
                accepted[is_wide] = (proposal > lo[is_wide]) & (proposal < hi[is_wide])

            done = idx[accepted]
            result[done] = r[accepted]
            pending[done] = False

        log.debug(
            "truncated normal rejection accepted %d variates in %d iterations",
            parameters.size,
            iterations,
        )
        truncation = cast("Any", parameters)
        return cast(NumericArray, truncation.mu + truncation.sigma * result)


def configure_truncated_normal_family() -> None:
    """
    Configure and register the Truncated Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRUNCATED_NORMAL):
        return

    TRUNCATED_NORMAL_DOC = """
    Truncated normal distribution.

    The normal distribution N(μ, σ²) conditioned on a ≤ X ≤ b. With
    z = (x - μ)/σ, za = (a - μ)/σ and zb = (b - μ)/σ:

        f(x)    = φ(z) / (σ (Φ(zb) - Φ(za)))
        F(x)    = (Φ(z) - Φ(za)) / (Φ(zb) - Φ(za))
        F⁻¹(p)  = μ + σ Φ⁻¹(Φ(za) + p (Φ(zb) - Φ(za)))

    Windows lying above the mean are evaluated through the upper tail
    Q(z) = 1 - Φ(z) so that far-tail windows keep their precision.
    """

    def _mass(za: NumericArray, zb: NumericArray) -> NumericArray:
        """Normal probability of the window ``[za, zb]``."""
        upper = normal_sf(za) - normal_sf(zb)
        lower = normal_cdf(zb) - normal_cdf(za)
        return cast(NumericArray, np.where(za > 0, upper, lower))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function for truncated normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of the parent normal)
            - sigma: float (standard deviation of the parent normal)
            - a: float (lower truncation point)
            - b: float (upper truncation point)
        x : NumericArray
            Points at which to evaluate the log density

        Returns
        -------
        NumericArray
            log f(x); -inf outside [a, b]
        """
        parameters = cast(_Truncation, parameters)

        za, zb = _standardized_bounds(parameters)
        z = (x - parameters.mu) / parameters.sigma
        value = normal_logpdf(z) - np.log(parameters.sigma) - np.log(_mass(za, zb))
        inside = (x >= parameters.a) & (x <= parameters.b)
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for truncated normal distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def _between(parameters: _Truncation, x: NumericArray) -> tuple[NumericArray, NumericArray]:
        """Probabilities of ``[a, x]`` and ``[x, b]`` relative to the window mass."""
        za, zb = _standardized_bounds(parameters)
        z = np.clip((x - parameters.mu) / parameters.sigma, za, zb)
        mass = _mass(za, zb)
        upper_window = za > 0
        below = np.where(
            upper_window, normal_sf(za) - normal_sf(z), normal_cdf(z) - normal_cdf(za)
        )
        above = np.where(
            upper_window, normal_sf(z) - normal_sf(zb), normal_cdf(zb) - normal_cdf(z)
        )
        return cast(NumericArray, below / mass), cast(NumericArray, above / mass)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for truncated normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``mu``, ``sigma``,
            ``a`` and ``b``
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x); 0 below a and 1 from b on
        """
        parameters = cast(_Truncation, parameters)

        below, _ = _between(parameters, x)
        return cast(NumericArray, np.clip(np.where(x >= parameters.b, 1.0, below), 0.0, 1.0))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function P(X > x) for truncated normal distribution."""
        parameters = cast(_Truncation, parameters)

        _, above = _between(parameters, x)
        return cast(NumericArray, np.clip(np.where(x >= parameters.b, 0.0, above), 0.0, 1.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for truncated normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields ``mu``, ``sigma``,
            ``a`` and ``b``
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles in [a, b]; a at p = 0 and b at p = 1
        """
        parameters = cast(_Truncation, parameters)

        za, zb = _standardized_bounds(parameters)
        mass = _mass(za, zb)
        z_upper = -normal_quantile(normal_sf(za) - p * mass)
        z_lower = normal_quantile(normal_cdf(za) + p * mass)
        z = np.clip(np.where(za > 0, z_upper, z_lower), za, zb)
        return cast(NumericArray, parameters.mu + parameters.sigma * z)

    def _hazards(parameters: _Truncation) -> tuple[NumericArray, NumericArray, NumericArray]:
        """Density terms of the moment formulas, with infinite bounds contributing zero."""
        za, zb = _standardized_bounds(parameters)
        mass = _mass(za, zb)
        phi_a, phi_b = normal_pdf(za), normal_pdf(zb)
        za_phi = np.where(np.isfinite(za), za * phi_a, 0.0)
        zb_phi = np.where(np.isfinite(zb), zb * phi_b, 0.0)
        return (
            cast(NumericArray, (phi_a - phi_b) / mass),
            cast(NumericArray, (za_phi - zb_phi) / mass),
            mass,
        )

    def mean_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Mean of truncated normal distribution, μ + σ (φ(za) - φ(zb)) / Z."""
        parameters = cast(_Truncation, parameters)

        shift, _, _ = _hazards(parameters)
        return cast(NumericArray, parameters.mu + parameters.sigma * shift)

    def var_func(parameters: Parametrization, _: Any) -> NumericArray:
        """Variance of truncated normal distribution."""
        parameters = cast(_Truncation, parameters)

        shift, spread, _ = _hazards(parameters)
        return cast(NumericArray, parameters.sigma**2 * (1.0 + spread - shift**2))

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of truncated normal distribution"""
        parameters = cast(_Truncation, parameters)
        return ContinuousSupport(left=float(parameters.a), right=float(parameters.b))

    TruncatedNormal = ParametricFamily(
        name=FamilyName.TRUNCATED_NORMAL,
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
        sampling_strategy=TruncatedNormalRejectionStrategy(),
        support_by_parametrization=_support,
    )
    TruncatedNormal.__doc__ = TRUNCATED_NORMAL_DOC

    @parametrization(family=TruncatedNormal, name="meanStdBounds")
    class _Truncation(Parametrization):
        """
        Parametrization of truncated normal distribution by the parent normal
        and the truncation window.

        Parameters
        ----------
        mu : float
            Mean of the parent normal distribution
        sigma : float
            Standard deviation of the parent normal distribution
        a : float
            Lower truncation point, may be -inf
        b : float
            Upper truncation point, may be inf
        """

        mu: float = 0.0
        sigma: float = 1.0
        a: float = -np.inf
        b: float = np.inf

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> Any:
            """Check that standard deviation is positive."""
            return self.sigma > 0

        @constraint(description="a < b")
        def check_ordered_bounds(self) -> Any:
            """Check that the truncation window is not empty."""
            return self.a < self.b

    ParametricFamilyRegister.register(TruncatedNormal)


__all__ = ["TruncatedNormalRejectionStrategy", "configure_truncated_normal_family"]
