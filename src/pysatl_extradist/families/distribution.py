"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families. Their operations delegate to the family's
vectorized entry points with the stored parameters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_extradist.distributions.distribution import Distribution
from pysatl_extradist.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np

    from pysatl_extradist.distributions.computation import AnalyticalComputation
    from pysatl_extradist.distributions.strategies import SamplingStrategy
    from pysatl_extradist.distributions.support import Support
    from pysatl_extradist.families.parametric_family import ParametricFamily
    from pysatl_extradist.families.parametrizations import Parametrization
    from pysatl_extradist.types import (
        ArrayLike,
        CharacteristicName,
        DistributionType,
        NumericArray,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Validated parameter vectors for this distribution.
    _support : Support or None
        Support of this distribution (only resolved for scalar parameters).
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[CharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed-form characteristics bound to this distribution's parameters."""
        return self.family.build_analytical_computations(self.parameters)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def density(self, x: ArrayLike, log_prob: bool = False) -> NumericArray:
        """Density (or mass) at ``x``; see :meth:`ParametricFamily.density`."""
        return self.family.density(x, log_prob=log_prob, **self.parameters.parameters)

    def cumulative(
        self, x: ArrayLike, lower_tail: bool = True, log_prob: bool = False
    ) -> NumericArray:
        """CDF at ``x``; see :meth:`ParametricFamily.cumulative`."""
        return self.family.cumulative(
            x, lower_tail=lower_tail, log_prob=log_prob, **self.parameters.parameters
        )

    def quantile(
        self, p: ArrayLike, lower_tail: bool = True, log_prob: bool = False
    ) -> NumericArray:
        """Quantiles of ``p``; see :meth:`ParametricFamily.quantile`."""
        return self.family.quantile(
            p, lower_tail=lower_tail, log_prob=log_prob, **self.parameters.parameters
        )

    def mean(self) -> NumericArray:
        """Expected value; see :meth:`ParametricFamily.mean`."""
        return self.family.mean(**self.parameters.parameters)

    def var(self) -> NumericArray:
        """Variance; see :meth:`ParametricFamily.var`."""
        return self.family.var(**self.parameters.parameters)

    def sample(self, n: int, rng: np.random.Generator | int | None = None) -> NumericArray:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        rng : numpy.random.Generator or int or None
            Generator or seed.

        Returns
        -------
        NumericArray
            Vector of ``n`` variates.
        """
        return self.family.sample(n, rng=rng, **self.parameters.parameters)
