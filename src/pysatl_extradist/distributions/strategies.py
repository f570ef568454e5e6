"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy` — draws one variate per parameter set.
- :class:`InverseTransformSamplingStrategy` — pushes i.i.d. uniform variates
  through the family's ``ppf``.

Notes
-----
- Strategies are stateless; randomness comes from the generator passed in.
- Strategies only ever receive valid, non-missing parameter sets.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

from pysatl_extradist.primitives import uniform_sample
from pysatl_extradist.types import CharacteristicName

if TYPE_CHECKING:
    import numpy as np

    from pysatl_extradist.families.parametric_family import ParametricFamily
    from pysatl_extradist.families.parametrizations import Parametrization
    from pysatl_extradist.types import NumericArray

log = logging.getLogger(__name__)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (one variate per parameter set)."""

    def sample(
        self,
        family: ParametricFamily,
        parameters: Parametrization,
        rng: np.random.Generator,
        **options: Any,
    ) -> NumericArray: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the family's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``, one per parameter set.

    Raises
    ------
    RuntimeError
        If the family has no ``ppf``.
    """

    def sample(
        self,
        family: ParametricFamily,
        parameters: Parametrization,
        rng: np.random.Generator,
        **options: Any,
    ) -> NumericArray:
        ppf = family.characteristic(CharacteristicName.PPF)
        log.debug("inverse transform sampling of %d variates from %s", parameters.size, family.name)
        u = uniform_sample(rng, parameters.size)
        return ppf(parameters, u)


__all__ = ["SamplingStrategy", "InverseTransformSamplingStrategy"]
