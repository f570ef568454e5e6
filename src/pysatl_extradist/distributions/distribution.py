"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol implemented by
frozen distributions (a family together with fixed parameter values).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np

    from pysatl_extradist.distributions.computation import AnalyticalComputation
    from pysatl_extradist.distributions.strategies import SamplingStrategy
    from pysatl_extradist.distributions.support import Support
    from pysatl_extradist.types import CharacteristicName, DistributionType, NumericArray


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[CharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(self, characteristic_name: CharacteristicName) -> AnalyticalComputation[Any, Any]:
        try:
            return self.analytical_computations[characteristic_name]
        except KeyError as exc:
            raise RuntimeError(
                f"Distribution provides no analytical '{characteristic_name}'."
            ) from exc

    def calculate_characteristic(
        self, characteristic_name: CharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, rng: np.random.Generator | int | None = None) -> NumericArray: ...
