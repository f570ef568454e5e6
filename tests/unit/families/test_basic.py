from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np

from pysatl_extradist.families import ParametricFamily, Parametrization, constraint, parametrization
from pysatl_extradist.types import CharacteristicName, UnivariateContinuous


class TestBaseFamily:
    """Uniform distribution on ``[shift, shift + scale]`` used as a test family."""

    @staticmethod
    def _pdf(p: Any, x: Any) -> Any:
        inside = (x >= p.shift) & (x <= p.shift + p.scale)
        return np.where(inside, 1.0 / p.scale, 0.0)

    @staticmethod
    def _cdf(p: Any, x: Any) -> Any:
        return np.clip((x - p.shift) / p.scale, 0.0, 1.0)

    @staticmethod
    def _ppf(p: Any, q: Any) -> Any:
        return p.shift + q * p.scale

    def make_default_family(
        self,
        name: str = "Default",
        distr_characteristics: dict[CharacteristicName, Any] | None = None,
        sampling_strategy: Any = None,
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                CharacteristicName.PDF: self._pdf,
                CharacteristicName.CDF: self._cdf,
                CharacteristicName.PPF: self._ppf,
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_characteristics=distr_characteristics,
            sampling_strategy=sampling_strategy,
        )

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            scale: float
            shift: float = 0.0

            @constraint(description="scale > 0")
            def check_scale_positive(self) -> Any:
                return self.scale > 0

        return fam
