from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_extradist.distributions import (
    AnalyticalComputation,
    Computation,
    InverseTransformSamplingStrategy,
)
from pysatl_extradist.types import CharacteristicName
from tests.unit.families.test_basic import TestBaseFamily


class TestAnalyticalComputation:
    def test_call_forwards_options(self):
        comp = AnalyticalComputation(
            target=CharacteristicName.PDF, func=lambda x, scale=1.0: x * scale
        )
        assert comp.target == CharacteristicName.PDF
        assert comp(2.0) == 2.0
        assert comp(2.0, scale=3.0) == 6.0
        assert isinstance(comp, Computation)


class TestInverseTransformSamplingStrategy(TestBaseFamily):
    def test_applies_ppf_to_uniforms(self):
        family = self.make_default_family()
        params = family.parametrization(
            scale=np.array([2.0, 2.0, 2.0]), shift=np.array([10.0, 20.0, 30.0])
        )  # type: ignore[call-arg]

        strategy = InverseTransformSamplingStrategy()
        expected_u = np.random.default_rng(5).random(3)
        result = strategy.sample(family, params, np.random.default_rng(5))

        np.testing.assert_allclose(result, [10.0, 20.0, 30.0] + 2.0 * expected_u)

    def test_requires_ppf(self):
        family = self.make_default_family(
            distr_characteristics={
                CharacteristicName.PDF: self._pdf,
                CharacteristicName.CDF: self._cdf,
            }
        )
        params = family.parametrization(scale=np.array([1.0]), shift=np.array([0.0]))  # type: ignore[call-arg]

        with pytest.raises(RuntimeError):
            InverseTransformSamplingStrategy().sample(family, params, np.random.default_rng(0))
