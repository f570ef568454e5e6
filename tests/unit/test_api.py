from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

import pysatl_extradist as pe
from pysatl_extradist import api
from pysatl_extradist.types import FamilyName

DEFAULT_PARAMETERS = {
    FamilyName.DISCRETE_UNIFORM: {"min": 0.0, "max": 4.0},
    FamilyName.DISCRETE_WEIBULL: {"q": 0.7, "beta": 1.2},
    FamilyName.GOMPERTZ: {"a": 1.0, "b": 0.5},
    FamilyName.GUMBEL: {"mu": 0.0, "sigma": 1.0},
    FamilyName.KUMARASWAMY: {"a": 2.0, "b": 3.0},
    FamilyName.LOMAX: {"lambda_": 1.0, "kappa": 3.0},
    FamilyName.POWER: {"alpha": 2.0, "beta": 1.5},
    FamilyName.TRUNCATED_NORMAL: {"mu": 0.0, "sigma": 1.0, "a": -1.0, "b": 2.0},
    FamilyName.NORMAL_MIXTURE: {"mu": [[0.0, 3.0]], "sigma": [[1.0, 0.5]], "alpha": [[1.0, 1.0]]},
}


class TestApi:
    def test_unknown_family(self) -> None:
        with pytest.raises(ValueError, match="No family"):
            api.family("Cauchy")

    def test_family_lookup_by_enum_and_string(self) -> None:
        assert api.family(FamilyName.GUMBEL) is api.family("Gumbel")

    def test_docstring_examples(self) -> None:
        np.testing.assert_allclose(api.density("DiscreteUniform", [0, 1, 2, 0.5], 0, 1), [0.5, 0.5, 0.0, 0.0])
        np.testing.assert_allclose(
            api.quantile("Gumbel", [0.5], mu=0.0, sigma=1.0), [-np.log(np.log(2.0))]
        )

    @pytest.mark.parametrize("name", list(FamilyName))
    def test_every_family_is_reachable(self, name: FamilyName) -> None:
        params = DEFAULT_PARAMETERS[name]
        x = np.array([0.5, 1.0, 1.5])

        density = api.density(name, x, **params)
        lower = api.cumulative(name, x, **params)
        upper = api.cumulative(name, x, lower_tail=False, **params)
        sample = api.sample(name, 100, rng=0, **params)

        assert density.shape == lower.shape == (3,)
        assert np.all(density >= 0.0)
        np.testing.assert_allclose(lower + upper, 1.0)
        assert sample.shape == (100,)
        assert np.all(np.isfinite(sample))

    @pytest.mark.parametrize(
        "name", [name for name in FamilyName if name != FamilyName.NORMAL_MIXTURE]
    )
    def test_quantile_inverts_cumulative(self, name: FamilyName) -> None:
        params = DEFAULT_PARAMETERS[name]
        p = np.array([0.1, 0.5, 0.9])

        q = api.quantile(name, p, **params)
        assert np.all(api.cumulative(name, q, **params) >= p - 1e-9)

    def test_moments(self) -> None:
        np.testing.assert_allclose(api.mean("Power", 2.0, 1.5), [1.2])
        np.testing.assert_allclose(api.var("DiscreteUniform", 0.0, 4.0), [2.0])

    def test_distribution(self) -> None:
        distr = api.distribution("Lomax", lambda_=2.0, kappa=3.0)
        assert distr.family is api.family("Lomax")
        np.testing.assert_allclose(distr.cumulative([0.0]), [0.0])

    def test_package_exports(self) -> None:
        assert pe.api is api
        assert pe.is_na(pe.NA)
        assert pe.is_invalid(pe.INVALID)
        assert not pe.is_na(pe.INVALID)
