"""
Tests for Lomax Distribution Family

This module tests the Lomax (Pareto type II) distribution family against
scipy.stats.lomax (c = kappa, scale = 1/lambda).
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import lomax

from pysatl_extradist.exceptions import NaNsProducedWarning
from pysatl_extradist.families.configuration import configure_families_register
from pysatl_extradist.markers import is_invalid
from pysatl_extradist.types import FamilyName

from ..base import BaseDistributionTest


class TestLomaxFamily(BaseDistributionTest):
    """Test suite for Lomax distribution family."""

    lam, kappa = 2.0, 3.5

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.family = registry.get(FamilyName.LOMAX)
        self.reference = lomax(self.kappa, scale=1.0 / self.lam)

    def test_parameter_names(self):
        """Test that the rate parameter avoids the keyword name."""
        assert self.family.parameter_names == ("lambda_", "kappa")
        assert self.family.parametrization.defaults() == {}

    def test_requires_both_parameters(self):
        """Test that both parameters are required."""
        with pytest.raises(TypeError, match="missing required"):
            self.family.density([1.0], lambda_=1.0)

    def test_characteristics_match_scipy(self):
        """Test density, distribution and survival functions."""
        x = np.array([-1.0, 0.0, 0.01, 0.3, 1.0, 4.0, 50.0])
        args = (self.lam, self.kappa)

        self.assert_arrays_almost_equal(self.family.density(x, *args), self.reference.pdf(x) * (x > 0))
        self.assert_arrays_almost_equal(self.family.cumulative(x, *args), self.reference.cdf(x))
        self.assert_arrays_almost_equal(
            self.family.cumulative(x, *args, lower_tail=False), self.reference.sf(x)
        )
        self.assert_arrays_almost_equal(
            self.family.cumulative(x[2:], *args, log_prob=True), self.reference.logcdf(x[2:])
        )

    def test_density_is_zero_at_origin(self):
        """Test that the left endpoint is excluded from the support."""
        assert self.family.density([0.0], self.lam, self.kappa)[0] == 0.0
        assert self.family.density([0.0], self.lam, self.kappa, log_prob=True)[0] == -np.inf

    def test_quantile_matches_scipy(self):
        """Test the closed-form quantile, including endpoints."""
        p = np.array([0.0, 0.05, 0.5, 0.95, 1.0])
        self.assert_arrays_almost_equal(self.family.quantile(p, self.lam, self.kappa), self.reference.ppf(p))

    def test_round_trip(self):
        """Test F(F⁻¹(p)) = p on the interior."""
        p = np.linspace(0.01, 0.99, 50)
        q = self.family.quantile(p, self.lam, self.kappa)
        np.testing.assert_allclose(self.family.cumulative(q, self.lam, self.kappa), p, atol=1e-6)

    def test_density_integrates_to_one(self):
        """Test normalisation of the density."""
        total, _ = quad(lambda t: self.family.density([t], self.lam, self.kappa)[0], 0.0, np.inf)
        assert total == pytest.approx(1.0, abs=1e-4)

    def test_moments(self):
        """Test finite and infinite moments."""
        mean, var = self.reference.stats(moments="mv")
        assert self.family.mean(self.lam, self.kappa)[0] == pytest.approx(mean)
        assert self.family.var(self.lam, self.kappa)[0] == pytest.approx(var)

        np.testing.assert_array_equal(self.family.mean(1.0, [0.5, 1.0]), [np.inf, np.inf])
        np.testing.assert_array_equal(self.family.var(1.0, [1.5, 2.0]), [np.inf, np.inf])

    def test_invalid_rows_are_independent(self):
        """Test that one bad row does not affect the others."""
        with pytest.warns(NaNsProducedWarning):
            result = self.family.cumulative([1.0, 1.0, 1.0], [self.lam, -1.0, self.lam], [self.kappa, 1.0, 0.0])

        assert is_invalid(result).tolist() == [False, True, True]
        assert result[0] == pytest.approx(self.reference.cdf(1.0))

    def test_sampling(self):
        """Test that sampled values follow the distribution."""
        sample = self.family.sample(20_000, self.lam, self.kappa, rng=11)
        assert np.all(sample >= 0.0)
        assert abs(np.median(sample) - self.reference.median()) < 0.02

    def test_support(self):
        """Test that the support is the open positive half-line."""
        support = self.family(lambda_=self.lam, kappa=self.kappa).support
        assert support.contains(0.0) is False
        assert support.contains(1e6) is True
