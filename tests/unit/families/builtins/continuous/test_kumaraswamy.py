"""
Tests for Kumaraswamy Distribution Family

This module tests the Kumaraswamy distribution family against its closed
forms and against the Beta distribution, which it reduces to when a = 1.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import beta as beta_dist

from pysatl_extradist.exceptions import NaNsProducedWarning
from pysatl_extradist.families.configuration import configure_families_register
from pysatl_extradist.markers import is_invalid
from pysatl_extradist.types import FamilyName

from ..base import BaseDistributionTest


class TestKumaraswamyFamily(BaseDistributionTest):
    """Test suite for Kumaraswamy distribution family."""

    a, b = 2.0, 5.0

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.family = registry.get(FamilyName.KUMARASWAMY)

    def test_defaults(self):
        """Test that the default parametrization is the standard uniform."""
        x = np.array([0.1, 0.5, 0.9])
        np.testing.assert_allclose(self.family.density(x), [1.0, 1.0, 1.0])
        np.testing.assert_allclose(self.family.cumulative(x), x)

    def test_closed_forms(self):
        """Test density and distribution function against their formulas."""
        x = np.array([0.05, 0.2, 0.5, 0.8, 0.95])
        a, b = self.a, self.b

        expected_pdf = a * b * x ** (a - 1) * (1 - x**a) ** (b - 1)
        expected_cdf = 1 - (1 - x**a) ** b

        self.assert_arrays_almost_equal(self.family.density(x, a, b), expected_pdf)
        self.assert_arrays_almost_equal(self.family.density(x, a, b, log_prob=True), np.log(expected_pdf))
        self.assert_arrays_almost_equal(self.family.cumulative(x, a, b), expected_cdf)
        self.assert_arrays_almost_equal(self.family.cumulative(x, a, b, lower_tail=False), 1 - expected_cdf)

    @pytest.mark.parametrize("b", [0.5, 1.0, 3.0])
    def test_reduces_to_beta(self, b):
        """Test that Kumaraswamy(1, b) equals Beta(1, b)."""
        x = np.array([0.1, 0.4, 0.7, 0.9])
        reference = beta_dist(1.0, b)

        self.assert_arrays_almost_equal(self.family.density(x, 1.0, b), reference.pdf(x))
        self.assert_arrays_almost_equal(self.family.cumulative(x, 1.0, b), reference.cdf(x))
        self.assert_arrays_almost_equal(self.family.quantile(x, 1.0, b), reference.ppf(x))

    def test_outside_support(self):
        """Test density and distribution function outside (0, 1)."""
        x = np.array([-0.5, 0.0, 1.0, 1.5])
        np.testing.assert_array_equal(self.family.density(x, self.a, self.b), [0.0, 0.0, 0.0, 0.0])
        np.testing.assert_array_equal(self.family.cumulative(x, self.a, self.b), [0.0, 0.0, 1.0, 1.0])

    def test_round_trip(self):
        """Test F(F⁻¹(p)) = p on the interior."""
        p = np.linspace(0.01, 0.99, 50)
        q = self.family.quantile(p, self.a, self.b)
        np.testing.assert_allclose(self.family.cumulative(q, self.a, self.b), p, atol=1e-6)

    def test_density_integrates_to_one(self):
        """Test normalisation of the density."""
        total, _ = quad(lambda t: self.family.density([t], self.a, self.b)[0], 0.0, 1.0)
        assert total == pytest.approx(1.0, abs=1e-4)

    def test_moments_match_integration(self):
        """Test mean and variance against numerical integration."""
        m1, _ = quad(lambda t: t * self.family.density([t], self.a, self.b)[0], 0.0, 1.0)
        m2, _ = quad(lambda t: t * t * self.family.density([t], self.a, self.b)[0], 0.0, 1.0)

        assert self.family.mean(self.a, self.b)[0] == pytest.approx(m1, rel=1e-6)
        assert self.family.var(self.a, self.b)[0] == pytest.approx(m2 - m1**2, rel=1e-6)

    def test_invalid_shapes(self):
        """Test that each row is checked on its own."""
        with pytest.warns(NaNsProducedWarning):
            result = self.family.quantile([0.5, 0.5, 0.5], [1.0, 0.0, 1.0], [1.0, 1.0, -1.0])

        assert is_invalid(result).tolist() == [False, True, True]
        assert result[0] == pytest.approx(0.5)

    def test_sampling(self):
        """Test that samples stay inside (0, 1)."""
        sample = self.family.sample(10_000, self.a, self.b, rng=4)
        assert np.all((sample >= 0.0) & (sample <= 1.0))
        assert abs(sample.mean() - self.family.mean(self.a, self.b)[0]) < 0.01
