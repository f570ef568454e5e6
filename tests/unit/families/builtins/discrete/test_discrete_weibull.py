"""
Tests for Discrete Weibull Distribution Family

This module tests the functionality of the discrete Weibull distribution
family against its closed-form definition.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_extradist.exceptions import NaNsProducedWarning
from pysatl_extradist.families.configuration import configure_families_register
from pysatl_extradist.markers import is_invalid
from pysatl_extradist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest


class TestDiscreteWeibullFamily(BaseDistributionTest):
    """Test suite for Discrete Weibull distribution family."""

    q, beta = 0.8, 1.3

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.family = registry.get(FamilyName.DISCRETE_WEIBULL)

    def test_family_properties(self):
        """Test basic properties of discrete Weibull family."""
        assert self.family.parameter_names == ("q", "beta")
        assert not self.family.has_characteristic(CharacteristicName.MEAN)

    def test_mass_matches_definition(self):
        """Test f(x) = q^(x^beta) - q^((x+1)^beta)."""
        x = np.arange(0.0, 10.0)
        expected = self.q ** (x**self.beta) - self.q ** ((x + 1.0) ** self.beta)
        self.assert_arrays_almost_equal(self.family.density(x, self.q, self.beta), expected)

    def test_mass_outside_support(self):
        """Test zero mass for negative and non-integer points."""
        result = self.family.density([-1.0, 0.5, 2.5], self.q, self.beta)
        assert result.tolist() == [0.0, 0.0, 0.0]

    def test_mass_sums_to_one(self):
        """Test that the mass function is normalized."""
        x = np.arange(0.0, 400.0)
        assert self.family.density(x, self.q, self.beta).sum() == pytest.approx(1.0, abs=1e-4)

    def test_cumulative_is_running_sum(self):
        """Test that the CDF accumulates the mass function."""
        x = np.arange(0.0, 30.0)
        pmf = self.family.density(x, self.q, self.beta)
        cdf = self.family.cumulative(x, self.q, self.beta)
        self.assert_arrays_almost_equal(cdf, np.cumsum(pmf))

    def test_cumulative_is_step_function(self):
        """Test F(x) = F(floor(x)) and the boundaries."""
        result = self.family.cumulative([-0.5, 0.0, 2.0, 2.7, np.inf], self.q, self.beta)
        assert result[0] == 0.0
        assert result[1] == pytest.approx(1.0 - self.q)
        assert result[2] == pytest.approx(result[3])
        assert result[4] == 1.0

    def test_upper_tail(self):
        """Test the survival function q^((x+1)^beta)."""
        result = self.family.cumulative([3.0], self.q, self.beta, lower_tail=False)
        assert result[0] == pytest.approx(self.q ** (4.0**self.beta))

    def test_quantile_inverts_cumulative(self):
        """Test that quantile picks the smallest integer reaching p."""
        k = np.arange(0.0, 20.0)
        cdf = self.family.cumulative(k, self.q, self.beta)
        between = np.concatenate([[cdf[0] / 2.0], (cdf[:-1] + cdf[1:]) / 2.0])

        self.assert_arrays_almost_equal(self.family.quantile(between, self.q, self.beta), k)
        self.assert_arrays_almost_equal(self.family.quantile(cdf, self.q, self.beta), k)

    def test_quantile_edges(self):
        """Test p = 0 and p = 1."""
        result = self.family.quantile([0.0, 1.0], self.q, self.beta)
        assert result[0] == 0.0
        assert result[1] == np.inf

    @pytest.mark.parametrize(
        "q, beta",
        [(0.0, 1.0), (1.0, 1.0), (1.5, 1.0), (0.5, 0.0), (0.5, -1.0)],
    )
    def test_invalid_parameters(self, q, beta):
        """Test that out-of-domain parameters yield NaN with a warning."""
        with pytest.warns(NaNsProducedWarning):
            result = self.family.cumulative([1.0], q, beta)
        assert is_invalid(result[0])

    def test_sampling(self):
        """Test sampled values are non-negative integers following the mass."""
        sample = self.family.sample(20_000, self.q, self.beta, rng=1)

        assert np.all(sample >= 0)
        assert np.all(np.floor(sample) == sample)
        observed = np.mean(sample == 0.0)
        assert abs(observed - (1.0 - self.q)) < 0.015

    def test_support(self):
        """Test frozen distribution support starts at zero."""
        support = self.family(q=self.q, beta=self.beta).support
        assert support is not None
        assert support.contains(0) is True
        assert support.contains(-1) is False
