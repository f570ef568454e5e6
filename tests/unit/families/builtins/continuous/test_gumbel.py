"""
Tests for Gumbel Distribution Family

This module tests the functionality of the Gumbel distribution family,
including characteristics, domain violations and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import gumbel_r

from pysatl_extradist.distributions.support import ContinuousSupport
from pysatl_extradist.exceptions import NaNsProducedWarning
from pysatl_extradist.families.configuration import configure_families_register
from pysatl_extradist.markers import NA, is_invalid, is_na
from pysatl_extradist.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

from ..base import BaseDistributionTest


class TestGumbelFamily(BaseDistributionTest):
    """Test suite for Gumbel distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.family = registry.get(FamilyName.GUMBEL)
        self.dist_example = self.family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of Gumbel family."""
        assert self.family.name == FamilyName.GUMBEL
        assert self.family.distribution_type == UnivariateContinuous
        assert self.family.parameter_names == ("mu", "sigma")
        assert self.family.parametrization.defaults() == {"mu": 0.0, "sigma": 1.0}

    def test_parametrization_constraints(self):
        """Test strict parameter validation of frozen distributions."""
        with pytest.raises(ValueError, match="sigma > 0"):
            self.family(mu=0.0, sigma=-1.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-3.0, 0.0, 1.0, 2.0, 5.0, 20.0], gumbel_r.pdf),
            (CharacteristicName.LOGPDF, [-3.0, 0.0, 1.0, 2.0, 5.0, 20.0], gumbel_r.logpdf),
            (CharacteristicName.CDF, [-3.0, 0.0, 1.0, 2.0, 5.0, 20.0], gumbel_r.cdf),
            (CharacteristicName.SF, [-3.0, 0.0, 1.0, 2.0, 5.0, 20.0], gumbel_r.sf),
            (CharacteristicName.PPF, [0.001, 0.1, 0.5, 0.9, 0.999], gumbel_r.ppf),
        ],
    )
    def test_against_scipy(self, char_name, test_data, scipy_func):
        """Test vectorized characteristics against scipy.stats.gumbel_r."""
        x = np.array(test_data)
        if char_name == CharacteristicName.PDF:
            result = self.dist_example.density(x)
        elif char_name == CharacteristicName.LOGPDF:
            result = self.dist_example.density(x, log_prob=True)
        elif char_name == CharacteristicName.CDF:
            result = self.dist_example.cumulative(x)
        elif char_name == CharacteristicName.SF:
            result = self.dist_example.cumulative(x, lower_tail=False)
        else:
            result = self.dist_example.quantile(x)

        assert result.shape == x.shape
        self.assert_arrays_almost_equal(result, scipy_func(x, loc=2.0, scale=1.5))

    def test_quantile_round_trip_at_median(self):
        """Test F(F⁻¹(0.5)) = 0.5 for the standard Gumbel distribution."""
        median = self.family.quantile(0.5, mu=0.0, sigma=1.0)
        assert self.family.cumulative(median, mu=0.0, sigma=1.0)[0] == pytest.approx(0.5)
        assert median[0] == pytest.approx(-math.log(math.log(2.0)))

    def test_defaults_apply(self):
        """Test that omitted parameters use defaults."""
        np.testing.assert_allclose(self.family.density([0.5]), gumbel_r.pdf([0.5]))

    def test_log_cumulative_deep_lower_tail(self):
        """Test log F(x) = -exp(-z) without underflow."""
        result = self.family.cumulative([-5.0], log_prob=True)
        assert result[0] == pytest.approx(-math.exp(5.0))

    def test_density_integrates_to_one(self):
        """Test normalisation of the density."""
        total, _ = quad(lambda t: self.dist_example.density([t])[0], -np.inf, np.inf)
        assert total == pytest.approx(1.0, abs=1e-4)

    def test_cumulative_bounds_and_monotonicity(self):
        """Test F is non-decreasing with limits 0 and 1."""
        x = np.concatenate([[-np.inf], np.linspace(-10.0, 30.0, 400), [np.inf]])
        cdf = self.dist_example.cumulative(x)
        self.assert_non_decreasing(cdf)
        assert cdf[0] == 0.0 and cdf[-1] == 1.0
        assert self.dist_example.density([-np.inf, np.inf]).tolist() == [0.0, 0.0]

    def test_domain_violation_warns_once(self):
        """Test that negative sigma yields NaN with a single warning per call."""
        with pytest.warns(NaNsProducedWarning) as record:
            result = self.family.density([0.0, 1.0, 2.0], 0.0, -1.0)

        assert len(record) == 1
        assert np.all(is_invalid(result))

    def test_missing_parameter_propagates(self):
        """Test that NA in parameters propagates to the output."""
        result = self.family.density([0.0, 1.0], [0.0, NA], 1.0)
        assert not is_na(result[0])
        assert is_na(result[1])

    def test_moments(self):
        """Test mean and variance against scipy."""
        mean, var = gumbel_r.stats(loc=2.0, scale=1.5, moments="mv")
        assert self.dist_example.mean()[0] == pytest.approx(mean)
        assert self.dist_example.var()[0] == pytest.approx(var)

    def test_sampling(self):
        """Test the sample mean and variance."""
        sample = self.family.sample(50_000, 2.0, 1.5, rng=123)
        assert sample.shape == (50_000,)
        assert abs(sample.mean() - (2.0 + 1.5 * np.euler_gamma)) < 0.05
        assert abs(sample.var() - (math.pi * 1.5) ** 2 / 6.0) < 0.15

    def test_support(self):
        """Test that Gumbel distribution is supported on the real line."""
        assert isinstance(self.dist_example.support, ContinuousSupport)
        assert not self.dist_example.support.is_left_bounded
        assert not self.dist_example.support.is_right_bounded
