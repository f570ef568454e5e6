"""
Standard Normal and Uniform Primitives
======================================

Thin wrappers over :mod:`scipy.special` and :class:`numpy.random.Generator`
used by the truncated normal and the normal mixture.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

if TYPE_CHECKING:
    from pysatl_extradist.types import NumericArray

_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


def normal_logpdf(z: NumericArray) -> NumericArray:
    """Log density of N(0, 1)."""
    return cast("NumericArray", -0.5 * np.square(z) - _LOG_SQRT_2PI)


def normal_pdf(z: NumericArray) -> NumericArray:
    """Density of N(0, 1)."""
    return cast("NumericArray", np.exp(normal_logpdf(z)))


def normal_cdf(z: NumericArray) -> NumericArray:
    """CDF of N(0, 1)."""
    return cast("NumericArray", ndtr(z))


def normal_sf(z: NumericArray) -> NumericArray:
    """Survival function of N(0, 1), accurate in the upper tail."""
    return cast("NumericArray", ndtr(-np.asarray(z)))


def normal_quantile(p: NumericArray) -> NumericArray:
    """Quantile function of N(0, 1)."""
    return cast("NumericArray", ndtri(p))


def make_rng(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """
    Coerce ``rng`` into a generator.

    Parameters
    ----------
    rng : numpy.random.Generator or int or None
        An existing generator (used as is), a seed, or ``None`` for fresh
        OS entropy.

    Returns
    -------
    numpy.random.Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def uniform_sample(rng: np.random.Generator, size: int) -> NumericArray:
    """Draw ``size`` variates from U(0, 1)."""
    return rng.random(size)


__all__ = [
    "normal_pdf",
    "normal_logpdf",
    "normal_cdf",
    "normal_sf",
    "normal_quantile",
    "make_rng",
    "uniform_sample",
]
