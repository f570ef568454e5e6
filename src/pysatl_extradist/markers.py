"""
Special Value Markers
=====================

Two kinds of non-numbers flow through every vectorized call:

- the *missing* marker :data:`NA`, which inputs propagate silently;
- the *invalid* marker (an ordinary quiet NaN) produced by domain violations.

Both are NaNs, so ``numpy.isnan`` is true for either. :data:`NA` carries the
payload ``1954`` in its low word, which :func:`is_na` checks.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from pysatl_extradist.types import BoolArray, Number, NumericArray

_NA_PAYLOAD = 1954
_NA_BITS = np.uint64(0x7FF8000000000000 | _NA_PAYLOAD)
_LOW_WORD = np.uint64(0xFFFFFFFF)

NA: float = float(np.array([_NA_BITS], dtype=np.uint64).view(np.float64)[0])
"""Missing value marker."""

INVALID: float = float("nan")
"""Domain violation marker."""


def is_na(x: Number | NumericArray) -> bool | BoolArray:
    """
    Check which values are the missing marker.

    Parameters
    ----------
    x : Number or NumericArray
        Value(s) to inspect.

    Returns
    -------
    bool or BoolArray
        True where the value is :data:`NA`, False for ordinary NaNs and numbers.
    """
    arr = np.atleast_1d(np.asarray(x, dtype=np.float64))
    bits = arr.view(np.uint64)
    result = np.isnan(arr) & ((bits & _LOW_WORD) == _NA_PAYLOAD)

    if np.ndim(x) == 0:
        return bool(result[0])
    return cast("BoolArray", result)


def is_invalid(x: Number | NumericArray) -> bool | BoolArray:
    """Check which values are NaNs other than the missing marker."""
    arr = np.asarray(x, dtype=np.float64)
    result = np.isnan(arr) & ~np.asarray(is_na(arr))

    if np.ndim(x) == 0:
        return bool(result)
    return cast("BoolArray", result)


def na_vector(n: int) -> NumericArray:
    """Allocate a vector of length ``n`` filled with :data:`NA`."""
    return np.full(n, NA, dtype=np.float64)


__all__ = ["NA", "INVALID", "is_na", "is_invalid", "na_vector"]
