"""
Broadcasting Driver
===================

Index-wise modular recycling shared by every vectorized entry point.

For inputs ``v_1, ..., v_m`` the output length is ``N = max(len(v_j))`` and
output position ``i`` reads ``v_j[i % len(v_j)]`` from every input. A length-1
input therefore acts as a scalar. Zero-length inputs cannot be recycled and
are rejected with :class:`~pysatl_extradist.exceptions.RecyclingError`.

Matrix-valued parameters (the normal mixture) recycle by row with the same
rule.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extradist.exceptions import RecyclingError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from numpy.typing import NDArray

    from pysatl_extradist.types import ArrayLike, BoolArray, NumericArray


def as_vector(values: ArrayLike, name: str, *, rows: bool = False) -> NumericArray:
    """
    Convert user input into a float64 vector (or row matrix).

    Parameters
    ----------
    values : ArrayLike
        Scalar, sequence, array or masked array. ``None`` entries and masked
        entries become missing.
    name : str
        Argument name, used in error messages.
    rows : bool, default False
        If ``True`` the result is a 2D array whose rows are recycled; a 1D
        input is treated as a single row.

    Returns
    -------
    NumericArray
        Fresh array that the caller may modify.

    Raises
    ------
    RecyclingError
        If the input has no elements to recycle.
    ValueError
        If the input has too many dimensions.
    """
    if isinstance(values, np.ma.MaskedArray):
        values = values.astype(np.float64).filled(np.nan)

    arr = np.array(values, dtype=np.float64)

    if rows:
        arr = np.atleast_2d(arr)
        if arr.ndim != 2:
            raise ValueError(f"'{name}' must be a matrix with one row per parameter set.")
    else:
        arr = np.atleast_1d(arr)
        if arr.ndim != 1:
            raise ValueError(f"'{name}' must be one-dimensional.")

    if arr.shape[0] == 0:
        raise RecyclingError(f"'{name}' has length zero and cannot be recycled.")

    return cast("NumericArray", arr)


def recycled_length(vectors: Mapping[str, NumericArray]) -> int:
    """
    Compute the output length ``max(len(v))``.

    Raises
    ------
    RecyclingError
        If there are no inputs, or any input has length zero.
    """
    if not vectors:
        raise RecyclingError("At least one input vector is required.")

    for name, vector in vectors.items():
        if len(vector) == 0:
            raise RecyclingError(f"'{name}' has length zero and cannot be recycled.")

    return max(len(vector) for vector in vectors.values())


def recycled_indices(n: int, length: int) -> NDArray[np.intp]:
    """Indices ``i % length`` for ``i`` in ``[0, n)``."""
    if length <= 0:
        raise RecyclingError("Cannot recycle a zero-length vector.")
    return np.arange(n) % length


def recycle(vector: NumericArray, n: int) -> NumericArray:
    """Extend (or cut) ``vector`` to length ``n`` along its first axis."""
    if len(vector) == n:
        return vector
    return cast("NumericArray", vector[recycled_indices(n, len(vector))])


def missing_rows(vector: NumericArray) -> BoolArray:
    """Mark elements (or rows of a matrix) that contain a missing value."""
    mask = np.isnan(vector)
    if mask.ndim > 1:
        mask = mask.reshape(mask.shape[0], -1).any(axis=1)
    return cast("BoolArray", mask)


def transform_probabilities(
    p: NumericArray, *, lower_tail: bool = True, log_prob: bool = False
) -> NumericArray:
    """
    Map user probabilities onto lower-tail, linear-scale probabilities.

    Applied to the caller's ``p`` vector element by element *before*
    recycling, so every element of ``p`` is transformed exactly once.

    Parameters
    ----------
    p : NumericArray
        Probabilities as supplied by the caller.
    lower_tail : bool, default True
        If ``False``, ``p`` is ``P(X > x)`` and is complemented.
    log_prob : bool, default False
        If ``True``, ``p`` holds natural logarithms of probabilities.

    Returns
    -------
    NumericArray
        New array of the same length as ``p``.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        if log_prob:
            # 1 - exp(p) without cancellation for p close to 0
            return cast("NumericArray", np.exp(p) if lower_tail else -np.expm1(p))
        return cast("NumericArray", p.copy() if lower_tail else 1.0 - p)


@dataclass(frozen=True, slots=True)
class RecycledRequest:
    """
    Inputs aligned to a common length.

    Parameters
    ----------
    length : int
        Output length ``N``.
    values : dict[str, NumericArray]
        Every input recycled to length ``N`` (first axis).
    missing : BoolArray
        True where any recycled input is missing at that position.
    """

    length: int
    values: dict[str, NumericArray]
    missing: BoolArray


def broadcast(vectors: Mapping[str, NumericArray], length: int | None = None) -> RecycledRequest:
    """
    Align named inputs by modular recycling.

    Parameters
    ----------
    vectors : Mapping[str, NumericArray]
        Inputs as produced by :func:`as_vector`.
    length : int, optional
        Explicit output length (used by sampling, where ``n`` is given).
        Defaults to :func:`recycled_length`.

    Returns
    -------
    RecycledRequest
    """
    n = recycled_length(vectors) if length is None else length
    if n < 0:
        raise RecyclingError(f"Output length must be non-negative, got {n}.")

    values: dict[str, NumericArray] = {}
    missing = np.zeros(n, dtype=bool)
    for name, vector in vectors.items():
        if len(vector) == 0:
            raise RecyclingError(f"'{name}' has length zero and cannot be recycled.")
        recycled = recycle(vector, n)
        values[name] = recycled
        missing |= missing_rows(recycled)

    return RecycledRequest(length=n, values=values, missing=cast("BoolArray", missing))


__all__ = [
    "RecycledRequest",
    "as_vector",
    "broadcast",
    "missing_rows",
    "recycle",
    "recycled_indices",
    "recycled_length",
    "transform_probabilities",
]
