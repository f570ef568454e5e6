"""
Support Descriptions
====================

Continuous supports are 1D intervals; discrete supports are (possibly
one-sided) integer lattices. Both answer membership queries for scalars and
arrays.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor, inf, isinf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_extradist.types import BoolArray, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Interval of the real line.

    Parameters
    ----------
    left, right : float
        Endpoints; infinite endpoints are never included.
    left_closed, right_closed : bool
        Whether the finite endpoints belong to the support.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            above = (xf >= self.left) if self.left_closed else (xf > self.left)
            below = (xf <= self.right) if self.right_closed else (xf < self.right)
            mask = above & below

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_left_bounded(self) -> bool:
        return not isinf(self.left)

    @property
    def is_right_bounded(self) -> bool:
        return not isinf(self.right)


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...

    def iter_leq(self, x: Number) -> Iterator[Number]: ...


@dataclass(slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integers between optional bounds.

    Parameters
    ----------
    min_k : int or None
        Smallest point, ``None`` if unbounded below.
    max_k : int or None
        Largest point, ``None`` if unbounded above.
    """

    min_k: int | None = None
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            mask = np.isfinite(xf) & (np.floor(xf) == xf)
            if self.min_k is not None:
                mask &= xf >= self.min_k
            if self.max_k is not None:
                mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        if self.min_k is None:
            return None
        if self.max_k is not None and self.min_k > self.max_k:
            return None
        return self.min_k

    def last(self) -> int | None:
        if self.max_k is None:
            return None
        if self.min_k is not None and self.max_k < self.min_k:
            return None
        return self.max_k

    def iter_points(self) -> Iterator[int]:
        first = self.first()
        if first is None:
            raise RuntimeError(
                "Cannot iterate points for a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = first
            while self.max_k is None or current <= self.max_k:
                yield current
                current += 1

        return _gen()

    def iter_leq(self, x: Number) -> Iterator[int]:
        first = self.first()
        if first is None:
            raise RuntimeError(
                "iter_leq is not supported for left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable iter_leq."
            )
        last = int(floor(float(x)))
        if self.max_k is not None:
            last = min(last, self.max_k)
        return iter(range(first, last + 1))

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
