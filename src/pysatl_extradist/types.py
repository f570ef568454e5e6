"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL extradist.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    Provides a feature interface used to query distribution properties.
    """

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """
        Get public features of the type.

        Returns
        -------
        Mapping[str, Any]
            Dictionary of feature names to values.
        """
        data: dict[str, Any] = {}

        fields = getattr(self, "__dataclass_fields__", None)
        if fields is not None:
            for name in fields:
                data[name] = getattr(self, name)

        return data


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ArrayLike: TypeAlias = Number | NumericArray | list[Any] | tuple[Any, ...] | None
"""Anything accepted as an input vector (scalars count as length 1)."""


ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Every family provides ``PDF`` (continuous) or ``PMF`` (discrete) and
    ``CDF``; the remaining entries are optional and used when present.
    """

    PDF = "pdf"
    PMF = "pmf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    LOGCDF = "logcdf"
    SF = "sf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    DISCRETE_UNIFORM = "DiscreteUniform"
    DISCRETE_WEIBULL = "DiscreteWeibull"
    GOMPERTZ = "Gompertz"
    GUMBEL = "Gumbel"
    KUMARASWAMY = "Kumaraswamy"
    LOMAX = "Lomax"
    POWER = "Power"
    TRUNCATED_NORMAL = "TruncatedNormal"
    NORMAL_MIXTURE = "NormalMixture"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "ParametrizationName",
    "DistributionType",
    "ArrayLike",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
