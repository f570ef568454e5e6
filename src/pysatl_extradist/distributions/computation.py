"""
Computation Primitives
======================

- :class:`Computation` — protocol of a callable for a single characteristic.
- :class:`AnalyticalComputation` — closed-form characteristic bound to a
  fixed set of parameters.

Notes
-----
- Analytical callables operate on whole arrays and rely on NumPy
  broadcasting between the bound parameters and the argument. Recycling,
  missing values and domain checks are handled one level up, by
  :class:`~pysatl_extradist.families.parametric_family.ParametricFamily`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from mypy_extensions import KwArg

from pysatl_extradist.types import CharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@runtime_checkable
class Computation(Protocol[In, Out]):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : CharacteristicName
        The characteristic this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> CharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the family.

    Parameters
    ----------
    target : CharacteristicName
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable with its parameters already bound.
    """

    target: CharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = ["Computation", "AnalyticalComputation"]
