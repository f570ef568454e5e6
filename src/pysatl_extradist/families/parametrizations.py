"""
Parameterization classes and specifications for distribution families.

This module provides the core abstractions for declaring the ordered
parameters of a family together with their validity domains. Parameter
values are stored as recycled arrays, so every constraint is evaluated
element-wise and yields one verdict per output position.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import MISSING, dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self, cast

import numpy as np

from pysatl_extradist.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, ClassVar

    from pysatl_extradist.families.parametric_family import ParametricFamily
    from pysatl_extradist.types import BoolArray, NumericArray


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], Any]
        Predicate returning a bool or a boolean array (one entry per
        parameter set).
    """

    description: str
    check: Callable[[Any], Any]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Fields hold either scalars or arrays whose first axis indexes parameter
    sets. Fields listed in ``__matrix_parameters__`` hold one row of
    component values per parameter set.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    __matrix_parameters__: ClassVar[frozenset[str]] = frozenset()
    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(cast("Any", self))}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    @classmethod
    def parameter_names(cls) -> tuple[str, ...]:
        """Ordered parameter names (declaration order)."""
        return tuple(f.name for f in fields(cast("Any", cls)))

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Default values for parameters that declare one."""
        return {
            f.name: f.default for f in fields(cast("Any", cls)) if f.default is not MISSING
        }

    @classmethod
    def check_structure(cls, values: Mapping[str, NumericArray]) -> None:
        """
        Reject parameter arrays that cannot be vectorized at all.

        Called once per request, before recycling. The base implementation
        accepts everything.
        """

    @property
    def size(self) -> int:
        """Number of parameter sets held."""
        first = getattr(self, self.parameter_names()[0])
        return int(np.shape(first)[0]) if np.ndim(first) > 0 else 1

    def domain_mask(self) -> BoolArray:
        """
        Evaluate every constraint element-wise.

        Returns
        -------
        BoolArray
            True for parameter sets satisfying all constraints. Missing values
            compare as False; callers separate them out beforehand.
        """
        n = self.size
        mask = np.ones(n, dtype=bool)
        with np.errstate(invalid="ignore"):
            for constraint in self._constraints:
                mask &= np.broadcast_to(np.asarray(constraint.check(self), dtype=bool), (n,))
        return mask

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied by any parameter set.
        """
        with np.errstate(invalid="ignore"):
            for constraint in self._constraints:
                if not np.all(constraint.check(self)):
                    raise ValueError(f'Constraint "{constraint.description}" does not hold')

    def take(self, mask: BoolArray) -> Self:
        """Select the parameter sets where ``mask`` is True."""
        return type(self)(**{name: np.asarray(value)[mask] for name, value in self.parameters.items()})


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, Any]], Callable[P, Any]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, Any]], Callable[P, Any]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be an element-wise predicate.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, Any]) -> Callable[P, Any]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as the parametrization of a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that registers the parametrization.

    Notes
    -----
    Automatically converts the class to a dataclass if not already one.
    Collects and registers constraint methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @staticmethod"
                )
            if isinstance(attr, classmethod) and getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @classmethod"
                )

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        # Attach metadata
        cls.__family__ = family
        cls.__param_name__ = name

        # Discover and store constraints
        constraints = _collect_constraints(cls)
        cls._constraints = constraints

        # Register in the family
        family.register_parametrization(name, cls)
        return cls

    return decorator
