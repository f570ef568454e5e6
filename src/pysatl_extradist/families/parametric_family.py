"""
Parametric family definitions and vectorized evaluation.

This module contains the main class for defining parametric families of
distributions. A family bundles closed-form characteristics, a
parametrization with its validity domain, a sampling strategy and a support
resolver, and exposes the vectorized operations ``density``, ``cumulative``,
``quantile`` and ``sample`` (plus ``mean`` and ``var`` where available).

Every vectorized operation follows the same pipeline:

1. bind positional/keyword arguments to the ordered parameters;
2. convert inputs to vectors and recycle them to a common length;
3. split positions into missing, invalid and valid ones;
4. call the characteristic on valid positions only;
5. write :data:`~pysatl_extradist.markers.NA` to missing positions, NaN to
   invalid ones, and warn once if any position was invalid.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradist.broadcasting import as_vector, broadcast, transform_probabilities
from pysatl_extradist.distributions.computation import AnalyticalComputation
from pysatl_extradist.distributions.strategies import InverseTransformSamplingStrategy
from pysatl_extradist.exceptions import NaNsProducedWarning, RecyclingError
from pysatl_extradist.families.distribution import ParametricFamilyDistribution
from pysatl_extradist.markers import na_vector
from pysatl_extradist.primitives import make_rng
from pysatl_extradist.types import CharacteristicName, DistributionType, Kind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from pysatl_extradist.distributions.strategies import SamplingStrategy
    from pysatl_extradist.distributions.support import Support
    from pysatl_extradist.families.parametrizations import Parametrization
    from pysatl_extradist.types import (
        ArrayLike,
        BoolArray,
        NumericArray,
        ParametrizationName,
    )

    ParametrizedFunction: TypeAlias = Callable[[Parametrization, Any], Any]
    SupportResolver: TypeAlias = Callable[[Parametrization], Support | None]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Evaluation:
    """Recycled request split into missing, invalid and valid positions."""

    length: int
    subject: NumericArray | None
    parameters: Parametrization
    valid: BoolArray
    invalid: BoolArray


class ParametricFamily:
    """
    A family of distributions sharing one parametrization.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Distribution type (univariate discrete or continuous).
    distr_characteristics : dict[CharacteristicName, Callable]
        Mapping from characteristic names to ``func(parameters, x)``.
        ``PDF`` (continuous) or ``PMF`` (discrete) and ``CDF`` are required.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling; inverse transform through ``PPF`` by default.
    support_by_parametrization : Callable or None, optional
        Function that returns the support for scalar parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_characteristics: dict[CharacteristicName, ParametrizedFunction],
        sampling_strategy: SamplingStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        self._name = name
        self._distr_type = distr_type

        density_name = (
            CharacteristicName.PMF if self.kind == Kind.DISCRETE else CharacteristicName.PDF
        )
        for required in (density_name, CharacteristicName.CDF):
            if required not in distr_characteristics:
                raise ValueError(f"Family {name} must provide the '{required}' characteristic.")
        self._density_name = density_name

        self.distr_characteristics = dict(distr_characteristics)
        self.sampling_strategy = (
            InverseTransformSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self._support_resolver: SupportResolver = (
            (lambda _params: None)
            if support_by_parametrization is None
            else support_by_parametrization
        )

        self._parametrization_name: ParametrizationName | None = None
        self._parametrization: type[Parametrization] | None = None

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type shared by all members."""
        return self._distr_type

    @property
    def kind(self) -> Kind:
        """Discrete or continuous."""
        return Kind(self._distr_type.features["kind"])

    @property
    def parametrization(self) -> type[Parametrization]:
        """
        Get the parametrization class.

        Raises
        ------
        ValueError
            If no parametrization is registered.
        """
        if self._parametrization is None:
            raise ValueError(f"Family {self.name} has no registered parametrization.")
        return self._parametrization

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Ordered parameter names."""
        return self.parametrization.parameter_names()

    @property
    def support_resolver(self) -> SupportResolver:
        """Get the support resolver function."""
        return self._support_resolver

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register the parametrization class.

        Raises
        ------
        ValueError
            If a parametrization is already registered.
        """
        if self._parametrization is not None:
            raise ValueError(
                f"Parametrization '{self._parametrization_name}' is already registered."
            )
        self._parametrization_name = name
        self._parametrization = parametrization_class

    def has_characteristic(self, name: CharacteristicName) -> bool:
        """Check whether the family provides a closed form for ``name``."""
        return name in self.distr_characteristics

    def characteristic(self, name: CharacteristicName) -> ParametrizedFunction:
        """
        Fetch the raw characteristic function.

        Raises
        ------
        RuntimeError
            If the family provides no closed form for ``name``.
        """
        try:
            return self.distr_characteristics[name]
        except KeyError as exc:
            raise RuntimeError(f"Family {self.name} provides no '{name}' characteristic.") from exc

    # ------------------------------------------------------------------ #
    # Request preparation

    def _bind(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
        """Bind positional and keyword arguments to parameter names."""
        names = self.parameter_names
        if len(args) > len(names):
            raise TypeError(
                f"{self.name} takes {len(names)} parameters ({', '.join(names)}), "
                f"got {len(args)} positional values."
            )

        bound = dict(zip(names, args, strict=False))
        for key, value in kwargs.items():
            if key not in names:
                raise TypeError(f"{self.name} got an unexpected parameter '{key}'.")
            if key in bound:
                raise TypeError(f"{self.name} got multiple values for parameter '{key}'.")
            bound[key] = value

        for key, value in self.parametrization.defaults().items():
            bound.setdefault(key, value)

        missing = [name for name in names if name not in bound]
        if missing:
            raise TypeError(f"{self.name} is missing required parameters: {', '.join(missing)}.")

        return {name: bound[name] for name in names}

    def _parameter_vectors(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
        cls = self.parametrization
        bound = self._bind(args, kwargs)
        vectors = {
            name: as_vector(value, name, rows=name in cls.__matrix_parameters__)
            for name, value in bound.items()
        }
        cls.check_structure(vectors)
        return vectors

    def _prepare(
        self,
        subject_name: str | None,
        subject: NumericArray | None,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        *,
        length: int | None = None,
        probability: bool = False,
    ) -> _Evaluation:
        vectors = self._parameter_vectors(args, kwargs)
        if subject_name is not None and subject is not None:
            vectors = {subject_name: subject, **vectors}

        request = broadcast(vectors, length=length)
        values = dict(request.values)
        recycled_subject = values.pop(subject_name) if subject_name is not None else None

        parameters = self.parametrization(**values)
        domain = parameters.domain_mask()
        if probability and recycled_subject is not None:
            with np.errstate(invalid="ignore"):
                domain &= (recycled_subject >= 0.0) & (recycled_subject <= 1.0)

        missing = request.missing
        return _Evaluation(
            length=request.length,
            subject=recycled_subject,
            parameters=parameters,
            valid=domain & ~missing,
            invalid=~domain & ~missing,
        )

    def _finalize(self, evaluation: _Evaluation, values: NumericArray | None) -> NumericArray:
        result = na_vector(evaluation.length)
        if values is not None:
            result[evaluation.valid] = values
        result[evaluation.invalid] = np.nan
        if evaluation.invalid.any():
            warnings.warn("NaNs produced", NaNsProducedWarning, stacklevel=3)
        return result

    def _valid_rows(self, evaluation: _Evaluation) -> tuple[Parametrization, NumericArray] | None:
        if not evaluation.valid.any():
            return None
        parameters = evaluation.parameters.take(evaluation.valid)
        subject = (
            evaluation.subject[evaluation.valid]
            if evaluation.subject is not None
            else np.empty(0, dtype=np.float64)
        )
        return parameters, subject

    # ------------------------------------------------------------------ #
    # Vectorized operations

    def density(self, x: ArrayLike, *args: Any, log_prob: bool = False, **kwargs: Any) -> NumericArray:
        """
        Evaluate the density (continuous) or probability mass (discrete).

        Parameters
        ----------
        x : ArrayLike
            Points at which to evaluate.
        *args, **kwargs
            Parameter vectors, positionally in declaration order or by name.
        log_prob : bool, default False
            Return ``log f(x)``.

        Returns
        -------
        NumericArray
            Vector of length ``max`` over all input lengths.
        """
        evaluation = self._prepare("x", as_vector(x, "x"), args, kwargs)
        rows = self._valid_rows(evaluation)
        if rows is None:
            return self._finalize(evaluation, None)

        parameters, xs = rows
        has_log = self.has_characteristic(CharacteristicName.LOGPDF)
        with np.errstate(divide="ignore", over="ignore", under="ignore", invalid="ignore"):
            if log_prob and has_log:
                values = self.characteristic(CharacteristicName.LOGPDF)(parameters, xs)
            elif log_prob:
                values = np.log(self.characteristic(self._density_name)(parameters, xs))
            else:
                values = self.characteristic(self._density_name)(parameters, xs)
        return self._finalize(evaluation, values)

    def cumulative(
        self,
        x: ArrayLike,
        *args: Any,
        lower_tail: bool = True,
        log_prob: bool = False,
        **kwargs: Any,
    ) -> NumericArray:
        """
        Evaluate ``P(X <= x)`` (or ``P(X > x)`` with ``lower_tail=False``).

        Parameters
        ----------
        x : ArrayLike
            Points at which to evaluate.
        *args, **kwargs
            Parameter vectors.
        lower_tail : bool, default True
            If ``False``, return the survival function.
        log_prob : bool, default False
            Return the natural logarithm of the probability.

        Returns
        -------
        NumericArray
        """
        evaluation = self._prepare("x", as_vector(x, "x"), args, kwargs)
        rows = self._valid_rows(evaluation)
        if rows is None:
            return self._finalize(evaluation, None)

        parameters, xs = rows
        with np.errstate(divide="ignore", over="ignore", under="ignore", invalid="ignore"):
            if lower_tail:
                if log_prob and self.has_characteristic(CharacteristicName.LOGCDF):
                    values = self.characteristic(CharacteristicName.LOGCDF)(parameters, xs)
                else:
                    values = self.characteristic(CharacteristicName.CDF)(parameters, xs)
                    if log_prob:
                        values = np.log(values)
            else:
                if self.has_characteristic(CharacteristicName.SF):
                    values = self.characteristic(CharacteristicName.SF)(parameters, xs)
                else:
                    values = 1.0 - self.characteristic(CharacteristicName.CDF)(parameters, xs)
                if log_prob:
                    values = np.log(values)
        return self._finalize(evaluation, values)

    def quantile(
        self,
        p: ArrayLike,
        *args: Any,
        lower_tail: bool = True,
        log_prob: bool = False,
        **kwargs: Any,
    ) -> NumericArray:
        """
        Evaluate the quantile function (smallest ``x`` with ``F(x) >= p``).

        The tail and log transforms are applied to ``p`` before recycling.
        Probabilities outside ``[0, 1]`` after the transform are domain
        violations.

        Raises
        ------
        RuntimeError
            If the family has no closed-form quantile.
        """
        ppf = self.characteristic(CharacteristicName.PPF)
        probabilities = transform_probabilities(
            as_vector(p, "p"), lower_tail=lower_tail, log_prob=log_prob
        )
        evaluation = self._prepare("p", probabilities, args, kwargs, probability=True)
        rows = self._valid_rows(evaluation)
        if rows is None:
            return self._finalize(evaluation, None)

        parameters, ps = rows
        with np.errstate(divide="ignore", over="ignore", under="ignore", invalid="ignore"):
            values = ppf(parameters, ps)
        return self._finalize(evaluation, values)

    def sample(
        self,
        n: int,
        *args: Any,
        rng: np.random.Generator | int | None = None,
        **kwargs: Any,
    ) -> NumericArray:
        """
        Draw ``n`` variates, recycling parameter vectors to length ``n``.

        Parameters
        ----------
        n : int
            Number of variates.
        *args, **kwargs
            Parameter vectors.
        rng : numpy.random.Generator or int or None
            Generator or seed. ``None`` uses fresh entropy.

        Returns
        -------
        NumericArray
            Vector of length ``n``.
        """
        if isinstance(n, bool) or int(n) != n:
            raise TypeError(f"Number of variates must be an integer, got {n!r}.")
        if n < 0:
            raise RecyclingError(f"Number of variates must be non-negative, got {n}.")

        evaluation = self._prepare(None, None, args, kwargs, length=int(n))
        rows = self._valid_rows(evaluation)
        if rows is None:
            return self._finalize(evaluation, None)

        parameters, _ = rows
        generator = make_rng(rng)
        log.debug(
            "sampling %d variates from %s with %s",
            parameters.size,
            self.name,
            type(self.sampling_strategy).__name__,
        )
        with np.errstate(divide="ignore", over="ignore", under="ignore", invalid="ignore"):
            values = self.sampling_strategy.sample(self, parameters, generator)
        return self._finalize(evaluation, values)

    def _moment(self, name: CharacteristicName, args: tuple[Any, ...], kwargs: dict[str, Any]) -> NumericArray:
        func = self.characteristic(name)
        evaluation = self._prepare(None, None, args, kwargs)
        rows = self._valid_rows(evaluation)
        if rows is None:
            return self._finalize(evaluation, None)

        parameters, _ = rows
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            values = np.broadcast_to(func(parameters, None), (parameters.size,))
        return self._finalize(evaluation, values)

    def mean(self, *args: Any, **kwargs: Any) -> NumericArray:
        """Expected value for every (recycled) parameter set."""
        return self._moment(CharacteristicName.MEAN, args, kwargs)

    def var(self, *args: Any, **kwargs: Any) -> NumericArray:
        """Variance for every (recycled) parameter set."""
        return self._moment(CharacteristicName.VAR, args, kwargs)

    # ------------------------------------------------------------------ #
    # Frozen distributions

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[CharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every characteristic to ``parameters``."""
        return {
            characteristic: AnalyticalComputation(
                target=characteristic,
                func=partial(func, parameters),
            )
            for characteristic, func in self.distr_characteristics.items()
        }

    def distribution(self, **parameters_values: Any) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        **parameters_values
            Parameter values for the distribution; defaults apply.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        TypeError
            If parameters are unknown or missing.
        ValueError
            If parameters don't satisfy constraints.
        """
        vectors = self._parameter_vectors((), parameters_values)
        parameters = self.parametrization(**vectors)
        parameters.validate()

        support = None
        if parameters.size == 1:
            scalar = self.parametrization(
                **{
                    name: value[0] if name not in parameters.__matrix_parameters__ else value
                    for name, value in vectors.items()
                }
            )
            support = self.support_resolver(scalar)

        return ParametricFamilyDistribution(self.name, self._distr_type, parameters, support)

    __call__ = distribution
