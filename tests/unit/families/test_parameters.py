from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np
import pytest

from pysatl_extradist.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from pysatl_extradist.types import CharacteristicName, UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_parametrization_decorator_registers_class(self) -> None:
        family = self.make_default_family()
        cls = family.parametrization

        obj = cls(scale=1.25, shift=0.5)  # type: ignore[call-arg]
        assert obj.name == "base"
        assert obj.parameters == {"scale": 1.25, "shift": 0.5}
        assert getattr(cls, "__family__", None) is family
        assert hasattr(cls, "__dataclass_fields__")
        assert [c.description for c in obj.constraints] == ["scale > 0"]

    def test_only_one_parametrization_per_family(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=family, name="other")
            class Other(Parametrization):
                value: float

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_constraint_must_be_instance_method(self, wrapper) -> None:
        family = ParametricFamily(
            name="Bad",
            distr_type=UnivariateContinuous,
            distr_characteristics={
                CharacteristicName.PDF: self._pdf,
                CharacteristicName.CDF: self._cdf,
            },
        )

        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="base")
            class Bad(Parametrization):
                value: float

                check = wrapper(constraint("value > 0")(lambda *a: True))


class TestDomainMask(TestBaseFamily):
    def test_domain_mask_is_elementwise(self) -> None:
        cls = self.make_default_family().parametrization
        params = cls(scale=np.array([1.0, -1.0, 0.0, 2.0]), shift=np.zeros(4))  # type: ignore[call-arg]

        assert params.size == 4
        assert params.domain_mask().tolist() == [True, False, False, True]

    def test_missing_values_fail_the_domain_check(self) -> None:
        cls = self.make_default_family().parametrization
        params = cls(scale=np.array([np.nan, 1.0]), shift=np.zeros(2))  # type: ignore[call-arg]
        assert params.domain_mask().tolist() == [False, True]

    def test_validate_reports_failed_constraint(self) -> None:
        cls = self.make_default_family().parametrization
        cls(scale=np.array([1.0]), shift=np.zeros(1)).validate()  # type: ignore[call-arg]

        with pytest.raises(ValueError, match='Constraint "scale > 0" does not hold'):
            cls(scale=np.array([1.0, -1.0]), shift=np.zeros(2)).validate()  # type: ignore[call-arg]

    def test_take_selects_rows(self) -> None:
        cls = self.make_default_family().parametrization
        params = cls(scale=np.array([1.0, 2.0, 3.0]), shift=np.array([0.0, 1.0, 2.0]))  # type: ignore[call-arg]

        taken = params.take(np.array([True, False, True]))
        assert taken.parameters["scale"].tolist() == [1.0, 3.0]
        assert taken.parameters["shift"].tolist() == [0.0, 2.0]
        assert taken.size == 2
