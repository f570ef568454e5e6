"""
Distributions subpackage

Interfaces and default implementations shared by all families:

- distribution protocol (:mod:`.distribution`);
- analytical computation holder (:mod:`.computation`);
- sampling strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .strategies import InverseTransformSamplingStrategy, SamplingStrategy
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # strategies
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
