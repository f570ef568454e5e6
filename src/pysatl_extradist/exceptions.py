"""
Errors and warnings raised by PySATL extradist.

Per-element domain violations never raise; they produce the invalid marker
and a single :class:`NaNsProducedWarning` per call. Everything here that is an
exception aborts the whole call before any output is produced.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class NaNsProducedWarning(UserWarning):
    """At least one output element was set to NaN because of invalid parameters."""


class RecyclingError(ValueError):
    """Inputs cannot be aligned by modular recycling (e.g. a zero-length vector)."""


class ComponentMismatchError(ValueError):
    """Mixture parameter matrices disagree on the number of components."""


class RejectionLimitError(RuntimeError):
    """A rejection sampler exceeded its configured iteration cap."""


__all__ = [
    "NaNsProducedWarning",
    "RecyclingError",
    "ComponentMismatchError",
    "RejectionLimitError",
]
