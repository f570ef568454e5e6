"""
PySATL extradist
================

Unit tests for vectorized distributions: recycling, markers, families and
sampling strategies.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
