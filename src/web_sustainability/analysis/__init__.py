# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Benchmark comparison and environmental equivalents."""

from web_sustainability.analysis.benchmarks import compare_to_benchmarks
from web_sustainability.analysis.equivalents import (
    environmental_equivalents,
    estimate_co2_savings,
    removable_code_kb,
)

__all__ = [
    "compare_to_benchmarks",
    "environmental_equivalents",
    "estimate_co2_savings",
    "removable_code_kb",
]
