# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Benchmark comparator.

Compares a page's size, CO2 per visit, and performance score against
fixed industry averages. Independent of the sustainability score; it
only reads the raw metrics.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from web_sustainability.data.models import (
    BenchmarkComparison,
    BenchmarkReport,
    FactorStatus,
    MetricsInput,
)

# ---------------------------------------------------------------------------
# Industry averages
# ---------------------------------------------------------------------------
AVERAGE_PAGE_SIZE_KB = 2048.0
AVERAGE_CO2_GRAMS = 0.36
AVERAGE_PERFORMANCE_SCORE = 65.0

# ---------------------------------------------------------------------------
# Ratio bands (value / average)
# ---------------------------------------------------------------------------
LOWER_EXCELLENT_MAX = 0.5
LOWER_GOOD_MAX = 1.0
LOWER_AVERAGE_MAX = 1.5

HIGHER_EXCELLENT_MIN = 1.3
HIGHER_GOOD_MIN = 1.0
HIGHER_AVERAGE_MIN = 0.75


def _status_lower_is_better(ratio: float) -> FactorStatus:
    if ratio <= LOWER_EXCELLENT_MAX:
        return FactorStatus.excellent
    if ratio <= LOWER_GOOD_MAX:
        return FactorStatus.good
    if ratio <= LOWER_AVERAGE_MAX:
        return FactorStatus.average
    return FactorStatus.poor


def _status_higher_is_better(ratio: float) -> FactorStatus:
    if ratio >= HIGHER_EXCELLENT_MIN:
        return FactorStatus.excellent
    if ratio >= HIGHER_GOOD_MIN:
        return FactorStatus.good
    if ratio >= HIGHER_AVERAGE_MIN:
        return FactorStatus.average
    return FactorStatus.poor


def _message(ratio: float, below: str, above: str) -> str:
    pct = round(abs(1.0 - ratio) * 100)
    if pct == 0:
        return "On par with the average"
    return f"{pct}% {below if ratio < 1.0 else above}"


def compare_page_size(size_kb: float) -> BenchmarkComparison:
    """Compare a transfer size in KB against the average page."""
    ratio = size_kb / AVERAGE_PAGE_SIZE_KB
    return BenchmarkComparison(
        value=size_kb,
        average=AVERAGE_PAGE_SIZE_KB,
        status=_status_lower_is_better(ratio),
        message=_message(ratio, "smaller than average", "larger than average"),
    )


def compare_co2(co2_grams: float) -> BenchmarkComparison:
    """Compare grams of CO2 per visit against the average page."""
    ratio = co2_grams / AVERAGE_CO2_GRAMS
    return BenchmarkComparison(
        value=co2_grams,
        average=AVERAGE_CO2_GRAMS,
        status=_status_lower_is_better(ratio),
        message=_message(ratio, "less CO2 than average", "more CO2 than average"),
    )


def compare_performance(performance_score: float) -> BenchmarkComparison:
    """Compare a 0-100 performance score against the average page."""
    ratio = performance_score / AVERAGE_PERFORMANCE_SCORE
    return BenchmarkComparison(
        value=performance_score,
        average=AVERAGE_PERFORMANCE_SCORE,
        status=_status_higher_is_better(ratio),
        message=_message(ratio, "below average", "above average"),
    )


def compare_to_benchmarks(metrics: MetricsInput | Mapping[str, Any]) -> BenchmarkReport:
    """Compare the measured metrics against industry averages.

    Only metrics that were actually measured are compared; defaults are
    never benchmarked against themselves.
    """
    if not isinstance(metrics, MetricsInput):
        metrics = MetricsInput.model_validate(metrics)

    return BenchmarkReport(
        page_size=(
            compare_page_size(metrics.transfer_size) if metrics.transfer_size else None
        ),
        co2=compare_co2(metrics.co2_per_visit) if metrics.co2_per_visit else None,
        performance=(
            compare_performance(metrics.performance_score)
            if metrics.performance_score
            else None
        ),
    )
