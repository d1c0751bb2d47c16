# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the web sustainability test suite."""

from __future__ import annotations

import pytest

from web_sustainability.data.models import MetricsInput, SustainabilityResult
from web_sustainability.scoring.engine import SustainabilityScorer


@pytest.fixture()
def scorer() -> SustainabilityScorer:
    return SustainabilityScorer()


@pytest.fixture()
def sample_metrics() -> dict:
    """A typical mid-sized page on green hosting."""
    return {
        "url": "https://example.com/",
        "transferSize": 1500,
        "httpRequests": 45,
        "domElements": 1200,
        "optimizations": {
            "imageOptimizationScore": 0.85,
            "unusedCSS": 25,
            "unusedJS": 40,
        },
        "performanceScore": 78,
        "greenHosting": {"isGreen": True, "provider": "Example Green Host"},
        "co2PerVisit": 2.5,
    }


@pytest.fixture()
def best_case_metrics() -> dict:
    """A small, fast, fully optimized page on green hosting."""
    return {
        "transferSize": 500,
        "httpRequests": 25,
        "domElements": 800,
        "optimizations": {"imageOptimizationScore": 1, "unusedCSS": 0, "unusedJS": 0},
        "performanceScore": 100,
        "greenHosting": {"isGreen": True},
    }


@pytest.fixture()
def default_result(scorer: SustainabilityScorer) -> SustainabilityResult:
    """Result for an empty metrics record, so every default applies."""
    return scorer.score(MetricsInput())


@pytest.fixture()
def sample_result(scorer: SustainabilityScorer, sample_metrics: dict) -> SustainabilityResult:
    return scorer.score(sample_metrics)
