# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Web Sustainability - website environmental footprint scoring."""

__version__ = "0.1.0"

from web_sustainability.data.models import (
    Factor,
    FactorResult,
    FactorStatus,
    Grade,
    Insights,
    MetricsInput,
    SustainabilityResult,
)
from web_sustainability.data.loader import load_metrics
from web_sustainability.scoring.engine import (
    SustainabilityScorer,
    calculate_sustainability_score,
)
from web_sustainability.insights.engine import InsightEngine
from web_sustainability.analysis.benchmarks import compare_to_benchmarks
from web_sustainability.analysis.equivalents import environmental_equivalents

__all__ = [
    "Factor",
    "FactorResult",
    "FactorStatus",
    "Grade",
    "InsightEngine",
    "Insights",
    "MetricsInput",
    "SustainabilityResult",
    "SustainabilityScorer",
    "calculate_sustainability_score",
    "compare_to_benchmarks",
    "environmental_equivalents",
    "load_metrics",
]
