# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Master scoring orchestrator for the sustainability score.

Normalizes the input metrics, delegates to the seven factor calculators,
computes the weighted composite score and grade, and attaches insights.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from web_sustainability.data.models import (
    Factor,
    FactorResult,
    Grade,
    MetricsInput,
    SustainabilityResult,
)
from web_sustainability.insights.engine import InsightEngine
from web_sustainability.scoring.factors import FACTOR_CALCULATORS
from web_sustainability.scoring.normalizer import NormalizedMetrics, normalize_metrics
from web_sustainability.scoring.thresholds import score_to_grade
from web_sustainability.scoring.weights import (
    CODE_EFFICIENCY_WEIGHT,
    DATA_EFFICIENCY_WEIGHT,
    GREEN_HOSTING_WEIGHT,
    LOADING_EFFICIENCY_WEIGHT,
    MEDIA_OPTIMIZATION_WEIGHT,
    RESOURCE_COUNT_WEIGHT,
    USER_EXPERIENCE_WEIGHT,
)

logger = logging.getLogger(__name__)


class SustainabilityScorer:
    """Stateless scoring pipeline; safe to share across threads.

    Usage::

        scorer = SustainabilityScorer()
        result = scorer.score({"transferSize": 1500, "httpRequests": 45})
    """

    def __init__(self, insight_engine: InsightEngine | None = None) -> None:
        self.insight_engine = insight_engine or InsightEngine()

    def score(self, metrics: MetricsInput | Mapping[str, Any]) -> SustainabilityResult:
        """Run the full scoring pipeline.

        Args:
            metrics: A ``MetricsInput`` or a mapping with the same fields
                (camelCase or snake_case). Missing fields use defaults.

        Returns:
            The composite score, grade, per-factor breakdown, and insights.
        """
        normalized = normalize_metrics(metrics)
        breakdown = self.calculate_factors(normalized)
        final_score = self.aggregate(breakdown)
        grade = Grade(score_to_grade(final_score))
        logger.debug("Sustainability score %d (grade %s)", final_score, grade.value)

        return SustainabilityResult(
            sustainability_score=final_score,
            grade=grade,
            breakdown={factor.value: result for factor, result in breakdown.items()},
            insights=self.insight_engine.generate(breakdown, final_score),
        )

    def calculate_factors(self, metrics: NormalizedMetrics) -> dict[Factor, FactorResult]:
        """Score all seven factors in computation order."""
        breakdown: dict[Factor, FactorResult] = {}
        for factor, calculator in FACTOR_CALCULATORS:
            result = calculator(metrics)
            logger.debug(
                "%s: score=%d status=%s", factor.value, result.score, result.status.value
            )
            breakdown[factor] = result
        return breakdown

    @staticmethod
    def aggregate(breakdown: Mapping[Factor, FactorResult]) -> int:
        """Weighted sum of the factor scores, rounded to an integer."""
        weighted = (
            breakdown[Factor.data_efficiency].score * DATA_EFFICIENCY_WEIGHT
            + breakdown[Factor.resource_count].score * RESOURCE_COUNT_WEIGHT
            + breakdown[Factor.green_hosting].score * GREEN_HOSTING_WEIGHT
            + breakdown[Factor.media_optimization].score * MEDIA_OPTIMIZATION_WEIGHT
            + breakdown[Factor.code_efficiency].score * CODE_EFFICIENCY_WEIGHT
            + breakdown[Factor.loading_efficiency].score * LOADING_EFFICIENCY_WEIGHT
            + breakdown[Factor.user_experience].score * USER_EXPERIENCE_WEIGHT
        )
        return round(weighted)


def calculate_sustainability_score(
    metrics: MetricsInput | Mapping[str, Any],
) -> SustainabilityResult:
    """Score *metrics* with a default :class:`SustainabilityScorer`."""
    return SustainabilityScorer().score(metrics)
