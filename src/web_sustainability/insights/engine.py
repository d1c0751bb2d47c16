# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Insight engine.

Post-processes a factor breakdown into an ordered list of improvements,
a list of strengths, and an overall assessment string.
"""

from __future__ import annotations

from collections.abc import Mapping

from web_sustainability.data.models import (
    Factor,
    FactorResult,
    ImpactLevel,
    Improvement,
    Insights,
    Strength,
)
from web_sustainability.insights.templates import (
    HIGH_IMPACT_BELOW,
    STRENGTH_MIN,
    assessment_for,
)


def order_improvements(improvements: list[Improvement]) -> list[Improvement]:
    """Move high-impact improvements to the front.

    High-impact entries keep their relative order; medium-impact entries
    follow in reverse order of discovery. Stored reports and their
    ``top_priority`` depend on exactly this ordering.
    """
    high = [i for i in improvements if i.impact is ImpactLevel.high]
    medium = [i for i in improvements if i.impact is not ImpactLevel.high]
    return high + medium[::-1]


class InsightEngine:
    """Generate improvements, strengths and an assessment from factor scores.

    Usage::

        engine = InsightEngine()
        insights = engine.generate(breakdown, final_score)
    """

    def generate(
        self,
        breakdown: Mapping[Factor, FactorResult],
        final_score: int,
    ) -> Insights:
        """Build the :class:`Insights` for one scoring run.

        Parameters
        ----------
        breakdown:
            Factor results in computation order.
        final_score:
            The rounded composite score, used to pick the assessment.

        Returns
        -------
        Insights
            Ordered improvements, strengths (factors scoring 85 or more),
            the assessment, and the top-priority improvement if any.
        """
        improvements: list[Improvement] = []
        strengths: list[Strength] = []

        for factor, result in breakdown.items():
            if result.improvement:
                improvements.append(
                    Improvement(
                        area=factor.value,
                        suggestion=result.improvement,
                        impact=(
                            ImpactLevel.high
                            if result.score < HIGH_IMPACT_BELOW
                            else ImpactLevel.medium
                        ),
                    )
                )
            if result.score >= STRENGTH_MIN:
                strengths.append(Strength(area=factor.value, description=result.impact))

        ordered = order_improvements(improvements)
        return Insights(
            assessment=assessment_for(final_score),
            improvements=ordered,
            strengths=strengths,
            top_priority=ordered[0] if ordered else None,
        )
