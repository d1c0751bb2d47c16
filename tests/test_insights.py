# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for improvements, strengths and the assessment."""

from __future__ import annotations

import pytest

from web_sustainability.data.models import ImpactLevel, Improvement, SustainabilityResult
from web_sustainability.insights.engine import order_improvements
from web_sustainability.insights.templates import (
    ASSESSMENT_EXCELLENT,
    ASSESSMENT_GOOD,
    ASSESSMENT_HIGH_IMPACT,
    ASSESSMENT_WEAK,
    assessment_for,
)


def _imp(area: str, impact: ImpactLevel) -> Improvement:
    return Improvement(area=area, suggestion=f"fix {area}", impact=impact)


class TestOrderImprovements:
    """Tests for the improvement ordering rule."""

    def test_high_first_then_medium_reversed(self):
        m1 = _imp("m1", ImpactLevel.medium)
        h1 = _imp("h1", ImpactLevel.high)
        m2 = _imp("m2", ImpactLevel.medium)
        h2 = _imp("h2", ImpactLevel.high)
        ordered = order_improvements([m1, h1, m2, h2])
        assert [i.area for i in ordered] == ["h1", "h2", "m2", "m1"]

    def test_single_and_empty(self):
        only = _imp("only", ImpactLevel.medium)
        assert order_improvements([only]) == [only]
        assert order_improvements([]) == []


class TestInsightEngine:
    """Tests for insights attached to a scoring result."""

    def test_default_improvements(self, default_result: SustainabilityResult):
        improvements = default_result.insights.improvements
        assert [i.area for i in improvements] == [
            "dataEfficiency",
            "resourceCount",
            "greenHosting",
            "userExperience",
            "loadingEfficiency",
            "mediaOptimization",
        ]
        assert [i.impact for i in improvements[:3]] == [ImpactLevel.high] * 3
        assert all(i.impact is ImpactLevel.medium for i in improvements[3:])

    def test_top_priority_is_first(self, default_result: SustainabilityResult):
        insights = default_result.insights
        assert insights.top_priority == insights.improvements[0]

    def test_sample_improvements(self, sample_result: SustainabilityResult):
        insights = sample_result.insights
        assert [i.area for i in insights.improvements] == [
            "codeEfficiency",
            "dataEfficiency",
        ]
        assert insights.top_priority.area == "codeEfficiency"

    def test_strengths(self, sample_result: SustainabilityResult):
        strengths = sample_result.insights.strengths
        assert [s.area for s in strengths] == [
            "mediaOptimization",
            "codeEfficiency",
            "greenHosting",
        ]
        assert strengths[0].description == "85% of images optimized"

    def test_improvement_matches_factor_tip(self, default_result: SustainabilityResult):
        for imp in default_result.insights.improvements:
            assert imp.suggestion == default_result.breakdown[imp.area].improvement

    def test_assessment(self, default_result, sample_result):
        assert default_result.insights.assessment == ASSESSMENT_HIGH_IMPACT
        assert sample_result.insights.assessment == ASSESSMENT_GOOD


class TestAssessment:
    """Tests for assessment score bands."""

    @pytest.mark.parametrize(
        "score, message",
        [
            (100, ASSESSMENT_EXCELLENT),
            (85, ASSESSMENT_EXCELLENT),
            (84, ASSESSMENT_GOOD),
            (70, ASSESSMENT_GOOD),
            (69, ASSESSMENT_WEAK),
            (50, ASSESSMENT_WEAK),
            (49, ASSESSMENT_HIGH_IMPACT),
        ],
    )
    def test_bands(self, score, message):
        assert assessment_for(score) == message
