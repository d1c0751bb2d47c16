"""Tests for core Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from web_sustainability.data.models import (
    Factor,
    FactorResult,
    FactorStatus,
    Grade,
    MetricsInput,
)


class TestMetricsInput:
    """Tests for parsing metrics records."""

    def test_camel_case_fields(self):
        metrics = MetricsInput.model_validate(
            {
                "transferSize": 1500,
                "httpRequests": 45,
                "optimizations": {"unusedCSS": 25, "unusedJS": 40},
                "greenHosting": {"isGreen": True},
            }
        )
        assert metrics.transfer_size == 1500
        assert metrics.http_requests == 45
        assert metrics.optimizations.unused_css == 25
        assert metrics.optimizations.unused_js == 40
        assert metrics.green_hosting.is_green is True

    def test_snake_case_fields(self):
        metrics = MetricsInput(transfer_size=900, performance_score=80)
        assert metrics.transfer_size == 900
        assert metrics.performance_score == 80

    def test_everything_optional(self):
        metrics = MetricsInput()
        assert metrics.transfer_size is None
        assert metrics.optimizations is None
        assert metrics.green_hosting is None

    def test_unknown_fields_ignored(self):
        metrics = MetricsInput.model_validate({"transferSize": 100, "lighthouseVersion": "11"})
        assert metrics.transfer_size == 100

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            MetricsInput.model_validate({"transferSize": "very large"})

    def test_input_is_frozen(self):
        metrics = MetricsInput(transfer_size=100)
        with pytest.raises(ValidationError):
            metrics.transfer_size = 200


class TestEnums:
    """Tests for enum values and display colors."""

    def test_factor_keys(self):
        assert [f.value for f in Factor] == [
            "dataEfficiency",
            "resourceCount",
            "mediaOptimization",
            "codeEfficiency",
            "loadingEfficiency",
            "userExperience",
            "greenHosting",
        ]

    def test_grade_values(self):
        assert [g.value for g in Grade] == ["A+", "A", "B", "C", "D", "F"]

    def test_grade_colors(self):
        assert Grade.A_PLUS.color == "green"
        assert Grade.B.color == "yellow"
        assert Grade.F.color == "red"

    def test_status_colors(self):
        assert FactorStatus.excellent.color == "green"
        assert FactorStatus.poor.color == "red"


class TestFactorResult:
    """Tests for FactorResult validation."""

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            FactorResult(
                score=101,
                value=1.0,
                status=FactorStatus.excellent,
                impact="x",
                weight=0.1,
            )

    def test_bool_value_preserved(self):
        result = FactorResult(
            score=25, value=False, status=FactorStatus.poor, impact="x", weight=0.15
        )
        assert result.value is False


class TestSustainabilityResultSerialization:
    """Tests for the camelCase JSON shape."""

    def test_dump_by_alias(self, sample_result):
        data = sample_result.model_dump(by_alias=True)
        assert "sustainabilityScore" in data
        assert "topPriority" in data["insights"]
        assert set(data["breakdown"]) == {f.value for f in Factor}

    def test_factor_lookup(self, sample_result):
        assert sample_result.factor(Factor.green_hosting).score == 100
