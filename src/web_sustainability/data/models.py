# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the sustainability scorer.

This module defines the data contract shared by the scoring engine, the
insight generator, the benchmark comparator, and the reporting and CLI
layers. Field names are snake_case in Python; every model also accepts
and emits the camelCase names used by the page-analysis collaborators
(``transferSize``, ``sustainabilityScore``, ``topPriority``, ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Factor(str, Enum):
    """The seven independently scored dimensions, in computation order."""

    data_efficiency = "dataEfficiency"
    resource_count = "resourceCount"
    media_optimization = "mediaOptimization"
    code_efficiency = "codeEfficiency"
    loading_efficiency = "loadingEfficiency"
    user_experience = "userExperience"
    green_hosting = "greenHosting"


class FactorStatus(str, Enum):
    """Quality band of a single factor score."""

    excellent = "excellent"
    good = "good"
    average = "average"
    poor = "poor"

    @property
    def color(self) -> str:
        """Terminal color associated with this status."""
        if self is FactorStatus.excellent:
            return "green"
        if self is FactorStatus.good:
            return "cyan"
        if self is FactorStatus.average:
            return "yellow"
        return "red"


class Grade(str, Enum):
    """Letter grade of the composite sustainability score."""

    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def color(self) -> str:
        """Terminal / report color associated with this grade."""
        if self in (Grade.A_PLUS, Grade.A):
            return "green"
        if self is Grade.B:
            return "yellow"
        if self is Grade.C:
            return "dark_orange"
        return "red"


class ImpactLevel(str, Enum):
    """Expected payoff of acting on an improvement."""

    high = "high"
    medium = "medium"


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

class Optimizations(BaseModel):
    """Optimization signals reported by the page-speed analyzer."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    image_optimization_score: Optional[float] = Field(
        default=None,
        description="Fraction of images that are already optimized (0.0-1.0)",
    )
    unused_css: Optional[float] = Field(
        default=None, alias="unusedCSS", description="Unused CSS in KB"
    )
    unused_js: Optional[float] = Field(
        default=None, alias="unusedJS", description="Unused JavaScript in KB"
    )
    can_save: Optional[float] = Field(
        default=None,
        description="Removable code in KB as reported by the analyzer; drives the savings tip",
    )


class GreenHosting(BaseModel):
    """Outcome of the green-hosting lookup."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    is_green: bool = Field(
        default=False,
        description="True if the host reports running on renewable energy",
    )
    provider: Optional[str] = Field(
        default=None, description="Hosting provider name (informational)"
    )


class MetricsInput(BaseModel):
    """Raw page-analysis metrics supplied by the caller.

    Every field is optional. Missing (or falsy) values are replaced by
    documented averages during normalization, so an empty record is a
    valid input. Unrelated extra fields are ignored.
    """

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    url: Optional[str] = Field(
        default=None, description="Analyzed page URL (informational)"
    )
    transfer_size: Optional[float] = Field(
        default=None, description="Total data transferred per page view in KB"
    )
    http_requests: Optional[float] = Field(
        default=None, description="Number of HTTP requests per page view"
    )
    dom_elements: Optional[float] = Field(
        default=None, description="Number of DOM elements on the page"
    )
    optimizations: Optional[Optimizations] = Field(
        default=None, description="Image and code optimization signals"
    )
    performance_score: Optional[float] = Field(
        default=None, description="Loading performance score (0-100)"
    )
    green_hosting: Optional[GreenHosting] = Field(
        default=None, description="Green hosting lookup result"
    )
    co2_per_visit: Optional[float] = Field(
        default=None,
        description="Estimated grams of CO2 per visit (informational, not scored)",
    )


# ---------------------------------------------------------------------------
# Scoring result models
# ---------------------------------------------------------------------------

FactorValue = Union[bool, float, dict[str, float]]


class FactorResult(BaseModel):
    """A single scored factor within the sustainability breakdown."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    score: int = Field(
        ..., ge=0, le=100, description="Normalized score on a 0-100 scale"
    )
    value: FactorValue = Field(
        ..., description="Raw measurement(s) that produced the score"
    )
    status: FactorStatus = Field(..., description="Quality band of the unrounded factor value")
    impact: str = Field(
        ..., description="Human-readable description of the raw value"
    )
    improvement: Optional[str] = Field(
        default=None,
        description="Actionable suggestion, present only when there is room to improve",
    )
    weight: float = Field(
        ..., ge=0, le=1,
        description="Weight of this factor in the composite score (0-1)",
    )


class Improvement(BaseModel):
    """An improvement opportunity derived from one factor."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    area: str = Field(..., description="Factor key the suggestion applies to")
    suggestion: str = Field(..., description="What to do")
    impact: ImpactLevel = Field(..., description="Expected payoff: high or medium")


class Strength(BaseModel):
    """A factor that already performs excellently."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    area: str = Field(..., description="Factor key")
    description: str = Field(..., description="What the site does well")


class Insights(BaseModel):
    """Actionable post-processing of the factor breakdown."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    assessment: str = Field(..., description="Overall natural-language verdict")
    improvements: list[Improvement] = Field(
        default_factory=list,
        description="Improvements, high-impact entries first",
    )
    strengths: list[Strength] = Field(
        default_factory=list, description="Factors scoring 85 or more"
    )
    top_priority: Optional[Improvement] = Field(
        default=None, description="First entry of the improvements list"
    )


class SustainabilityResult(BaseModel):
    """Complete output of one scoring run.

    Consumed by the reporting and CLI layers and by any caller that
    stores or renders the score.
    """

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    sustainability_score: int = Field(
        ..., ge=0, le=100, description="Weighted composite score (0-100)"
    )
    grade: Grade = Field(..., description="Letter grade for the composite score")
    breakdown: dict[str, FactorResult] = Field(
        ..., description="Factor key -> factor result, in computation order"
    )
    insights: Insights = Field(..., description="Improvements, strengths, verdict")

    def factor(self, factor: Factor) -> FactorResult:
        """Return the breakdown entry for *factor*."""
        return self.breakdown[factor.value]


# ---------------------------------------------------------------------------
# Benchmark / comparison models
# ---------------------------------------------------------------------------

class BenchmarkComparison(BaseModel):
    """One metric compared against its industry average."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    value: float = Field(..., description="Measured value")
    average: float = Field(..., description="Industry average for this metric")
    status: FactorStatus = Field(..., description="How the value compares")
    message: str = Field(..., description="Human-readable comparison")


class BenchmarkReport(BaseModel):
    """Page size, CO2 and performance compared against averages."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    page_size: Optional[BenchmarkComparison] = Field(
        default=None, description="Transfer size in KB vs average"
    )
    co2: Optional[BenchmarkComparison] = Field(
        default=None, description="Grams of CO2 per visit vs average"
    )
    performance: Optional[BenchmarkComparison] = Field(
        default=None, description="Performance score vs average"
    )


class EnvironmentalEquivalent(BaseModel):
    """CO2 per visit expressed as an everyday activity."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    activity: str
    unit: str
    value: float
    text: str
