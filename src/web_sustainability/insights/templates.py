# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Insight thresholds and overall assessment messages."""

from __future__ import annotations

HIGH_IMPACT_BELOW = 50   # Improvements on factors scoring below this are "high"
STRENGTH_MIN = 85        # Factors scoring at least this are strengths

ASSESSMENT_EXCELLENT_MIN = 85
ASSESSMENT_GOOD_MIN = 70
ASSESSMENT_WEAK_MIN = 50

ASSESSMENT_EXCELLENT = "Excellent! This website has a very low environmental impact."
ASSESSMENT_GOOD = "Good, but there is definitely room for improvement."
ASSESSMENT_WEAK = (
    "This is on the weak side; there are multiple opportunities for optimization."
)
ASSESSMENT_HIGH_IMPACT = "High environmental impact - optimization should be a priority!"


def assessment_for(score: float) -> str:
    """Pick the assessment message for a composite score."""
    if score >= ASSESSMENT_EXCELLENT_MIN:
        return ASSESSMENT_EXCELLENT
    if score >= ASSESSMENT_GOOD_MIN:
        return ASSESSMENT_GOOD
    if score >= ASSESSMENT_WEAK_MIN:
        return ASSESSMENT_WEAK
    return ASSESSMENT_HIGH_IMPACT
