# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Input defaults, status and grade thresholds, and improvement triggers.

Defaults are industry averages: substituting them for a missing metric
scores that dimension as an average site would be scored.
"""

from web_sustainability.data.models import FactorStatus, Grade

# ---------------------------------------------------------------------------
# Fallback values for missing (or falsy) metrics
# ---------------------------------------------------------------------------
DEFAULT_TRANSFER_SIZE_KB = 2048.0
DEFAULT_HTTP_REQUESTS = 70.0
DEFAULT_DOM_ELEMENTS = 1500.0
DEFAULT_IMAGE_OPTIMIZATION = 0.7   # Fraction of optimized images
DEFAULT_UNUSED_CODE_KB = 0.0
DEFAULT_PERFORMANCE_SCORE = 65.0

# ---------------------------------------------------------------------------
# Factor status thresholds (score -> status)
# ---------------------------------------------------------------------------
STATUS_EXCELLENT_MIN = 85
STATUS_GOOD_MIN = 70
STATUS_AVERAGE_MIN = 50
# Below 50 = poor

# ---------------------------------------------------------------------------
# Grade thresholds (composite score -> letter grade)
# ---------------------------------------------------------------------------
GRADE_A_PLUS_MIN = 90
GRADE_A_MIN = 80
GRADE_B_MIN = 70
GRADE_C_MIN = 60
GRADE_D_MIN = 40
# Below 40 = F

# ---------------------------------------------------------------------------
# Improvement triggers
# ---------------------------------------------------------------------------
TRANSFER_SIZE_TIP_KB = 1024     # Suggest compression above 1 MB
HTTP_REQUESTS_TIP = 50
IMAGE_OPTIMIZATION_TIP_PCT = 80
UNUSED_CODE_TIP_KB = 20
PERFORMANCE_TIP = 70

# ---------------------------------------------------------------------------
# Fixed factor scores
# ---------------------------------------------------------------------------
GREEN_HOSTING_SCORE = 100
GREY_HOSTING_SCORE = 25
USER_EXPERIENCE_DAMPING = 0.9


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def clamp_score(raw: float) -> int:
    """Clamp a raw curve value to 0-100 and round it to an integer score."""
    return round(max(0.0, min(100.0, raw)))


def score_to_status(score: float) -> FactorStatus:
    """Convert a 0-100 factor score to its status band."""
    if score >= STATUS_EXCELLENT_MIN:
        return FactorStatus.excellent
    if score >= STATUS_GOOD_MIN:
        return FactorStatus.good
    if score >= STATUS_AVERAGE_MIN:
        return FactorStatus.average
    return FactorStatus.poor


def score_to_grade(score: float) -> str:
    """Convert a 0-100 composite score to a letter grade string.

    Returns one of 'A+', 'A', 'B', 'C', 'D', or 'F'. The bands are
    deliberately uneven (the D band is twice as wide as B or C).
    """
    if score >= GRADE_A_PLUS_MIN:
        return Grade.A_PLUS.value
    if score >= GRADE_A_MIN:
        return Grade.A.value
    if score >= GRADE_B_MIN:
        return Grade.B.value
    if score >= GRADE_C_MIN:
        return Grade.C.value
    if score >= GRADE_D_MIN:
        return Grade.D.value
    return Grade.F.value
