# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""The seven factor calculators.

Each calculator maps normalized metrics to a :class:`FactorResult`:
a piecewise-linear curve yields a raw value, which is clamped and rounded
into the score. The status band is taken from the raw value, so 84.8
rounds to 85 but stays "good". An improvement tip is attached when the
underlying metric crosses its trigger.
"""

from __future__ import annotations

from web_sustainability.data.models import Factor, FactorResult
from web_sustainability.scoring.normalizer import NormalizedMetrics
from web_sustainability.scoring.templates import (
    CODE_EFFICIENCY,
    DATA_EFFICIENCY,
    GREEN_HOSTING,
    GREY_HOSTING_IMPACT,
    LOADING_EFFICIENCY,
    MEDIA_OPTIMIZATION,
    RESOURCE_COUNT,
    USER_EXPERIENCE,
)
from web_sustainability.scoring.thresholds import (
    GREEN_HOSTING_SCORE,
    GREY_HOSTING_SCORE,
    HTTP_REQUESTS_TIP,
    IMAGE_OPTIMIZATION_TIP_PCT,
    PERFORMANCE_TIP,
    TRANSFER_SIZE_TIP_KB,
    UNUSED_CODE_TIP_KB,
    USER_EXPERIENCE_DAMPING,
    clamp_score,
    score_to_status,
)
from web_sustainability.scoring.weights import (
    FACTOR_WEIGHTS,
    RESOURCE_DOM_WEIGHT,
    RESOURCE_REQUESTS_WEIGHT,
)


# ---------------------------------------------------------------------------
# Curves
# ---------------------------------------------------------------------------

def data_efficiency_curve(size_kb: float) -> float:
    """Raw score for a page transfer size in KB.

    <=500 KB scores 95-100, <=1 MB 80-65, <=2 MB 60-40, <=4 MB 30-10 and
    anything larger 30 minus one point per 1000 KB, floored at 5. Bands
    are not continuous at their edges.
    """
    if size_kb <= 500:
        return 95 + (500 - size_kb) / 100
    if size_kb <= 1024:
        return 80 - ((size_kb - 500) / 524) * 15
    if size_kb <= 2048:
        return 60 - ((size_kb - 1024) / 1024) * 20
    if size_kb <= 4096:
        return 30 - ((size_kb - 2048) / 2048) * 20
    return max(5.0, 30 - (size_kb - 4096) / 1000)


def request_curve(requests: float) -> float:
    """Raw score for the number of HTTP requests."""
    if requests <= 25:
        return 100.0
    if requests <= 50:
        return 80 - ((requests - 25) / 25) * 30
    if requests <= 100:
        return 50 - ((requests - 50) / 50) * 40
    return 10.0


def dom_curve(dom_elements: float) -> float:
    """Raw score for the number of DOM elements."""
    if dom_elements <= 800:
        return 100.0
    if dom_elements <= 1500:
        return 80 - ((dom_elements - 800) / 700) * 30
    if dom_elements <= 3000:
        return 50 - ((dom_elements - 1500) / 1500) * 40
    return 10.0


def code_waste_curve(waste_pct: float) -> float:
    """Raw score for unused code as a percentage of the transfer size."""
    if waste_pct <= 5:
        return 100.0
    if waste_pct <= 15:
        return 90 - ((waste_pct - 5) / 10) * 40
    if waste_pct <= 30:
        return 50 - ((waste_pct - 15) / 15) * 30
    return 20 - min((waste_pct - 30) / 20 * 20, 20)


def _result(
    factor: Factor,
    raw: float,
    value: bool | float | dict[str, float],
    impact: str,
    improvement: str | None,
) -> FactorResult:
    return FactorResult(
        score=clamp_score(raw),
        value=value,
        status=score_to_status(raw),
        impact=impact,
        improvement=improvement,
        weight=FACTOR_WEIGHTS[factor],
    )


# ---------------------------------------------------------------------------
# Factor calculators
# ---------------------------------------------------------------------------

def score_data_efficiency(m: NormalizedMetrics) -> FactorResult:
    """Score the page transfer size, the dominant CO2 signal."""
    size = m.transfer_size
    return _result(
        Factor.data_efficiency,
        data_efficiency_curve(size),
        value=size,
        impact=DATA_EFFICIENCY.impact_template.format(size=size),
        improvement=DATA_EFFICIENCY.improvement if size > TRANSFER_SIZE_TIP_KB else None,
    )


def score_resource_count(m: NormalizedMetrics) -> FactorResult:
    """Score HTTP requests (60%) and DOM size (40%) together."""
    combined = (
        request_curve(m.http_requests) * RESOURCE_REQUESTS_WEIGHT
        + dom_curve(m.dom_elements) * RESOURCE_DOM_WEIGHT
    )
    return _result(
        Factor.resource_count,
        combined,
        value={"requests": m.http_requests, "domElements": m.dom_elements},
        impact=RESOURCE_COUNT.impact_template.format(
            requests=m.http_requests, dom_elements=m.dom_elements
        ),
        improvement=(
            RESOURCE_COUNT.improvement if m.http_requests > HTTP_REQUESTS_TIP else None
        ),
    )


def score_media_optimization(m: NormalizedMetrics) -> FactorResult:
    """Score the share of optimized images; linear, no curve."""
    optimized_pct = m.image_optimization * 100
    return _result(
        Factor.media_optimization,
        optimized_pct,
        value=optimized_pct,
        impact=MEDIA_OPTIMIZATION.impact_template.format(
            optimized_pct=round(optimized_pct)
        ),
        improvement=(
            MEDIA_OPTIMIZATION.improvement
            if optimized_pct < IMAGE_OPTIMIZATION_TIP_PCT
            else None
        ),
    )


def score_code_efficiency(m: NormalizedMetrics) -> FactorResult:
    """Score unused CSS and JavaScript relative to the page size."""
    total_unused = m.total_unused
    waste_pct = total_unused / m.transfer_size * 100
    return _result(
        Factor.code_efficiency,
        code_waste_curve(waste_pct),
        value={
            "unusedCSS": m.unused_css,
            "unusedJS": m.unused_js,
            "totalUnused": total_unused,
        },
        impact=CODE_EFFICIENCY.impact_template.format(
            total_unused=total_unused, waste_pct=round(waste_pct)
        ),
        improvement=(
            CODE_EFFICIENCY.improvement if total_unused > UNUSED_CODE_TIP_KB else None
        ),
    )


def score_loading_efficiency(m: NormalizedMetrics) -> FactorResult:
    """Score loading performance directly from the performance score."""
    performance = m.performance_score
    return _result(
        Factor.loading_efficiency,
        performance,
        value=performance,
        impact=LOADING_EFFICIENCY.impact_template.format(performance=performance),
        improvement=(
            LOADING_EFFICIENCY.improvement if performance < PERFORMANCE_TIP else None
        ),
    )


def score_user_experience(m: NormalizedMetrics) -> FactorResult:
    """Score user experience.

    Uses the performance score as a proxy, damped by 0.9, until layout
    stability and input delay metrics are supplied separately.
    """
    performance = m.performance_score
    return _result(
        Factor.user_experience,
        performance * USER_EXPERIENCE_DAMPING,
        value=performance,
        impact=USER_EXPERIENCE.impact_template,
        improvement=(
            USER_EXPERIENCE.improvement if performance < PERFORMANCE_TIP else None
        ),
    )


def score_green_hosting(m: NormalizedMetrics) -> FactorResult:
    """Score the hosting: 100 when green, 25 otherwise."""
    if m.is_green:
        return _result(
            Factor.green_hosting,
            GREEN_HOSTING_SCORE,
            value=True,
            impact=GREEN_HOSTING.impact_template,
            improvement=None,
        )
    return _result(
        Factor.green_hosting,
        GREY_HOSTING_SCORE,
        value=False,
        impact=GREY_HOSTING_IMPACT,
        improvement=GREEN_HOSTING.improvement,
    )


# Computation order; also the order of the result breakdown.
FACTOR_CALCULATORS = (
    (Factor.data_efficiency, score_data_efficiency),
    (Factor.resource_count, score_resource_count),
    (Factor.media_optimization, score_media_optimization),
    (Factor.code_efficiency, score_code_efficiency),
    (Factor.loading_efficiency, score_loading_efficiency),
    (Factor.user_experience, score_user_experience),
    (Factor.green_hosting, score_green_hosting),
)
