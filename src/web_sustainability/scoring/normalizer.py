# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Metrics normalization.

Turns a loosely shaped metrics record into a fully populated
:class:`NormalizedMetrics`, substituting the documented averages for
anything missing. A value of ``0`` counts as missing, matching how the
page analyzer reports "no data".
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from web_sustainability.data.models import MetricsInput
from web_sustainability.scoring.thresholds import (
    DEFAULT_DOM_ELEMENTS,
    DEFAULT_HTTP_REQUESTS,
    DEFAULT_IMAGE_OPTIMIZATION,
    DEFAULT_PERFORMANCE_SCORE,
    DEFAULT_TRANSFER_SIZE_KB,
    DEFAULT_UNUSED_CODE_KB,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedMetrics:
    """Metrics with every scored field populated."""

    transfer_size: float
    http_requests: float
    dom_elements: float
    image_optimization: float  # 0.0-1.0 fraction
    unused_css: float
    unused_js: float
    performance_score: float
    is_green: bool

    @property
    def total_unused(self) -> float:
        """Unused CSS plus unused JavaScript in KB."""
        return self.unused_css + self.unused_js


def normalize_metrics(metrics: MetricsInput | Mapping[str, Any]) -> NormalizedMetrics:
    """Validate *metrics* and fill in defaults for missing fields.

    Accepts a :class:`MetricsInput` or any mapping using either the
    camelCase or the snake_case field names. Wrongly typed values raise
    ``pydantic.ValidationError``; they are not coerced into defaults.
    """
    if not isinstance(metrics, MetricsInput):
        metrics = MetricsInput.model_validate(metrics)

    opts = metrics.optimizations
    hosting = metrics.green_hosting

    normalized = NormalizedMetrics(
        transfer_size=float(metrics.transfer_size or DEFAULT_TRANSFER_SIZE_KB),
        http_requests=float(metrics.http_requests or DEFAULT_HTTP_REQUESTS),
        dom_elements=float(metrics.dom_elements or DEFAULT_DOM_ELEMENTS),
        image_optimization=float(
            (opts.image_optimization_score if opts else None)
            or DEFAULT_IMAGE_OPTIMIZATION
        ),
        unused_css=float((opts.unused_css if opts else None) or DEFAULT_UNUSED_CODE_KB),
        unused_js=float((opts.unused_js if opts else None) or DEFAULT_UNUSED_CODE_KB),
        performance_score=float(
            metrics.performance_score or DEFAULT_PERFORMANCE_SCORE
        ),
        is_green=bool(hosting.is_green) if hosting else False,
    )

    if not 0.0 <= normalized.image_optimization <= 1.0:
        logger.warning(
            "Image optimization score %.3f is outside 0-1; factor will be clamped",
            normalized.image_optimization,
        )
    if not 0.0 <= normalized.performance_score <= 100.0:
        logger.warning(
            "Performance score %.1f is outside 0-100; factor will be clamped",
            normalized.performance_score,
        )
    if normalized.transfer_size < 0:
        logger.warning("Negative transfer size %.1f KB", normalized.transfer_size)

    return normalized
