# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Factor text templates.

Each template carries an ``impact`` description template with
``{placeholder}`` fields and the improvement suggestion shown when the
factor has room to improve.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FactorTemplate:
    """Immutable text template for a single factor."""

    impact_template: str
    improvement: str


DATA_EFFICIENCY = FactorTemplate(
    impact_template="{size:g}KB data transfer per visit",
    improvement="Compress images and minify CSS/JS",
)

RESOURCE_COUNT = FactorTemplate(
    impact_template="{requests:g} HTTP requests, {dom_elements:g} DOM elements",
    improvement="Combine files and reduce the number of HTTP requests",
)

MEDIA_OPTIMIZATION = FactorTemplate(
    impact_template="{optimized_pct}% of images optimized",
    improvement="Convert images to WebP/AVIF and compress them",
)

CODE_EFFICIENCY = FactorTemplate(
    impact_template="{total_unused:g}KB unused code ({waste_pct}%)",
    improvement="Remove unused CSS and JavaScript",
)

LOADING_EFFICIENCY = FactorTemplate(
    impact_template="{performance:g}/100 loading performance",
    improvement="Optimize Core Web Vitals to reduce reloads",
)

USER_EXPERIENCE = FactorTemplate(
    impact_template="User experience quality",
    improvement="Improve layout stability",
)

GREEN_HOSTING = FactorTemplate(
    impact_template="Green hosting in use",
    improvement="Switch to a green hosting provider",
)

GREY_HOSTING_IMPACT = "Grey hosting in use"
