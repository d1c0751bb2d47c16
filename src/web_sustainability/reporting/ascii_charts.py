# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly score gauges using Unicode block characters.

These functions return Rich-markup strings that render as colored bars
in the terminal via the Rich library.
"""

from __future__ import annotations

from web_sustainability.data.models import Grade
from web_sustainability.scoring.thresholds import score_to_grade, score_to_status


def _bar(score: float, width: int) -> tuple[float, str, str]:
    """Return (clamped score, status color, bar) for a 0-100 score."""
    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    bar = "█" * filled + "░" * (width - filled)
    return clamped, score_to_status(clamped).color, bar


def score_gauge(score: float, width: int = 20) -> str:
    """Large gauge with the letter grade, for the composite score.

    Returns something like: [yellow]████████████░░░░░░░░[/] 62/100 [dark_orange]C[/]
    """
    clamped, color, bar = _bar(score, width)
    grade = Grade(score_to_grade(clamped))
    return (
        f"[{color}]{bar}[/] {clamped:.0f}/100 "
        f"[{grade.color}]{grade.value}[/]"
    )


def mini_gauge(score: float, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    clamped, color, bar = _bar(score, width)
    return f"[{color}]{bar}[/] {clamped:.0f}"
