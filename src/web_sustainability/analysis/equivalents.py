# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Everyday equivalents for CO2 per visit, and code-removal savings."""

from __future__ import annotations

from dataclasses import dataclass

from web_sustainability.data.models import EnvironmentalEquivalent, Optimizations
from web_sustainability.reporting.formatting import format_bytes


@dataclass(frozen=True)
class Activity:
    """An everyday activity with a known CO2 cost per unit."""

    activity: str
    grams_per_unit: float
    unit: str
    text_template: str


DRIVING = Activity(
    activity="driving", grams_per_unit=404.0, unit="km",
    text_template="{value:g} km of driving",
)
SMARTPHONE_CHARGE = Activity(
    activity="smartphone charging", grams_per_unit=8.5, unit="charges",
    text_template="{value:g} smartphone charges",
)
COFFEE = Activity(
    activity="coffee", grams_per_unit=21.0, unit="cups",
    text_template="{value:g} cups of coffee",
)

ACTIVITIES = (DRIVING, SMARTPHONE_CHARGE, COFFEE)

# Grams of CO2 saved per MB of code removed, per visit.
CO2_GRAMS_PER_MB_SAVED = 4.6
# Savings at or below this are too small to be worth a tip.
MIN_SAVINGS_TIP_KB = 5


def environmental_equivalents(co2_grams: float) -> list[EnvironmentalEquivalent]:
    """Express *co2_grams* in every known activity, driving first."""
    equivalents = []
    for act in ACTIVITIES:
        value = round(co2_grams / act.grams_per_unit, 2)
        equivalents.append(
            EnvironmentalEquivalent(
                activity=act.activity,
                unit=act.unit,
                value=value,
                text=act.text_template.format(value=value),
            )
        )
    return equivalents


def estimate_co2_savings(unused_kb: float) -> float:
    """Grams of CO2 per visit saved by removing *unused_kb* of code."""
    return round(unused_kb / 1024 * CO2_GRAMS_PER_MB_SAVED, 2)


def removable_code_kb(optimizations: Optimizations | None) -> float:
    """KB of code that could be removed.

    The analyzer's ``canSave`` figure wins when present; otherwise it is
    unused CSS plus unused JavaScript.
    """
    if optimizations is None:
        return 0.0
    if optimizations.can_save:
        return optimizations.can_save
    return (optimizations.unused_css or 0.0) + (optimizations.unused_js or 0.0)


def savings_tip(unused_kb: float) -> str | None:
    """Tip about removable code, or None when savings are negligible."""
    if unused_kb <= MIN_SAVINGS_TIP_KB:
        return None
    return (
        f"Removing unused code would save {format_bytes(unused_kb * 1024)} per visit, "
        f"about {estimate_co2_savings(unused_kb):g}g CO2."
    )
