# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Human-readable formatting for sizes, CO2 amounts and URLs."""

from __future__ import annotations

import re

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def _trim(value: float, decimals: int) -> str:
    """Fixed-point format without trailing zeros: 1.50 -> '1.5', 2.00 -> '2'."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_number(value: float) -> str:
    """Integral values without a decimal part, others to two places."""
    if float(value).is_integer():
        return str(int(value))
    return _trim(value, 2)


def format_bytes(num_bytes: float, decimals: int = 2) -> str:
    """Format a byte count using 1024-based units, e.g. ``1.5 KB``."""
    if num_bytes == 0:
        return "0 Bytes"
    value = float(num_bytes)
    exponent = 0
    while abs(value) >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{_trim(value, max(0, decimals))} {_SIZE_UNITS[exponent]}"


def format_co2(grams: float) -> str:
    """Format grams of CO2 as mg, g or kg depending on magnitude."""
    if grams < 1:
        return f"{round(grams * 1000)} mg CO2"
    if grams < 1000:
        return f"{_trim(grams, 2)} g CO2"
    return f"{_trim(grams / 1000, 2)} kg CO2"


def format_url_for_display(url: str, max_length: int = 50) -> str:
    """Strip the scheme and trailing slash and truncate long URLs."""
    display = re.sub(r"^https?://", "", url).rstrip("/")
    if len(display) > max_length:
        display = display[: max_length - 3] + "..."
    return display
