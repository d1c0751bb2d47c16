# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models and metrics loading."""

from web_sustainability.data.models import MetricsInput, SustainabilityResult
from web_sustainability.data.loader import load_metrics

__all__ = ["MetricsInput", "SustainabilityResult", "load_metrics"]
