# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Insight generation from factor scores."""

from web_sustainability.insights.engine import InsightEngine

__all__ = ["InsightEngine"]
