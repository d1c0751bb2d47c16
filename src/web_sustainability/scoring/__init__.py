# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring engine for the sustainability score."""

from web_sustainability.scoring.engine import SustainabilityScorer

__all__ = ["SustainabilityScorer"]
