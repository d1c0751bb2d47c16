# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Reporting modules for terminal output and formatting."""

from web_sustainability.reporting.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
