# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Metrics file loader.

Reads one page-analysis metrics record from a JSON or YAML file, as
exported by the page-speed and green-hosting collaborators.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from web_sustainability.data.models import MetricsInput

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def load_metrics(path: str | Path) -> MetricsInput:
    """Load a :class:`MetricsInput` from a JSON or YAML file.

    Raises:
        FileNotFoundError: if *path* does not exist.
        ValueError: if the suffix is unsupported, the document is not a
            mapping, or a field has the wrong type.
    """
    metrics_path = Path(path).expanduser()
    if not metrics_path.exists():
        raise FileNotFoundError(f"Metrics file not found: {metrics_path}")

    suffix = metrics_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported metrics file type: {metrics_path.suffix or '(none)'} "
            f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )

    with open(metrics_path, encoding="utf-8") as f:
        if suffix == ".json":
            raw = json.load(f)
        else:
            raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Metrics file {metrics_path} must contain a mapping, "
            f"got {type(raw).__name__}"
        )

    logger.debug("Loaded %d metric fields from %s", len(raw), metrics_path)
    return MetricsInput.model_validate(raw)
