"""Tests for loading metrics from JSON and YAML files."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from web_sustainability.data.loader import load_metrics


class TestLoadMetrics:
    """Tests for load_metrics()."""

    def test_json(self, tmp_path, sample_metrics):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps(sample_metrics))
        metrics = load_metrics(path)
        assert metrics.transfer_size == 1500
        assert metrics.optimizations.unused_js == 40
        assert metrics.green_hosting.provider == "Example Green Host"

    def test_yaml(self, tmp_path):
        path = tmp_path / "metrics.yaml"
        path.write_text(
            "transferSize: 900\n"
            "optimizations:\n"
            "  unusedCSS: 12\n"
            "greenHosting:\n"
            "  isGreen: true\n"
        )
        metrics = load_metrics(str(path))
        assert metrics.transfer_size == 900
        assert metrics.optimizations.unused_css == 12
        assert metrics.green_hosting.is_green is True

    def test_empty_yaml_is_empty_record(self, tmp_path):
        path = tmp_path / "metrics.yml"
        path.write_text("")
        metrics = load_metrics(path)
        assert metrics.transfer_size is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_metrics(tmp_path / "nope.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "metrics.txt"
        path.write_text("{}")
        with pytest.raises(ValueError, match="Unsupported"):
            load_metrics(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="mapping"):
            load_metrics(path)

    def test_wrong_field_type(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps({"performanceScore": "fast"}))
        with pytest.raises(ValidationError):
            load_metrics(path)
