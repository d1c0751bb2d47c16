# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the CLI layer using Click's CliRunner."""

from __future__ import annotations

import json

from click.testing import CliRunner

from web_sustainability.cli.app import cli

BEST_CASE_ARGS = [
    "--transfer-size", "500",
    "--http-requests", "25",
    "--dom-elements", "800",
    "--image-optimization", "1",
    "--performance", "100",
    "--green",
]


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "web-sustainability" in result.output

    def test_score_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "--help"])
        assert result.exit_code == 0
        assert "--transfer-size" in result.output
        assert "--export-json" in result.output

    def test_score_defaults(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["score"])
        assert result.exit_code == 0
        assert "SUSTAINABILITY SCORE" in result.output
        assert "BREAKDOWN" in result.output
        assert "48/100" in result.output

    def test_score_options(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", *BEST_CASE_ARGS])
        assert result.exit_code == 0
        assert "98/100" in result.output
        assert "No improvements needed." in result.output

    def test_score_no_details(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "--no-details"])
        assert result.exit_code == 0
        assert "BREAKDOWN" not in result.output

    def test_score_from_file(self, tmp_path, sample_metrics):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps(sample_metrics))
        runner = CliRunner()
        result = runner.invoke(cli, ["score", str(path)])
        assert result.exit_code == 0
        assert "70/100" in result.output

    def test_option_overrides_file(self, tmp_path, sample_metrics):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps(sample_metrics))
        export = tmp_path / "out.json"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["score", str(path), "--grey", "--export-json", str(export)]
        )
        assert result.exit_code == 0
        data = json.loads(export.read_text())
        assert data["breakdown"]["greenHosting"]["score"] == 25
        assert data["breakdown"]["dataEfficiency"]["score"] == 51

    def test_export_json(self, tmp_path):
        export = tmp_path / "result.json"
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "--export-json", str(export)])
        assert result.exit_code == 0
        data = json.loads(export.read_text())
        assert data["sustainabilityScore"] == 48
        assert data["grade"] == "D"
        assert data["insights"]["topPriority"]["area"] == "dataEfficiency"
        assert data["breakdown"]["resourceCount"]["value"] == {
            "requests": 70.0,
            "domElements": 1500.0,
        }
        assert data["breakdown"]["codeEfficiency"]["value"]["totalUnused"] == 0.0

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_metrics(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps({"transferSize": "huge"}))
        runner = CliRunner()
        result = runner.invoke(cli, ["score", str(path)])
        assert result.exit_code == 1
        assert "Invalid metrics" in result.output

    def test_benchmark(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["benchmark", "--transfer-size", "1024", "--co2", "2.5", "--unused-js", "65"],
        )
        assert result.exit_code == 0
        assert "BENCHMARKS" in result.output
        assert "cups of coffee" in result.output
        assert "TIP" in result.output

    def test_benchmark_tip_uses_can_save(self, tmp_path):
        path = tmp_path / "metrics.json"
        path.write_text(
            json.dumps({"optimizations": {"unusedCSS": 1, "unusedJS": 1, "canSave": 512}})
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["benchmark", str(path)])
        assert result.exit_code == 0
        assert "512 KB" in result.output

    def test_grade(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["grade", "90"])
        assert result.exit_code == 0
        assert "A+" in result.output

        result = runner.invoke(cli, ["grade", "39"])
        assert "F" in result.output

    def test_verbose(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "score"])
        assert result.exit_code == 0

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
