"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

import pytest

from advisor.cli import main
from advisor.models.evaluation import EvaluationResult, Rating, Recommendation
from advisor.models.reporting import AdvisoryOutcome, AdvisoryReport

REPORT = AdvisoryReport(
    postcode="HP18 9HE",
    latitude=51.776571,
    longitude=-1.031419,
    days_evaluated=14,
    evaluation=EvaluationResult(
        days_above_threshold=14,
        frost_days=0,
        recommendation=Recommendation.GO,
        rating=Rating.EXCELLENT,
    ),
)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show(self, capsys):
        result = main(["config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "Europe/London" in captured.out

    def test_config_show_from_file(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        assert "SW1A 1AA" in capsys.readouterr().out

    def test_config_is_read_only(self, config_yaml_path: Path):
        original = config_yaml_path.read_text()
        with pytest.raises(SystemExit):
            main([
                "--config", str(config_yaml_path),
                "config", "set", "forecast.forecast_days=10",
            ])
        assert config_yaml_path.read_text() == original
        assert not config_yaml_path.with_suffix(".yaml.bak").exists()

    @patch("advisor.cli.AdvisoryPipeline")
    def test_check_success(self, mock_pipeline_cls, capsys):
        mock_pipeline_cls.return_value.run.return_value = AdvisoryOutcome(
            postcode="HP18 9HE", report=REPORT
        )
        result = main(["check", "HP18 9HE"])
        assert result == 0
        out = capsys.readouterr().out
        assert "Go (Good/Excellent)" in out
        assert "Excellent" in out

    @patch("advisor.cli.AdvisoryPipeline")
    def test_check_uses_default_postcode(self, mock_pipeline_cls, config_yaml_path: Path):
        mock_pipeline_cls.return_value.run.return_value = AdvisoryOutcome(
            postcode="SW1A 1AA", report=REPORT
        )
        main(["--config", str(config_yaml_path), "check"])
        mock_pipeline_cls.return_value.run.assert_called_once_with("SW1A 1AA")

    @patch("advisor.cli.AdvisoryPipeline")
    def test_check_failure_returns_1(self, mock_pipeline_cls, capsys):
        mock_pipeline_cls.return_value.run.return_value = AdvisoryOutcome(
            postcode="NOPE", error="Postcode error: Not Found"
        )
        result = main(["check", "NOPE"])
        assert result == 1
        assert "Error: Postcode error: Not Found" in capsys.readouterr().out

    @patch("advisor.cli.AdvisoryPipeline")
    def test_check_json(self, mock_pipeline_cls, capsys):
        mock_pipeline_cls.return_value.run.return_value = AdvisoryOutcome(
            postcode="HP18 9HE", report=REPORT
        )
        result = main(["check", "--json", "HP18 9HE"])
        assert result == 0
        assert '"rating": "EXCELLENT"' in capsys.readouterr().out

    @patch("uvicorn.run")
    def test_serve(self, mock_run):
        result = main(["serve", "--port", "9001"])
        assert result == 0
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9001
