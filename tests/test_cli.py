"""Tests for the CLI and configuration."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tracecleaner.cli import app
from tracecleaner.utils.config import Config, get_config, set_config


SAMPLE_TRACES_DIR = Path(__file__).parent / "sample_traces"

runner = CliRunner()


@pytest.fixture
def config(tmp_path):
    """Install a config writing into a temporary directory."""
    cfg = Config(output_dir=tmp_path / "cleaned")
    set_config(cfg)
    yield cfg
    set_config(None)


class TestConfig:
    """Tests for Config."""

    def test_default_config(self):
        cfg = Config()
        assert cfg.log_level == "INFO"
        assert cfg.strict is False
        assert cfg.output_dir == Path("./cleaned")
        assert cfg.log_file is None

    def test_config_from_env(self):
        with patch.dict(os.environ, {
            "LOG_LEVEL": "DEBUG",
            "TRACECLEANER_STRICT": "yes",
            "TRACECLEANER_OUTPUT_DIR": "/tmp/cleaned_traces",
            "TRACECLEANER_LOG_FILE": "/tmp/tracecleaner.log",
        }):
            cfg = Config.from_env()
        assert cfg.debug is True
        assert cfg.strict is True
        assert cfg.output_dir == Path("/tmp/cleaned_traces")
        assert cfg.log_file == Path("/tmp/tracecleaner.log")

    def test_global_config(self, config):
        assert get_config() is config

    def test_to_dict(self):
        data = Config().to_dict()
        assert data["strict"] is False
        assert data["log_file"] is None


class TestCli:
    """Tests for CLI commands."""

    def test_clean_writes_default_output(self, config):
        result = runner.invoke(app, ["clean", str(SAMPLE_TRACES_DIR / "duplicate_markers.json")])
        assert result.exit_code == 0, result.output

        out = config.output_dir / "duplicate_markers.clean.json"
        with open(out, "r", encoding="utf-8") as f:
            data = json.load(f)
        names = [e["name"] for e in data["traceEvents"]]
        assert names.count("TracingStartedInPage") == 1
        assert names.count("TracingStartedInBrowser") == 0
        assert names[0] == "TracingStartedInPage"

    def test_clean_explicit_output(self, config, tmp_path):
        out = tmp_path / "out.json"
        result = runner.invoke(app, [
            "clean", str(SAMPLE_TRACES_DIR / "legacy_array.json"), "-o", str(out),
        ])
        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_clean_strict_fails_without_frames(self, config):
        result = runner.invoke(app, [
            "clean", str(SAMPLE_TRACES_DIR / "no_frames.json"), "--strict",
        ])
        assert result.exit_code == 1
        assert not (config.output_dir / "no_frames.clean.json").exists()

    def test_clean_strict_from_config(self, config):
        """TRACECLEANER_STRICT applies without the --strict flag."""
        config.strict = True
        result = runner.invoke(app, ["clean", str(SAMPLE_TRACES_DIR / "no_frames.json")])
        assert result.exit_code == 1
        assert "Error cleaning trace" in result.output
        assert not (config.output_dir / "no_frames.clean.json").exists()

    def test_clean_malformed_trace(self, config):
        result = runner.invoke(app, ["clean", str(SAMPLE_TRACES_DIR / "not_a_trace.json")])
        assert result.exit_code == 1
        assert "Error loading trace" in result.output

    def test_summary(self, config):
        result = runner.invoke(app, ["summary", str(SAMPLE_TRACES_DIR / "duplicate_markers.json")])
        assert result.exit_code == 0, result.output
        assert "Trace Summary" in result.output
        assert "NEEDS CLEANING" in result.output

    def test_summary_without_frames(self, config):
        result = runner.invoke(app, ["summary", str(SAMPLE_TRACES_DIR / "no_frames.json")])
        assert result.exit_code == 0, result.output
        assert "N/A" in result.output
        assert "None" not in result.output

    def test_validate(self, config):
        result = runner.invoke(app, ["validate", str(SAMPLE_TRACES_DIR / "duplicate_markers.json")])
        assert result.exit_code == 0, result.output
        assert "Validation issues found" in result.output

    def test_config_command(self, config):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0, result.output
        assert "output_dir" in result.output
