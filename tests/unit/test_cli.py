"""Tests for tokenwright CLI commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture()
def app():
    """Get the tokenwright typer app."""
    from tokenwright.cli import app

    return app


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A project directory with a scaffolded tokenspec.yaml."""
    from tokenwright.core.tokenspec_loader import scaffold_tokenspec

    scaffold_tokenspec(tmp_path)
    return tmp_path


# =============================================================================
# Global options
# =============================================================================


class TestGlobalOptions:
    def test_version(self, app):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tokenwright version" in result.output

    def test_log_level_from_env(self, monkeypatch):
        from tokenwright.cli.utils import configure_logging

        monkeypatch.setenv("TOKENWRIGHT_LOG_LEVEL", "info")
        with patch("tokenwright.cli.utils.logging.basicConfig") as basic_config:
            configure_logging()
        assert basic_config.call_args.kwargs["level"] == logging.INFO

    def test_verbose_overrides_env(self, monkeypatch):
        from tokenwright.cli.utils import configure_logging

        monkeypatch.setenv("TOKENWRIGHT_LOG_LEVEL", "ERROR")
        with patch("tokenwright.cli.utils.logging.basicConfig") as basic_config:
            configure_logging(verbose=True)
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        from tokenwright.cli.utils import configure_logging

        monkeypatch.setenv("TOKENWRIGHT_LOG_LEVEL", "chatty")
        with patch("tokenwright.cli.utils.logging.basicConfig") as basic_config:
            configure_logging()
        assert basic_config.call_args.kwargs["level"] == logging.WARNING


# =============================================================================
# Project commands
# =============================================================================


class TestInit:
    def test_creates_tokenspec(self, app, tmp_path: Path):
        result = runner.invoke(app, ["init", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert "Created" in result.output
        assert (tmp_path / "tokenspec.yaml").exists()

    def test_existing_requires_force(self, app, project: Path):
        result = runner.invoke(app, ["init", "-p", str(project)])
        assert result.exit_code == 1
        assert "--force" in result.output

        result = runner.invoke(app, ["init", "-p", str(project), "--force"])
        assert result.exit_code == 0


class TestValidate:
    def test_valid(self, app, project: Path):
        result = runner.invoke(app, ["validate", "-p", str(project)])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_errors_exit_1(self, app, tmp_path: Path):
        (tmp_path / "tokenspec.yaml").write_text(
            "groups:\n"
            "  - id: g\n"
            "    name: g\n"
            "    variants:\n"
            "      - id: v\n"
            "        name: v\n"
            "        palette_ref: 'sample:Missing'\n",
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_missing_file(self, app, tmp_path: Path):
        result = runner.invoke(app, ["validate", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Traceback" not in result.output


class TestGenerate:
    def test_css_to_stdout(self, app, project: Path):
        result = runner.invoke(app, ["generate", "-p", str(project)])
        assert result.exit_code == 0
        assert ":root {" in result.output
        assert "--feedback-color-background-success-subtle:" in result.output

    def test_contrast_warnings_reported(self, app, project: Path):
        # darkened hover backgrounds drop below AA against black text
        result = runner.invoke(app, ["generate", "-p", str(project)])
        assert "Contrast" in result.output

    def test_markup_in_names_printed_literally(self, app, tmp_path: Path):
        from tokenwright.core.tokenspec_loader import create_default_tokenspec, save_tokenspec

        spec = create_default_tokenspec()
        group = spec.groups[0].model_copy(update={"name": "fb[/x]"})
        save_tokenspec(tmp_path, spec.model_copy(update={"groups": [group]}))

        result = runner.invoke(app, ["generate", "-p", str(tmp_path)])
        assert result.exit_code == 0
        assert "fb[/x].color.background.success.hover" in result.output

    def test_dtcg_to_file(self, app, project: Path):
        out = project / "build" / "tokens.json"
        result = runner.invoke(app, ["generate", "-p", str(project), "-F", "dtcg", "-o", str(out)])
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["feedback"]["color"]["background"]["success"]["$type"] == "color"
        assert "spacing" in data

    def test_invalid_format(self, app, project: Path):
        result = runner.invoke(app, ["generate", "-p", str(project), "-F", "xml"])
        assert result.exit_code != 0

    def test_invalid_spec_exit_1(self, app, tmp_path: Path):
        (tmp_path / "tokenspec.yaml").write_text("naming:\n  casing: shouty\n", encoding="utf-8")
        result = runner.invoke(app, ["generate", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "Traceback" not in result.output


# =============================================================================
# Color commands
# =============================================================================


class TestColorCommands:
    def test_scale_json(self, app):
        result = runner.invoke(app, ["scale", "#6610F2", "indigo", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "indigo"
        assert data["stops"]["500"] == "#6610F2"
        assert len(data["stops"]) == 11

    def test_scale_table(self, app):
        result = runner.invoke(app, ["scale", "6610f2", "indigo"])
        assert result.exit_code == 0
        assert "950" in result.output

    def test_contrast(self, app):
        result = runner.invoke(app, ["contrast", "#000000", "#FFFFFF"])
        assert result.exit_code == 0
        assert "21.00:1" in result.output
        assert "pass" in result.output

    def test_convert(self, app):
        result = runner.invoke(app, ["convert", "#FF0000"])
        assert result.exit_code == 0
        assert "oklch(0.6280" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["convert", "nothex"],
            ["contrast", "#000000", "#12"],
            ["scale", "#GGGGGG", "bad"],
        ],
    )
    def test_bad_color_exits_cleanly(self, app, args):
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "Invalid hex color" in result.output
        assert "Traceback" not in result.output
