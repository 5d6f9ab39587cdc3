"""Tests for the cssdecl CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cssdecl import __version__
from cssdecl.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
EXAMPLE = str(FIXTURES / "example.css")


@pytest.fixture()
def runner(monkeypatch) -> CliRunner:
    for name in (
        "CSSDECL_PLATFORM",
        "CSSDECL_STYLESHEET_DIR",
        "CSSDECL_DEFAULT_EXTENSION",
        "CSSDECL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse" in result.output
        assert "resolve" in result.output
        assert "inspect" in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unknown_platform_rejected(self, runner) -> None:
        result = runner.invoke(cli, ["--platform", "android", "parse", "color: red"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_prints_json(self, runner) -> None:
        result = runner.invoke(cli, ["parse", "color: red; padding: 4px 8px"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["foreground_color"] == {"rgba": [1.0, 0.0, 0.0, 1.0]}
        assert data["padding"] == {"top": 4.0, "start": 8.0, "end": 8.0, "bottom": 4.0}

    def test_platform_option(self, runner) -> None:
        result = runner.invoke(cli, ["--platform", "none", "parse", "color: label"])
        assert result.exit_code == 0
        assert "foreground_color" not in json.loads(result.output)

    def test_platform_from_env(self, runner, monkeypatch) -> None:
        monkeypatch.setenv("CSSDECL_PLATFORM", "uikit")
        result = runner.invoke(cli, ["parse", "color: system-blue"])
        assert result.exit_code == 0
        assert "rgba" in json.loads(result.output)["foreground_color"]

    def test_bad_platform_in_env(self, runner, monkeypatch) -> None:
        monkeypatch.setenv("CSSDECL_PLATFORM", "android")
        result = runner.invoke(cli, ["parse", "color: red"])
        assert result.exit_code == 2
        assert "Unknown platform" in result.output

    def test_bad_log_level_in_env(self, runner, monkeypatch) -> None:
        monkeypatch.setenv("CSSDECL_LOG_LEVEL", "verbose")
        result = runner.invoke(cli, ["parse", "color: red"])
        assert result.exit_code == 2
        assert "Unknown log level 'VERBOSE'" in result.output


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


class TestResolveCommand:
    def test_resolves_classes_in_order(self, runner) -> None:
        result = runner.invoke(cli, ["resolve", EXAMPLE, "card", "card-title"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["foreground_color"] == {"semantic": "label"}
        assert data["margin"] == {"top": 0.0, "start": 0.0, "end": 0.0, "bottom": 10.0}

    def test_raw_output(self, tmp_path, runner) -> None:
        sheet = tmp_path / "s.css"
        sheet.write_text(".a { color: red } .b { color: blue }", encoding="utf-8")
        result = runner.invoke(cli, ["resolve", "--raw", str(sheet), "b", "a"])
        assert result.exit_code == 0
        assert result.output.strip() == "color: blue; color: red"

    def test_unknown_class_warns(self, runner) -> None:
        result = runner.invoke(cli, ["resolve", EXAMPLE, "nope"])
        assert result.exit_code == 0
        assert "no class 'nope'" in result.output

    def test_missing_file(self, runner) -> None:
        result = runner.invoke(cli, ["resolve", "does-not-exist.css", "a"])
        assert result.exit_code == 1
        assert "Could not read stylesheet" in result.output

    def test_name_looked_up_in_stylesheet_dir(self, runner, monkeypatch) -> None:
        monkeypatch.setenv("CSSDECL_STYLESHEET_DIR", str(FIXTURES))
        result = runner.invoke(cli, ["resolve", "--raw", "example", "panel"])
        assert result.exit_code == 0
        assert "border-radius: 16px" in result.output

    def test_extensionless_file_read_as_is(self, tmp_path, runner) -> None:
        sheet = tmp_path / "theme"
        sheet.write_text(".a { color: red }", encoding="utf-8")
        result = runner.invoke(cli, ["resolve", "--raw", str(sheet), "a"])
        assert result.exit_code == 0
        assert result.output.strip() == "color: red"

    def test_requires_a_class(self, runner) -> None:
        result = runner.invoke(cli, ["resolve", EXAMPLE])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_classes(self, runner) -> None:
        result = runner.invoke(cli, ["inspect", EXAMPLE])
        assert result.exit_code == 0
        assert "Classes: 6" in result.output
        assert ".card-title" in result.output
        assert "  font-weight: semibold" in result.output
