"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from stylecraft.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Create a stylesheet source with a theme, variables and styles."""
    path = tmp_path / "site.yaml"
    path.write_text(
        """
theme:
  - values:
      light: {text: black}
      dark: {text: white}
vars:
  - values: {space: 1rem}
styles:
  - a: {margin: "var(--space, 1rem)"}
  - b: {padding: "var(--space, 1rem)"}
  - h1: {color: "var(--text)"}
  - h2: {color: "var(--text)"}
"""
    )
    return path


class TestVersion:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "stylecraft" in result.output


class TestBuildCommand:
    """Tests for the build command."""

    def test_build_to_stdout(self, cli_runner, source_file):
        result = cli_runner.invoke(app, ["build", str(source_file)])
        assert result.exit_code == 0
        assert result.output == (
            ":root {\n  --space: 1rem;\n  --text: black;\n}\n\n"
            "@media (prefers-color-scheme: dark) {\n  :root {\n    --text: white;\n  }\n}\n\n"
            "a {\n  margin: var(--space);\n}\n\n"
            "b {\n  padding: var(--space);\n}\n\n"
            "h1, h2 {\n  color: var(--text);\n}\n"
        )

    def test_build_to_file(self, cli_runner, source_file, tmp_path: Path):
        output = tmp_path / "dist" / "site.css"
        result = cli_runner.invoke(app, ["build", str(source_file), "-o", str(output)])
        assert result.exit_code == 0
        assert "Wrote" in result.output
        assert output.read_text().startswith(":root {")

    def test_no_styles(self, cli_runner, source_file):
        result = cli_runner.invoke(app, ["build", str(source_file), "--no-styles"])
        assert result.exit_code == 0
        assert "h1" not in result.output
        assert result.output.startswith(":root {\n  --space: 1rem;\n  --text: black;\n")

    def test_no_dedupe(self, cli_runner, source_file):
        result = cli_runner.invoke(app, ["build", str(source_file), "--no-dedupe"])
        assert result.exit_code == 0
        assert "h1 {\n  color: var(--text);\n}\n\nh2 {" in result.output

    def test_config_file(self, cli_runner, source_file, tmp_path: Path):
        config = tmp_path / "custom.toml"
        config.write_text("[stylecraft]\nhoist_threshold = 10\n")
        result = cli_runner.invoke(app, ["build", str(source_file), "-c", str(config)])
        assert result.exit_code == 0
        assert "margin: var(--space, 1rem);" in result.output

    def test_discovered_config(self, cli_runner, source_file, tmp_path: Path):
        (tmp_path / "stylecraft.toml").write_text("[stylecraft]\ndedupe = false\n")
        result = cli_runner.invoke(app, ["build", str(source_file)])
        assert result.exit_code == 0
        assert "h1, h2" not in result.output

    def test_missing_config(self, cli_runner, source_file, tmp_path: Path):
        result = cli_runner.invoke(
            app, ["build", str(source_file), "-c", str(tmp_path / "nope.toml")]
        )
        assert result.exit_code == 1
        assert "Config not found" in result.output

    def test_missing_source(self, cli_runner, tmp_path: Path):
        result = cli_runner.invoke(app, ["build", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "Error: Source not found" in result.output

    def test_invalid_config(self, cli_runner, source_file, tmp_path: Path):
        config = tmp_path / "bad.toml"
        config.write_text("[stylecraft]\nhoist_threshold = 0\n")
        result = cli_runner.invoke(app, ["build", str(source_file), "-c", str(config)])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestVarsCommand:
    """Tests for the vars command."""

    def test_json(self, cli_runner, source_file):
        result = cli_runner.invoke(app, ["vars", str(source_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "root": {"--space": "1rem"},
            "light": {"--text": "black"},
            "dark": {"--text": "white"},
        }

    def test_table(self, cli_runner, source_file):
        result = cli_runner.invoke(app, ["vars", str(source_file)])
        assert result.exit_code == 0
        assert "Theme variables" in result.output
        assert "--space" in result.output
        assert "3 variable(s) shown" in result.output

    def test_empty(self, cli_runner, tmp_path: Path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        result = cli_runner.invoke(app, ["vars", str(path)])
        assert result.exit_code == 0
        assert "No variables found." in result.output
