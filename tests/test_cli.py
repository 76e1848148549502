"""Tests for the root postctl CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl import __version__
from postctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "postctl" in result.output
    for command in ("list", "show", "check", "new"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_site")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_missing_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "list"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


@pytest.mark.usefixtures("_isolated_site")
def test_config_flag(cli_runner: CliRunner, site_root: Path) -> None:
    config = site_root / "alt.toml"
    config.write_text('[posts]\ndir = "drafts"\n')
    (site_root / "drafts").mkdir()
    (site_root / "drafts" / "a.md").write_text("---\nlayout: post\ntitle: Draft\n---\n")
    result = cli_runner.invoke(cli, ["-q", "-c", str(config), "list"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "drafts/a.md"
