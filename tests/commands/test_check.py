"""Tests for the check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl.cli import cli
from tests.conftest import CLR_POST, NO_TITLE_POST, SETUP_POST, write_post


@pytest.mark.usefixtures("_isolated_site")
class TestCheckCommand:
    def test_healthy(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        write_post(site_root, "2021-04-01-setup.md", SETUP_POST)
        result = cli_runner.invoke(cli, ["check", "--strict"])
        assert result.exit_code == 0
        assert "2 posts checked, no issues found." in result.stdout
        assert result.stdout.startswith("my-blog")

    def test_reports_invalid(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        write_post(site_root, "2021-03-05-bad.md", NO_TITLE_POST)
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "_posts/2021-03-05-bad.md" in result.stdout
        assert "MissingRequiredField title" in result.stdout

    def test_strict_exit_code(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-05-bad.md", NO_TITLE_POST)
        result = cli_runner.invoke(cli, ["check", "--strict"])
        assert result.exit_code == 1
        assert "_posts/2021-03-05-bad.md" in result.stdout

    def test_json(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        write_post(site_root, "2021-03-05-bad.md", NO_TITLE_POST)
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["healthy"] is False
        assert data["valid_count"] == 1
        assert data["issues"][0]["code"] == "MissingRequiredField"

    def test_workers_from_config(self, cli_runner: CliRunner, site_root: Path) -> None:
        (site_root / "postctl.toml").write_text("[check]\nworkers = 3\n")
        for day in range(1, 6):
            write_post(site_root, f"2021-03-0{day}-clr.md", CLR_POST)
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["valid_count"] == 5
