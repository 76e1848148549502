"""Tests for the show CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl.cli import cli
from tests.conftest import CLR_POST, NO_TITLE_POST, write_post


@pytest.mark.usefixtures("_isolated_site")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        result = cli_runner.invoke(cli, ["show", "_posts/2021-03-04-clr.md"])
        assert result.exit_code == 0
        assert "Compositional data analysis of microbiome counts" in result.stdout
        assert "library(compositions)" not in result.stdout

    def test_show_body(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        result = cli_runner.invoke(cli, ["show", "2021-03-04-clr.md", "--body"])
        assert result.exit_code == 0
        assert "library(compositions)" in result.stdout

    def test_show_json(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        result = cli_runner.invoke(cli, ["--json", "show", "2021-03-04-clr.md"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["layout"] == "post"
        assert data["author"] == "ap"
        assert data["categories"] == ["microbiome", "R"]
        assert data["featured"] is True
        assert data["hidden"] is False

    def test_invalid_post_fails(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-05-bad.md", NO_TITLE_POST)
        result = cli_runner.invoke(cli, ["show", "2021-03-05-bad.md"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "MissingRequiredField" in result.stderr

    def test_invalid_post_json_error(self, cli_runner: CliRunner, site_root: Path) -> None:
        write_post(site_root, "2021-03-05-bad.md", NO_TITLE_POST)
        result = cli_runner.invoke(cli, ["--json", "show", "2021-03-05-bad.md"])
        assert result.exit_code == 1
        assert '"field": "title"' in result.stderr

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "missing.md"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.stderr
