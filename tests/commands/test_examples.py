"""Tests for the --examples flag on every command."""

import pytest
from click.testing import CliRunner

from postctl.cli import cli


@pytest.mark.parametrize("command", ["list", "show", "check", "new"])
def test_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"postctl {command}" in result.output
