"""Tests for the match CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from quantified.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestMatchCommand:
    def test_excluding(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "match", 'Excluding("root")', "root", "alice", "bob"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["matched"] == ["alice", "bob"]
        assert data["rejected"] == ["root"]

    def test_int_payloads(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--payload-type", "int", "match", "Some(3)", "1", "2", "3"]
        )
        assert json.loads(result.stdout)["data"]["matched"] == [3]

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["match", "None", "a"])
        assert result.exit_code == 0
        assert "count: 0" in result.stdout

    def test_invalid_pattern(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["match", "Some()", "a"])
        assert result.exit_code == 1
        assert "Some requires a payload" in result.stderr
