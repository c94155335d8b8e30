"""Tests for the StockQuest command-line interface.

**Feature: stockquest**
"""

import click
import pytest
from click.testing import CliRunner

from stockquest.cli import cli
from stockquest.cli.play import parse_order, parse_ticks


@pytest.fixture
def runner():
    return CliRunner()


class TestCommands:
    """Top-level commands run and render their views."""

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("play", "market", "achievements", "config"):
            assert name in result.output

    def test_market(self, runner):
        result = runner.invoke(cli, ["market", "-n", "3", "-s", "1"])

        assert result.exit_code == 0
        assert "NOVA" in result.output
        assert "After 3 tick(s)" in result.output

    def test_achievements(self, runner):
        result = runner.invoke(cli, ["achievements"])

        assert result.exit_code == 0
        assert "First Trade" in result.output
        assert "Diversified" in result.output

    def test_config_defaults(self, runner, tmp_path):
        result = runner.invoke(cli, ["config", "-c", str(tmp_path / "none.toml")])

        assert result.exit_code == 0
        assert "built-in defaults" in result.output
        assert "$10,000.00" in result.output

    def test_config_error_exits(self, runner, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[session]\ninitial_capital = -1\n")

        result = runner.invoke(cli, ["config", "-c", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestPlay:
    """The interactive session handles trading commands."""

    def _play(self, runner, tmp_path, commands: str):
        return runner.invoke(
            cli,
            ["play", "-s", "1", "-i", "3600", "-c", str(tmp_path / "none.toml")],
            input=commands,
        )

    def test_buy_and_quit(self, runner, tmp_path):
        result = self._play(runner, tmp_path, "buy nova 1\nportfolio\nquit\n")

        assert result.exit_code == 0
        assert "Successfully bought 1 shares of NOVA!" in result.output
        assert "Achievement unlocked: First Trade" in result.output
        assert "Session ended." in result.output

    def test_rejections_are_shown(self, runner, tmp_path):
        result = self._play(runner, tmp_path, "sell NOVA 1\nbuy NOVA 100000\nbuy NOVA x\nfly\nquit\n")

        assert result.exit_code == 0
        assert "Insufficient shares to sell!" in result.output
        assert "Insufficient funds!" in result.output
        assert "Quantity must be a whole number" in result.output
        assert "Unknown command 'fly'" in result.output

    def test_end_of_input_ends_session(self, runner, tmp_path):
        result = self._play(runner, tmp_path, "tick 3\nhistory\n")

        assert result.exit_code == 0
        assert "Market advanced 3 tick(s)." in result.output
        assert "Session ended." in result.output


class TestParsing:
    """Order and tick arguments are validated before reaching the session."""

    def test_parse_order(self):
        assert parse_order(["nova", "5"]) == ("NOVA", 5)

    @pytest.mark.parametrize("args", [[], ["NOVA"], ["NOVA", "five"]])
    def test_parse_order_errors(self, args):
        with pytest.raises(click.UsageError):
            parse_order(args)

    def test_parse_ticks(self):
        assert parse_ticks([]) == 1
        assert parse_ticks(["4"]) == 4
        with pytest.raises(click.UsageError):
            parse_ticks(["-1"])
