"""CLI smoke tests."""

from click.testing import CliRunner
from crossplane_docs.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "xrd" in result.output
    assert "composition" in result.output
    assert "generate-config" in result.output


def test_xrd_help_lists_nesting_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["xrd", "--help"])

    assert result.exit_code == 0
    assert "--show-nested / --hide-nested" in result.output
    assert "--output" in result.output
