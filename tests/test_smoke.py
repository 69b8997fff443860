"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from mermaid_bridge.__main__ import main


def test_import():
    import mermaid_bridge

    assert mermaid_bridge.convert is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Mermaid markup" in result.output
    assert "export" in result.output
    assert "import" in result.output
