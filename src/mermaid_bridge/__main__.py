"""CLI entry point for mermaid-bridge."""

import logging
import sys

import click
from pydantic import ValidationError

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.document import DiagramDocument


def _read(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    try:
        with open(path) as f:
            return f.read()
    except OSError as e:
        click.echo(f"error: cannot read '{path}': {e}", err=True)
        sys.exit(1)


def _write(text: str, path: str | None) -> None:
    if path is None:
        click.echo(text)
        return
    try:
        with open(path, "w") as f:
            f.write(text)
    except OSError as e:
        click.echo(f"error: cannot write '{path}': {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log conversion details to stderr")
def main(verbose: bool) -> None:
    """Convert diagram graphs to Mermaid markup and back."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("export")
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--direction", "-d", "direction", type=str, default=None, help="Flowchart direction (TB, BT, LR, RL)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
def export_cmd(input: str | None, direction: str | None, output: str | None) -> None:
    """Convert a diagram document (JSON) to fenced Mermaid markup."""
    text = _read(input)
    try:
        options = ConvertOptions.from_direction(direction)
        document = DiagramDocument.loads(text)
        markup = document.to_mermaid(options)
    except (ValueError, ValidationError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    _write(markup, output)


@main.command("import")
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
def import_cmd(input: str | None, output: str | None) -> None:
    """Parse Mermaid markup into a diagram document (JSON)."""
    text = _read(input)
    try:
        document = DiagramDocument.from_mermaid(text)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    _write(document.dumps(), output)


if __name__ == "__main__":
    main()
