"""Main CLI entry point."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from fountaintree import __version__
from fountaintree.cli.commands import parse_command, tokens_command
from fountaintree.config import FountainTreeSettings, configure_logging

console = Console()

app = typer.Typer(
    name="fountaintree",
    help="Turn Fountain-style screenplay text into a structured document",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def setup_logging() -> None:
    """Turn Fountain-style screenplay text into a structured document."""
    # Environment settings only; commands reconfigure once --config is read
    try:
        configure_logging(FountainTreeSettings())
    except ValidationError as e:
        console.print(
            f"[red]Error: invalid FOUNTAINTREE_* settings\n{escape(str(e))}[/red]"
        )
        raise typer.Exit(1) from e


app.command(name="parse")(parse_command)
app.command(name="tokens")(tokens_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show fountaintree version."""
    version_info = {"name": "fountaintree", "version": __version__}
    if json_output:
        print(json.dumps(version_info, indent=2))
    else:
        console.print(f"[bold cyan]fountaintree[/bold cyan] {__version__}")


def main() -> None:
    """Run the CLI application."""
    app()
