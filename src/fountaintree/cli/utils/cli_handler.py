"""Unified CLI handler for standardized error handling and input."""

import json
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from fountaintree.exceptions import FountainTreeError

logger = structlog.get_logger(__name__)

STDIN_PATH = "-"


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Display an error consistently and exit.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use
        """
        logger.debug("Command failed", error=str(error))

        if json_output:
            print(
                json.dumps(
                    {"success": False, "error": str(error), "code": exit_code},
                    indent=2,
                )
            )
        elif isinstance(error, FountainTreeError):
            # Already formatted with hint and details
            self.console.print(f"[red]{escape(str(error))}[/red]")
        else:
            self.console.print(f"[red]Error: {escape(str(error))}[/red]")

        raise typer.Exit(exit_code)

    def read_input(self, source: str) -> tuple[str | None, Path | None]:
        """Resolve a path argument, reading stdin for ``-``.

        Returns:
            Stdin content and None, or None and the file path to read
        """
        if source != STDIN_PATH:
            return None, Path(source)
        if sys.stdin.isatty():
            self.console.print(
                "[red]Error: No input provided on stdin. "
                "Pipe a screenplay or pass a file path[/red]"
            )
            raise typer.Exit(1)
        return sys.stdin.read(), None
