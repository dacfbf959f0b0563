"""Parse and tokenize commands."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from fountaintree.cli.formatters import DocumentFormatter
from fountaintree.cli.utils.cli_handler import CLIHandler
from fountaintree.config import configure_logging, load_settings
from fountaintree.parser import FountainParser

console = Console()

SourceArgument = Annotated[
    str,
    typer.Argument(help="Screenplay file to read, or '-' for stdin"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file (YAML, TOML, or JSON)",
    ),
]


def _load(
    source: str, config: Path | None, handler: CLIHandler
) -> tuple[FountainParser, str, Path | None]:
    settings = load_settings(config)
    configure_logging(settings)
    parser = FountainParser(settings)
    content, path = handler.read_input(source)
    if content is None and path is not None:
        content = parser.read_file(path)
    return parser, content or "", path


def parse_command(
    source: SourceArgument,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the document as JSON")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Parse a screenplay into scenes, dialogue, action and transitions."""
    handler = CLIHandler(console)
    formatter = DocumentFormatter(console)

    try:
        parser, content, path = _load(source, config, handler)
        document = parser.parse(content)
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)
        return

    if json_output:
        # Plain print keeps the JSON free of console markup
        print(formatter.to_json(document))
    else:
        title = document.metadata.get("Title") or (path.name if path else "stdin")
        formatter.print_document(document, title=title)


def tokens_command(
    source: SourceArgument,
    config: ConfigOption = None,
) -> None:
    """Dump the line classifier output (metadata, tokens, issues) as JSON."""
    handler = CLIHandler(console)
    formatter = DocumentFormatter(console)

    try:
        parser, content, _ = _load(source, config, handler)
        result = parser.tokenize(content)
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output=True)
        return

    print(formatter.to_json(result))
