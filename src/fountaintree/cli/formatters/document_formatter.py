"""Render parsed documents for the terminal."""

from __future__ import annotations

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from fountaintree.parser.models import (
    Action,
    Content,
    Dialogue,
    Document,
    SceneBlock,
    Transition,
)


class DocumentFormatter:
    """Format documents and tokenizer output as JSON or a rich tree."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    def to_json(self, data: BaseModel) -> str:
        """Serialize any model to indented JSON."""
        return data.model_dump_json(indent=2)

    def build_tree(self, document: Document, title: str = "Screenplay") -> Tree:
        """Build a rich tree of metadata, scenes and their content."""
        tree = Tree(f"[bold cyan]{escape(title)}[/bold cyan]")

        if document.metadata:
            meta = tree.add("[bold]Metadata[/bold]")
            for key, value in document.metadata.items():
                meta.add(f"{escape(key)}: {escape(value or '-')}")

        for item in document.items:
            if isinstance(item, SceneBlock):
                marker = " [dim](forced)[/dim]" if item.forced else ""
                heading = f"[bold yellow]{escape(item.heading)}[/bold yellow]"
                branch = tree.add(heading + marker)
                for content in item.content:
                    branch.add(self._content_label(content))
            else:
                tree.add(self._content_label(item))

        return tree

    def _content_label(self, content: Content) -> str:
        if isinstance(content, Dialogue):
            speaker = escape(content.character or "?")
            wrylie = (
                f" [italic]({escape(content.parenthetical)})[/italic]"
                if content.parenthetical
                else ""
            )
            return f"[green]{speaker}[/green]{wrylie}: {escape(content.text)}"
        if isinstance(content, Transition):
            return f"[magenta]{escape(content.text)}[/magenta]"
        if isinstance(content, Action):
            prefix = "[dim]centered[/dim] " if content.centered else ""
            return f"{prefix}{escape(content.text)}"
        raise TypeError(f"Unsupported content node: {type(content).__name__}")

    def print_document(self, document: Document, title: str = "Screenplay") -> None:
        """Print the document tree followed by any parse issues."""
        self.console.print(self.build_tree(document, title))
        for issue in document.errors:
            self.console.print(
                f"[yellow]Warning ({issue.kind.value}, line {issue.line}): "
                f"{escape(issue.message)}[/yellow]"
            )
