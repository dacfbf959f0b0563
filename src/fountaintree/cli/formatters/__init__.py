"""Output formatters for the fountaintree CLI."""

from fountaintree.cli.formatters.document_formatter import DocumentFormatter

__all__ = ["DocumentFormatter"]
