"""fountaintree CLI commands."""

from .parse import parse_command, tokens_command

__all__ = ["parse_command", "tokens_command"]
