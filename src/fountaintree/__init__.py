"""fountaintree: Fountain-style screenplay text to a structured document.

A line classifier turns raw screenplay text into typed tokens and title
page metadata; a document builder folds those tokens into scene blocks
of action, dialogue and transitions.
"""

from .config import FountainTreeSettings, get_settings, load_settings
from .exceptions import FountainTreeError
from .parser import (
    Document,
    DocumentBuilder,
    FountainParser,
    Tokenizer,
    TokenizeResult,
    build_document,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentBuilder",
    "FountainParser",
    "FountainTreeError",
    "FountainTreeSettings",
    "Tokenizer",
    "TokenizeResult",
    "__version__",
    "build_document",
    "get_settings",
    "load_settings",
    "parse",
    "tokenize",
]


def parse(content: str) -> Document:
    """Parse screenplay text with the default parenthetical lookahead."""
    return build_document(tokenize(content))
