"""Fountain-style screenplay parser: tokenizer plus document builder."""

from __future__ import annotations

from pathlib import Path

import structlog

from fountaintree.config.settings import FountainTreeSettings, get_settings
from fountaintree.exceptions import FountainTreeFileNotFoundError, ParseError
from fountaintree.parser.builder import DocumentBuilder
from fountaintree.parser.models import Document
from fountaintree.parser.tokenizer import Tokenizer
from fountaintree.parser.tokens import TokenizeResult

logger = structlog.get_logger(__name__)


class FountainParser:
    """Parse Fountain-style screenplay text into a :class:`Document`."""

    def __init__(self, settings: FountainTreeSettings | None = None) -> None:
        """Initialize the parser.

        Args:
            settings: Configuration; the global settings are used if omitted
        """
        self.settings = settings or get_settings()
        self.tokenizer = Tokenizer(
            max_parenthetical_lines=self.settings.parenthetical_lookahead
        )
        self.builder = DocumentBuilder()

    def tokenize(self, content: str) -> TokenizeResult:
        """Run only the line classifier over ``content``."""
        return self.tokenizer.tokenize(content)

    def parse(self, content: str) -> Document:
        """Parse screenplay text.

        Malformed input never raises; recoverable problems are reported
        in ``Document.errors``.

        Args:
            content: Raw screenplay text

        Returns:
            Parsed document
        """
        result = self.tokenizer.tokenize(content)
        document = self.builder.build(result)
        logger.debug(
            "Parsed screenplay",
            tokens=len(result.tokens),
            scenes=len(document.scenes),
            issues=len(result.errors),
        )
        return document

    def read_file(self, file_path: Path | str) -> str:
        """Read a UTF-8 screenplay file.

        Args:
            file_path: Path to the screenplay

        Returns:
            File contents

        Raises:
            FountainTreeFileNotFoundError: If the file does not exist
            ParseError: If the file cannot be read or decoded
        """
        path = Path(file_path)
        if not path.is_file():
            raise FountainTreeFileNotFoundError(
                message=f"File not found: {path}",
                hint="Check the path and try again.",
                details={"file": str(path)},
            )
        logger.debug(f"Reading screenplay file: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read screenplay file: {e}")
            raise ParseError(
                message=f"Failed to read screenplay file: {path}",
                hint="Make sure the file is readable UTF-8 text.",
                details={"file": str(path), "reader_error": str(e)},
            ) from e

    def parse_file(self, file_path: Path | str) -> Document:
        """Read and parse a screenplay file."""
        return self.parse(self.read_file(file_path))
