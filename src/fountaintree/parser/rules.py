"""Line-level predicates and extraction helpers used by the tokenizer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Title page keys, matched case-sensitively and followed by ':'
METADATA_KEYS = ("Title", "Credit", "Author", "Draft Date", "Source")

SCENE_TAGS = (
    "INT./EXT.",
    "EXT./INT.",
    "INT./EXT",
    "INT/EXT",
    "E./I.",
    "I./E.",
    "I/E",
    "E/I",
    "INT",
    "EXT",
    "EST",
)

# A trailing character extension such as (V.O.) or (ON SCREEN)
EXTENSION_PATTERN = re.compile(r"\(([A-Z.\s]+)\)$")
CENTERED_MARKERS = re.compile(r"^>+|<+$")
WHITESPACE = re.compile(r"\s+")


@dataclass
class CharacterCue:
    """Result of character line extraction."""

    name: str
    extensions: list[str] = field(default_factory=list)
    is_dual: bool = False


def is_blank(line: str | None) -> bool:
    """Return True for a missing line or one holding only whitespace."""
    return line is None or not line.strip()


def credit_key(line: str) -> str | None:
    """Return the title page key a line starts with, if any."""
    for key in METADATA_KEYS:
        if line.startswith(f"{key}:"):
            return key
    return None


def split_credit(line: str) -> tuple[str, str | None]:
    """Split a credit line on its first colon.

    Returns:
        The trimmed key and the trimmed value, or None when the value is empty.
    """
    key, _, value = line.partition(":")
    return key.strip(), value.strip() or None


def is_centered(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith(">") and stripped.endswith("<")


def strip_centered(line: str) -> str:
    """Remove every leading '>' and trailing '<' from a centered line."""
    return CENTERED_MARKERS.sub("", line.strip()).strip()


def is_scene_heading(line: str, prev: str | None, next_line: str | None) -> bool:
    """A scene tag prefix on a line isolated by blank lines."""
    return line.startswith(SCENE_TAGS) and is_blank(prev) and is_blank(next_line)


def is_transition(line: str, prev: str | None, next_line: str | None) -> bool:
    """An all-caps line ending in ':' or '.' isolated by blank lines."""
    stripped = line.strip()
    return (
        line == line.upper()
        and stripped.endswith((":", "."))
        and is_blank(prev)
        and is_blank(next_line)
    )


def parse_character(line: str) -> CharacterCue | None:
    """Extract a character cue from a line.

    Strips a trailing dual dialogue marker (``^``) and any number of
    trailing ``(EXTENSION)`` groups. The remaining name must be non-empty
    and already uppercase.

    Args:
        line: Raw line text

    Returns:
        The parsed cue, or None if the line is not a character cue.
    """
    text = line.strip()
    is_dual = text.endswith("^")
    if is_dual:
        text = text[:-1].strip()

    extensions: list[str] = []
    while match := EXTENSION_PATTERN.search(text):
        extension = WHITESPACE.sub(" ", match.group(1)).strip()
        if extension:
            extensions.insert(0, extension)
        text = text[: match.start()].strip()

    if not text or text != text.upper():
        return None

    return CharacterCue(name=text, extensions=extensions, is_dual=is_dual)
