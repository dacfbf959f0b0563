"""Token and issue models produced by the line classifier."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class TokenKind(str, Enum):
    """Kinds of lines the classifier recognizes."""

    ACTION = "action"
    SCENE = "scene"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"


class ParseErrorKind(str, Enum):
    """Recoverable classification problems.

    Only ``UNCLOSED_PARENTHETICAL`` is currently reported. The remaining
    members are reserved for stricter validation.
    """

    UNCLOSED_PARENTHETICAL = "UnclosedParenthetical"
    INVALID_CHARACTER_NAME = "InvalidCharacterName"
    INVALID_SCENE_HEADING = "InvalidSceneHeading"
    UNEXPECTED_TOKEN = "UnexpectedToken"


class ParseIssue(BaseModel):
    """A recoverable problem found while classifying lines."""

    kind: ParseErrorKind
    line: int  # 0-based index of the originating line
    message: str
    context: str | None = None


class BaseToken(BaseModel):
    """Fields shared by every token."""

    text: str
    forced: bool = False


class ActionToken(BaseToken):
    """Action or description line."""

    kind: Literal[TokenKind.ACTION] = TokenKind.ACTION
    centered: bool = False


class SceneToken(BaseToken):
    """Scene heading (slugline)."""

    kind: Literal[TokenKind.SCENE] = TokenKind.SCENE


class CharacterToken(BaseToken):
    """Character cue; ``text`` holds the bare name."""

    kind: Literal[TokenKind.CHARACTER] = TokenKind.CHARACTER
    extensions: list[str] = Field(default_factory=list)  # e.g. ["V.O."]
    is_dual: bool = False


class ParentheticalToken(BaseToken):
    """Wrylie attached to the next line of dialogue."""

    kind: Literal[TokenKind.PARENTHETICAL] = TokenKind.PARENTHETICAL


class DialogueToken(BaseToken):
    """Spoken line."""

    kind: Literal[TokenKind.DIALOGUE] = TokenKind.DIALOGUE


class TransitionToken(BaseToken):
    """Transition such as ``CUT TO:``."""

    kind: Literal[TokenKind.TRANSITION] = TokenKind.TRANSITION


Token = Annotated[
    ActionToken
    | SceneToken
    | CharacterToken
    | ParentheticalToken
    | DialogueToken
    | TransitionToken,
    Field(discriminator="kind"),
]


class TokenizeResult(BaseModel):
    """Everything the classifier extracts from one text buffer."""

    metadata: dict[str, str | None] = Field(default_factory=dict)
    tokens: list[Token] = Field(default_factory=list)
    errors: list[ParseIssue] = Field(default_factory=list)
