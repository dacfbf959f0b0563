"""Structured document model built from the token stream."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from fountaintree.parser.tokens import ParseIssue


class NodeType(str, Enum):
    """Document node types."""

    SCENE = "scene"
    ACTION = "action"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"


class Action(BaseModel):
    """Action or description line."""

    type: Literal[NodeType.ACTION] = NodeType.ACTION
    text: str
    forced: bool = False
    centered: bool = False


class Dialogue(BaseModel):
    """A spoken line with its speaker and optional wrylie."""

    type: Literal[NodeType.DIALOGUE] = NodeType.DIALOGUE
    character: str = ""  # Empty when no cue preceded the line
    parenthetical: str | None = None
    text: str
    forced: bool = False


class Transition(BaseModel):
    """Transition element (CUT TO, FADE OUT, etc.)."""

    type: Literal[NodeType.TRANSITION] = NodeType.TRANSITION
    text: str
    forced: bool = False


Content = Annotated[Action | Dialogue | Transition, Field(discriminator="type")]


class SceneBlock(BaseModel):
    """A scene heading and everything up to the next one."""

    type: Literal[NodeType.SCENE] = NodeType.SCENE
    heading: str
    forced: bool = False
    content: list[Content] = Field(default_factory=list)


Item = Annotated[
    SceneBlock | Action | Dialogue | Transition, Field(discriminator="type")
]


class Document(BaseModel):
    """A parsed screenplay.

    ``items`` holds scene blocks in input order, plus any content that
    appeared before the first scene heading.
    """

    metadata: dict[str, str | None] = Field(default_factory=dict)
    items: list[Item] = Field(default_factory=list)
    errors: list[ParseIssue] = Field(default_factory=list)

    @property
    def scenes(self) -> list[SceneBlock]:
        """Scene blocks only, in order."""
        return [item for item in self.items if isinstance(item, SceneBlock)]
