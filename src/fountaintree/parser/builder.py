"""Fold a token stream into a :class:`Document`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from fountaintree.parser.models import (
    Action,
    Dialogue,
    Document,
    Item,
    SceneBlock,
    Transition,
)
from fountaintree.parser.tokens import (
    ActionToken,
    CharacterToken,
    DialogueToken,
    ParentheticalToken,
    SceneToken,
    Token,
    TokenizeResult,
    TransitionToken,
)


@dataclass
class BuilderState:
    """Accumulator threaded through one build pass.

    Blank lines do not reset the dialogue context; only a scene heading
    or a new character cue does.
    """

    items: list[Item] = field(default_factory=list)
    current_scene: SceneBlock | None = None
    last_character: str | None = None
    last_parenthetical: str | None = None

    @property
    def target(self) -> list:
        """Container new content is appended to."""
        if self.current_scene is not None:
            return self.current_scene.content
        return self.items


class DocumentBuilder:
    """Resolve scene membership and dialogue attribution for tokens."""

    def build(self, result: TokenizeResult) -> Document:
        """Build a document from tokenizer output.

        Args:
            result: Metadata, tokens and issues from the tokenizer

        Returns:
            The structured document
        """
        state = BuilderState()
        for token in result.tokens:
            self.apply(state, token)
        return Document(
            metadata=dict(result.metadata),
            items=state.items,
            errors=list(result.errors),
        )

    def apply(self, state: BuilderState, token: Token) -> None:
        """Fold a single token into ``state``."""
        if isinstance(token, SceneToken):
            scene = SceneBlock(heading=token.text, forced=token.forced)
            state.items.append(scene)
            state.current_scene = scene
            state.last_character = None
            state.last_parenthetical = None
        elif isinstance(token, CharacterToken):
            state.last_character = token.text
            state.last_parenthetical = None
        elif isinstance(token, ParentheticalToken):
            state.last_parenthetical = token.text
        elif isinstance(token, DialogueToken):
            state.target.append(
                Dialogue(
                    character=state.last_character or "",
                    parenthetical=state.last_parenthetical,
                    text=token.text,
                    forced=token.forced,
                )
            )
            state.last_parenthetical = None
        elif isinstance(token, ActionToken):
            state.target.append(
                Action(text=token.text, forced=token.forced, centered=token.centered)
            )
        elif isinstance(token, TransitionToken):
            state.target.append(Transition(text=token.text, forced=token.forced))
        else:
            assert_never(token)


def build_document(result: TokenizeResult) -> Document:
    """Build a document with a fresh :class:`DocumentBuilder`."""
    return DocumentBuilder().build(result)
