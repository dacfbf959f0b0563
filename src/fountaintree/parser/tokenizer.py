"""Line classifier turning Fountain-style text into a token stream.

Each line is classified by an ordered table of rules. A rule sees the
line, its raw neighbours and the running classifier state, and either
declines or consumes one or more lines. Explicit sigils come first so
they always win over the heuristics further down the table.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from fountaintree.parser.rules import (
    credit_key,
    is_blank,
    is_centered,
    is_scene_heading,
    is_transition,
    parse_character,
    split_credit,
    strip_centered,
)
from fountaintree.parser.tokens import (
    ActionToken,
    CharacterToken,
    DialogueToken,
    ParentheticalToken,
    ParseErrorKind,
    ParseIssue,
    SceneToken,
    Token,
    TokenizeResult,
    TokenKind,
    TransitionToken,
)

logger = structlog.get_logger(__name__)

DEFAULT_PARENTHETICAL_LOOKAHEAD = 3


@dataclass(frozen=True)
class LineContext:
    """A line together with its raw neighbours."""

    index: int
    line: str
    prev: str | None
    next: str | None

    @property
    def stripped(self) -> str:
        return self.line.strip()


@dataclass
class ClassifierState:
    """Accumulator threaded through one tokenizer pass."""

    prev_kind: TokenKind | None = None
    metadata: dict[str, str | None] = field(default_factory=dict)
    tokens: list[Token] = field(default_factory=list)
    errors: list[ParseIssue] = field(default_factory=list)

    def emit(self, token: Token) -> None:
        self.tokens.append(token)
        self.prev_kind = token.kind


# A rule returns the number of lines it consumed, or None to decline
Rule = Callable[[LineContext, list[str], ClassifierState], int | None]


class Tokenizer:
    """Classify screenplay lines into tokens, metadata and issues."""

    def __init__(
        self, max_parenthetical_lines: int = DEFAULT_PARENTHETICAL_LOOKAHEAD
    ) -> None:
        """Initialize the tokenizer.

        Args:
            max_parenthetical_lines: Continuation lines scanned for the
                closing ``)`` of a multi-line parenthetical
        """
        if max_parenthetical_lines < 1:
            raise ValueError("max_parenthetical_lines must be at least 1")
        self.max_parenthetical_lines = max_parenthetical_lines
        self.rules: tuple[Rule, ...] = (
            self._credit,
            self._forced_action,
            self._forced_transition,
            self._forced_character,
            self._forced_scene,
            self._scene_heading,
            self._transition,
            self._character,
            self._parenthetical,
            self._dialogue,
            self._centered_action,
            self._action,
        )

    def tokenize(self, text: str) -> TokenizeResult:
        """Classify every line of ``text``.

        Args:
            text: Complete screenplay source

        Returns:
            Metadata, tokens and recoverable issues in input order
        """
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        state = ClassifierState()

        index = 0
        while index < len(lines):
            line = lines[index]
            if is_blank(line):
                state.prev_kind = None
                index += 1
                continue

            ctx = LineContext(
                index=index,
                line=line,
                prev=lines[index - 1] if index > 0 else None,
                next=lines[index + 1] if index + 1 < len(lines) else None,
            )
            index += self._classify(ctx, lines, state)

        return TokenizeResult(
            metadata=state.metadata, tokens=state.tokens, errors=state.errors
        )

    def _classify(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int:
        for rule in self.rules:
            consumed = rule(ctx, lines, state)
            if consumed is not None:
                return consumed
        # The fallback action rule accepts every non-blank line
        raise AssertionError(f"No rule matched line {ctx.index}")

    def _credit(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if credit_key(ctx.line) is None:
            return None
        key, value = split_credit(ctx.line)
        state.metadata[key] = value
        return 1

    def _forced_action(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not ctx.stripped.startswith("!"):
            return None
        state.emit(ActionToken(text=ctx.stripped[1:].strip(), forced=True))
        return 1

    def _forced_transition(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not ctx.stripped.startswith(">") or is_centered(ctx.line):
            return None
        state.emit(TransitionToken(text=ctx.stripped[1:].strip(), forced=True))
        return 1

    def _forced_character(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not ctx.line.startswith("@"):
            return None
        state.emit(CharacterToken(text=ctx.line[1:].strip(), forced=True))
        return 1

    def _forced_scene(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not ctx.stripped.startswith("."):
            return None
        state.emit(SceneToken(text=ctx.stripped[1:].strip(), forced=True))
        return 1

    def _scene_heading(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not is_scene_heading(ctx.line, ctx.prev, ctx.next):
            return None
        state.emit(SceneToken(text=ctx.line))
        return 1

    def _transition(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not is_transition(ctx.line, ctx.prev, ctx.next):
            return None
        state.emit(TransitionToken(text=ctx.line))
        return 1

    def _character(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        # Runs before the centered rule, so an all-caps >TEXT< after a
        # blank line is read as a cue
        if not is_blank(ctx.prev):
            return None
        cue = parse_character(ctx.line)
        if cue is None:
            return None
        state.emit(
            CharacterToken(
                text=cue.name, extensions=cue.extensions, is_dual=cue.is_dual
            )
        )
        return 1

    def _parenthetical(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not ctx.stripped.startswith("(") or state.prev_kind not in (
            TokenKind.CHARACTER,
            TokenKind.DIALOGUE,
        ):
            return None

        if ctx.stripped.endswith(")"):
            state.emit(ParentheticalToken(text=ctx.stripped[1:-1].strip()))
            return 1

        if is_blank(ctx.next):
            # A lone unterminated wrylie reads as dialogue
            state.emit(DialogueToken(text=ctx.stripped[1:].strip()))
            return 1

        return self._multiline_parenthetical(ctx, lines, state)

    def _multiline_parenthetical(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int:
        buffer = ctx.stripped
        consumed = 0
        closed = False
        window = lines[ctx.index + 1 : ctx.index + 1 + self.max_parenthetical_lines]
        for follower in window:
            if is_blank(follower):
                break
            buffer += " " + follower.strip()
            consumed += 1
            if follower.strip().endswith(")"):
                closed = True
                break

        if closed:
            state.emit(ParentheticalToken(text=buffer[1:-1].strip()))
            return 1 + consumed

        # Unclosed: keep the previous kind and re-read the scanned lines
        message = (
            "Parenthetical was not closed within "
            f"{self.max_parenthetical_lines} lines."
        )
        logger.warning(
            "Unclosed parenthetical",
            line=ctx.index,
            continuation_lines=consumed,
        )
        state.errors.append(
            ParseIssue(
                kind=ParseErrorKind.UNCLOSED_PARENTHETICAL,
                line=ctx.index,
                message=message,
                context=buffer,
            )
        )
        state.tokens.append(ParentheticalToken(text=buffer.strip()))
        return 1

    def _dialogue(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if state.prev_kind not in (TokenKind.CHARACTER, TokenKind.PARENTHETICAL):
            return None
        state.emit(DialogueToken(text=ctx.stripped))
        return 1

    def _centered_action(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        if not is_centered(ctx.line):
            return None
        state.emit(ActionToken(text=strip_centered(ctx.line), centered=True))
        return 1

    def _action(
        self, ctx: LineContext, lines: list[str], state: ClassifierState
    ) -> int | None:
        state.emit(ActionToken(text=ctx.line))
        return 1


def tokenize(
    text: str, max_parenthetical_lines: int = DEFAULT_PARENTHETICAL_LOOKAHEAD
) -> TokenizeResult:
    """Classify ``text`` with a default-configured :class:`Tokenizer`."""
    return Tokenizer(max_parenthetical_lines=max_parenthetical_lines).tokenize(text)
