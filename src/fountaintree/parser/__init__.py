"""Fountain-style screenplay tokenizer and document builder."""

from __future__ import annotations

from .builder import BuilderState, DocumentBuilder, build_document
from .fountain_parser import FountainParser
from .models import Action, Dialogue, Document, NodeType, SceneBlock, Transition
from .rules import METADATA_KEYS, SCENE_TAGS, CharacterCue, parse_character
from .tokenizer import Tokenizer, tokenize
from .tokens import (
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

__all__ = [
    "METADATA_KEYS",
    "SCENE_TAGS",
    "Action",
    "ActionToken",
    "BuilderState",
    "CharacterCue",
    "CharacterToken",
    "Dialogue",
    "DialogueToken",
    "Document",
    "DocumentBuilder",
    "FountainParser",
    "NodeType",
    "ParentheticalToken",
    "ParseErrorKind",
    "ParseIssue",
    "SceneBlock",
    "SceneToken",
    "Token",
    "TokenKind",
    "TokenizeResult",
    "Tokenizer",
    "TransitionToken",
    "build_document",
    "parse_character",
    "tokenize",
]
