"""Tests for line predicates and character extraction."""

import pytest

from fountaintree.parser.rules import (
    CharacterCue,
    credit_key,
    is_blank,
    is_centered,
    is_scene_heading,
    is_transition,
    parse_character,
    split_credit,
    strip_centered,
)


class TestParseCharacter:
    """Character line extraction."""

    def test_plain_name(self):
        assert parse_character("JOHN") == CharacterCue(name="JOHN")

    def test_dual_marker_with_extension(self):
        assert parse_character("  JOHN (CONT.) ^ ") == CharacterCue(
            name="JOHN", extensions=["CONT."], is_dual=True
        )

    def test_lowercase_extension_is_part_of_name(self):
        # Extensions must be uppercase, so the name is not uppercase either
        assert parse_character("JOHN (v.o.)") is None

    @pytest.mark.parametrize("line", ["", "   ", "(V.O.)", "^", "John"])
    def test_rejects(self, line):
        assert parse_character(line) is None


class TestPredicates:
    """Small line helpers."""

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank(" \t")
        assert not is_blank(" x ")

    def test_credit_key_requires_colon(self):
        assert credit_key("Draft Date: today") == "Draft Date"
        assert credit_key("Title") is None
        assert credit_key(" Title: indented") is None

    def test_split_credit(self):
        assert split_credit("Source:   ") == ("Source", None)
        assert split_credit("Credit: by: me") == ("Credit", "by: me")

    def test_centered(self):
        assert is_centered("  >INTERMISSION<  ")
        assert not is_centered(">CUT TO:")
        assert strip_centered(" >> INTERMISSION << ") == "INTERMISSION"

    def test_scene_heading_requires_blank_neighbours(self):
        assert is_scene_heading("EXT. BEACH", None, "")
        assert not is_scene_heading("EXT. BEACH", "action", None)
        assert not is_scene_heading("THE BEACH", None, None)

    def test_transition(self):
        assert is_transition("SMASH CUT TO:", "", "")
        assert not is_transition("SMASH CUT TO", "", "")
        assert not is_transition("CUT TO:", "", "more")
