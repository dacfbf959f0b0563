"""Tests for the exception hierarchy."""

import pytest

from fountaintree.exceptions import (
    ConfigurationError,
    FountainTreeError,
    FountainTreeFileNotFoundError,
    ParseError,
    check_config_keys,
)


class TestFountainTreeError:
    """Structured error formatting."""

    def test_message_only(self):
        error = FountainTreeError("Something broke")
        assert str(error) == "Error: Something broke"
        assert error.hint is None
        assert error.details is None

    def test_hint_and_details(self):
        error = FountainTreeError(
            "Bad input",
            hint="Try again",
            details={"file": "a.fountain", "line": 3},
        )
        assert str(error) == (
            "Error: Bad input\nHint: Try again\nDetails:\n"
            "  file: a.fountain\n  line: 3"
        )

    @pytest.mark.parametrize(
        "error_class",
        [ConfigurationError, ParseError, FountainTreeFileNotFoundError],
    )
    def test_subclasses(self, error_class):
        assert issubclass(error_class, FountainTreeError)


class TestCheckConfigKeys:
    """Configuration key validation."""

    def test_valid_keys_pass(self):
        check_config_keys({"log_level": "INFO", "parenthetical_lookahead": 3})

    def test_wrong_key_has_hint(self):
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({"level": "INFO"})
        assert exc_info.value.hint == "Use 'log_level' instead of 'level'"
        assert exc_info.value.details["invalid_key"] == "level"
