"""Importing and parsing must not depend on the working directory."""

import importlib
import logging
import sys

import pytest


@pytest.fixture
def fresh_import(monkeypatch):
    """Drop cached fountaintree modules so the next import runs again."""
    cached = [
        name
        for name in sys.modules
        if name == "fountaintree" or name.startswith("fountaintree.")
    ]
    for name in cached:
        monkeypatch.delitem(sys.modules, name)
    return lambda: importlib.import_module("fountaintree")


class TestImportSideEffects:
    """Library use never reads config files or touches logging."""

    @pytest.mark.parametrize(
        "config_text",
        ["log_level: verbose\n", "lookahead: 2\n", "parenthetical_lookahead: [\n"],
    )
    def test_broken_project_config_is_ignored(
        self, tmp_path, monkeypatch, fresh_import, config_text
    ):
        (tmp_path / "fountaintree.yaml").write_text(config_text)
        monkeypatch.chdir(tmp_path)
        root_handlers = logging.getLogger().handlers[:]
        root_level = logging.getLogger().level

        package = fresh_import()
        document = package.parse(
            "\nJOHN\n(this goes on\nand on\nand on\nand on\nstill talking\n"
        )

        assert len(document.errors) == 1
        assert logging.getLogger().handlers == root_handlers
        assert logging.getLogger().level == root_level

    def test_import_leaves_package_logger_alone(self, fresh_import):
        package_logger = logging.getLogger("fountaintree")
        handlers = package_logger.handlers[:]

        fresh_import()

        assert package_logger.handlers == handlers
