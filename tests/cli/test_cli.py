"""Tests for the fountaintree command line interface."""

import json

import yaml

from fountaintree import __version__
from fountaintree.cli.main import app


class TestParseCommand:
    """fountaintree parse."""

    def test_json_output(self, cli_runner, sample_script_path):
        result = cli_runner.invoke(app, ["parse", str(sample_script_path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["metadata"]["Title"] == "Coffee Break"
        assert [item["type"] for item in data["items"]] == [
            "transition",
            "scene",
            "scene",
        ]
        dialogue = data["items"][1]["content"][1]
        assert dialogue == {
            "type": "dialogue",
            "character": "ALICE",
            "parenthetical": "muttering",
            "text": "This code has to work.",
            "forced": False,
        }
        assert data["errors"] == []

    def test_tree_output(self, cli_runner, sample_script_path):
        result = cli_runner.invoke(app, ["parse", str(sample_script_path)])

        assert result.exit_code == 0
        assert "Coffee Break" in result.stdout
        assert "EXT. COFFEE SHOP - DAY" in result.stdout
        assert "This code has to work." in result.stdout

    def test_reads_stdin(self, cli_runner):
        result = cli_runner.invoke(
            app, ["parse", "-", "--json"], input="\nJOHN\nHello.\n"
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["items"][0]["character"] == "JOHN"

    def test_reports_issues(self, cli_runner, tmp_path):
        path = tmp_path / "unclosed.fountain"
        path.write_text("\nJOHN\n(on\nand on\nand on\nand on\n", encoding="utf-8")

        result = cli_runner.invoke(app, ["parse", str(path)])

        assert result.exit_code == 0
        assert "UnclosedParenthetical" in result.stdout

    def test_missing_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["parse", str(tmp_path / "missing.fountain")])

        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_config_file(self, cli_runner, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text(yaml.safe_dump({"parenthetical_lookahead": 1}))
        path = tmp_path / "wrylie.fountain"
        path.write_text("\nJOHN\n(a\nb)\nHi.\n", encoding="utf-8")

        result = cli_runner.invoke(
            app, ["parse", str(path), "--json", "--config", str(config)]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["errors"] == []
        assert data["items"][0]["parenthetical"] == "a b"


class TestTokensCommand:
    """fountaintree tokens."""

    def test_dumps_tokens(self, cli_runner, sample_script_path):
        result = cli_runner.invoke(app, ["tokens", str(sample_script_path)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["metadata"]["Author"] == "Jane Doe"
        kinds = [token["kind"] for token in data["tokens"]]
        assert kinds[:3] == ["transition", "scene", "action"]
        cue = data["tokens"][3]
        assert cue["kind"] == "character"
        assert cue["extensions"] == ["V.O."]

    def test_missing_file_reports_json_error(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["tokens", str(tmp_path / "nope.fountain")])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["success"] is False

    def test_invalid_config_file(self, cli_runner, tmp_path, sample_script_path):
        config = tmp_path / "config.yaml"
        config.write_text(yaml.safe_dump({"log_level": "verbose"}))

        result = cli_runner.invoke(
            app, ["tokens", str(sample_script_path), "--config", str(config)]
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["success"] is False
        assert "Invalid configuration" in data["error"]

    def test_project_config_in_working_directory(
        self, cli_runner, tmp_path, monkeypatch
    ):
        (tmp_path / "fountaintree.yaml").write_text(
            "parenthetical_lookahead: 1\nlog_level: ERROR\n"
        )
        (tmp_path / "wrylie.fountain").write_text("\nJOHN\n(a\nb\nc)\nHi.\n")
        monkeypatch.chdir(tmp_path)

        result = cli_runner.invoke(app, ["tokens", "wrylie.fountain"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["errors"][0]["message"] == (
            "Parenthetical was not closed within 1 lines."
        )


class TestVersionCommand:
    """fountaintree version."""

    def test_json(self, cli_runner):
        result = cli_runner.invoke(app, ["version", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "name": "fountaintree",
            "version": __version__,
        }
