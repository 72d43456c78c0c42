"""Tests for the ``canhas url`` command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from canhas.cli import cli


@pytest.fixture
def isolated(cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Run from an empty directory so no canhas.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return cli_runner


class TestUrlCommand:
    def test_all_valid(self, isolated: CliRunner) -> None:
        result = isolated.invoke(cli, ["url", "https://example.com", "http://example.org/a"])
        assert result.exit_code == 0
        assert "OK https://example.com" in result.output
        assert "OK http://example.org/a" in result.output

    def test_invalid_exits_nonzero(self, isolated: CliRunner) -> None:
        result = isolated.invoke(cli, ["url", "https://example.com", "ftp://example.com"])
        assert result.exit_code == 1
        assert "INVALID ftp://example.com is not a valid URL" in result.output

    def test_requires_a_value(self, isolated: CliRunner) -> None:
        result = isolated.invoke(cli, ["url"])
        assert result.exit_code == 2

    def test_json_output(self, isolated: CliRunner) -> None:
        result = isolated.invoke(cli, ["--json", "url", "/relative", "https://example.com"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is False
        assert payload["items"] == [
            {"value": "/relative", "valid": False, "errors": ["is not a valid URL"]},
            {"value": "https://example.com", "valid": True, "errors": []},
        ]

    def test_parser_flag(self, isolated: CliRunner) -> None:
        strict = isolated.invoke(cli, ["url", "http://münchen.de"])
        idna = isolated.invoke(cli, ["--parser", "idna", "url", "http://münchen.de"])
        assert strict.exit_code == 1
        assert idna.exit_code == 0

    def test_unknown_parser(self, isolated: CliRunner) -> None:
        result = isolated.invoke(cli, ["--parser", "nope", "url", "https://example.com"])
        assert result.exit_code == 2
        assert "Unknown URI parser 'nope'" in result.output

    def test_message_from_config(self, isolated: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "canhas.toml").write_text('[messages]\ninvalid_url = "must be a link"\n')
        result = isolated.invoke(cli, ["url", "nope"])
        assert result.exit_code == 1
        assert "must be a link" in result.output
