"""Tests for CLI output formatters."""

import json

from canhas.domain.errors import ValidationFailure
from canhas.output.formatters import format_rules, format_url_results


def _failure(**options: object) -> ValidationFailure:
    return ValidationFailure(attribute="value", kind="invalid_url", options=options)


class TestFormatUrlResults:
    def test_human(self) -> None:
        output = format_url_results(
            [("https://example.com", []), ("nope", [_failure()])],
        )
        assert output.splitlines() == [
            "OK https://example.com",
            "INVALID nope is not a valid URL",
        ]

    def test_markup_in_value_is_escaped(self) -> None:
        output = format_url_results([("[bold]x", [_failure()])])
        assert "[bold]x" in output

    def test_catalog_and_custom_message(self) -> None:
        output = format_url_results(
            [("a", [_failure()]), ("b", [_failure(message="custom")])],
            catalog={"invalid_url": "from catalog"},
        )
        assert "INVALID a from catalog" in output
        assert "INVALID b custom" in output

    def test_json(self) -> None:
        payload = json.loads(
            format_url_results([("https://example.com", [])], json_output=True),
        )
        assert payload == {
            "ok": True,
            "items": [{"value": "https://example.com", "valid": True, "errors": []}],
        }


class TestFormatRules:
    def test_human(self) -> None:
        output = format_rules(
            {"url": "UrlValidator"},
            ["idna", "strict"],
            active_parser="idna",
        )
        assert output.splitlines() == [
            "rules:",
            "  url UrlValidator",
            "uri parsers:",
            "  idna (active)",
            "  strict",
        ]

    def test_json(self) -> None:
        payload = json.loads(
            format_rules(
                {"url": "UrlValidator"},
                ["strict"],
                active_parser="strict",
                json_output=True,
            )
        )
        assert payload == {
            "rules": {"url": "UrlValidator"},
            "uri_parsers": ["strict"],
            "active_parser": "strict",
        }
