"""Rich/JSON output helpers for CLI commands.

Humans get one styled line per item; machines (--json) get a single
JSON document on stdout.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from rich.markup import escape

from canhas.output.console import create_console, get_output, verdict

if TYPE_CHECKING:
    from canhas.domain.errors import ValidationFailure


def format_url_results(
    results: list[tuple[str, list[ValidationFailure]]],
    *,
    json_output: bool = False,
    catalog: dict[str, str] | None = None,
) -> str:
    """Format ``(value, failures)`` pairs from the ``url`` command."""
    if json_output:
        payload = {
            "ok": all(not failures for _, failures in results),
            "items": [
                {
                    "value": value,
                    "valid": not failures,
                    "errors": [f.message(catalog) for f in failures],
                }
                for value, failures in results
            ],
        }
        return _json.dumps(payload, indent=2)

    console = create_console()
    for value, failures in results:
        if failures:
            reasons = "; ".join(f.message(catalog) for f in failures)
            console.print(
                f"{verdict(False)} [canhas.value]{escape(value)}[/] "
                f"[canhas.key]{escape(reasons)}[/]"
            )
        else:
            console.print(f"{verdict(True)} [canhas.value]{escape(value)}[/]")
    return get_output(console).rstrip("\n")


def format_rules(
    rules: dict[str, str],
    parsers: list[str],
    *,
    active_parser: str,
    json_output: bool = False,
) -> str:
    """Format the rule and parser registries for the ``rules`` command."""
    if json_output:
        return _json.dumps(
            {"rules": rules, "uri_parsers": parsers, "active_parser": active_parser},
            indent=2,
        )

    console = create_console()
    console.print("[canhas.key]rules:[/]")
    for name, cls_name in rules.items():
        console.print(f"  [canhas.rule]{name}[/] {cls_name}")
    console.print("[canhas.key]uri parsers:[/]")
    for name in parsers:
        marker = " (active)" if name == active_parser else ""
        console.print(f"  [canhas.rule]{name}[/]{marker}")
    return get_output(console).rstrip("\n")
