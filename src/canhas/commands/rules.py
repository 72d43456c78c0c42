"""Command: list registered rules and URI parsers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from canhas.commands._context import AppContext


@click.command()
@click.pass_obj
def rules(app: AppContext) -> None:
    """List validation rules and URI parsers, including plugin ones."""
    from canhas.output.formatters import format_rules
    from canhas.uri.parsers import URI_PARSERS
    from canhas.validators.registry import RULE_REGISTRY

    app.load_plugins()
    output = format_rules(
        {name: cls.__name__ for name, cls in sorted(RULE_REGISTRY.items())},
        sorted(URI_PARSERS),
        active_parser=app.settings.url.parser,
        json_output=app.settings.json_output,
    )
    app.emit(output)
