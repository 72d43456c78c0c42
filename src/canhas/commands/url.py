"""Command: check values with the URL rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from canhas.commands._context import AppContext


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def url(app: AppContext, values: tuple[str, ...]) -> None:
    """Check that each VALUE is an absolute http/https URL.

    Exits with status 1 if any value is rejected.
    """
    from canhas.domain.record import TrackedRecord
    from canhas.output.formatters import format_url_results
    from canhas.validators.url import UrlValidator

    validator = UrlValidator(["value"], uri_parser=app.uri_parser())
    results = []
    for value in values:
        record = TrackedRecord({"value": value})
        validator.validate(record)
        results.append((value, record.errors.on("value")))

    output = format_url_results(
        results,
        json_output=app.settings.json_output,
        catalog=app.settings.message_catalog(),
    )
    app.emit(output, ok=all(not failures for _, failures in results))
