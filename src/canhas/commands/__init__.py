"""Subcommand modules for canhas.

Provides register_commands() which uses deferred imports to keep
``canhas --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from canhas.commands.rules import rules
    from canhas.commands.url import url

    cli.add_command(url)
    cli.add_command(rules)
