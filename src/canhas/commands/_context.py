"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Plugins are loaded lazily on first use so ``--help``
and ``--version`` never touch entry points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from canhas.config.settings import CanHasSettings
    from canhas.uri.parsers import UriParser


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CanHasSettings) -> None:
        self.settings = settings
        self._plugins_loaded = False

        from canhas.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def load_plugins(self) -> list[str]:
        """Load entry-point plugins once, if enabled in ``[plugins]``."""
        if self._plugins_loaded or not self.settings.plugins.enabled:
            return []
        from canhas.plugins.manager import PluginManager

        self._plugins_loaded = True
        return PluginManager().discover_and_load()

    def uri_parser(self) -> UriParser:
        """The configured parser; unknown names become a usage error."""
        self.load_plugins()
        try:
            return self.settings.uri_parser()
        except KeyError as exc:
            msg = f"Unknown URI parser {self.settings.url.parser!r}"
            raise click.UsageError(msg) from exc

    def emit(self, output: str, *, ok: bool = True) -> None:
        """Write *output* to stdout; exit with code 1 when not *ok*."""
        click.echo(output)
        if not ok:
            raise SystemExit(1)
