"""Pluggy hook specifications for canhas setup-time extensions.

Plugins contribute extra rules (new ``validates()`` keywords) and extra
URI parser names selectable through ``[url] parser``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from canhas.uri.parsers import UriParser
    from canhas.validators.base import EachValidator

hookspec = pluggy.HookspecMarker("canhas")


class CanHasHookSpec:
    """Hook specifications for the canhas plugin system."""

    @hookspec
    def register_rules(self) -> dict[str, type[EachValidator]] | None:
        """Return rule name -> EachValidator subclass mappings."""

    @hookspec
    def register_uri_parsers(self) -> dict[str, type[UriParser]] | None:
        """Return parser name -> UriParser class mappings."""
