"""Typed, frozen option models for the built-in rules.

Unknown keys (custom messages and other interpolation values) are kept
verbatim and handed to every failure the rule records.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RuleOptions(BaseModel):
    """Options shared by every rule.

    Attributes:
        message: Replaces the default failure message.
        allow_nil: Skip the rule when the value is ``None``.
        allow_blank: Skip the rule when the value is blank.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    message: str | None = None
    allow_nil: bool = False
    allow_blank: bool = False

    def error_metadata(self) -> dict[str, Any]:
        """Options bag attached to failures; unset optional keys are omitted."""
        return self.model_dump(exclude_none=True)


class UrlOptions(RuleOptions):
    """Options for the ``url`` rule."""


class WriteOnceOptions(RuleOptions):
    """Options for the ``write_once`` rule.

    Attributes:
        ignore_identical: Permit re-assigning the value already persisted.
    """

    ignore_identical: bool = False
