"""Validation failure kinds."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Symbolic failure kinds appended by the built-in rules."""

    INVALID_URL = "invalid_url"
    UNCHANGEABLE = "unchangeable"
