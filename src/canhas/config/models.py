"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, canhas.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from canhas.uri.parsers import DEFAULT_URI_PARSER


class UrlConfig(BaseModel):
    """[url] section."""

    model_config = {"frozen": True}

    parser: str = DEFAULT_URI_PARSER


class MessagesConfig(BaseModel):
    """[messages] section: per-kind message overrides."""

    model_config = {"frozen": True, "extra": "allow"}

    invalid_url: str | None = None
    unchangeable: str | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
