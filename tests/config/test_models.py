"""Tests for configuration section models."""

import pytest

from canhas.config.models import MessagesConfig, PluginsConfig, UrlConfig


class TestSectionDefaults:
    def test_url(self) -> None:
        assert UrlConfig().parser == "strict"

    def test_messages(self) -> None:
        messages = MessagesConfig()
        assert messages.invalid_url is None
        assert messages.unchangeable is None

    def test_messages_accept_plugin_kinds(self) -> None:
        messages = MessagesConfig.model_validate({"invalid_slug": "is not a slug"})
        assert messages.model_dump()["invalid_slug"] == "is not a slug"

    def test_plugins(self) -> None:
        assert PluginsConfig().enabled is True

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            UrlConfig().parser = "idna"  # type: ignore[misc]
