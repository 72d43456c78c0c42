"""Shared pytest fixtures and test helpers for canhas tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from canhas.uri.parsers import URI_PARSERS
from canhas.validators.registry import RULE_REGISTRY


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host env vars from leaking into settings."""
    for name in ("CANHAS_CONFIG", "CANHAS_URL__PARSER", "CANHAS_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and canhas logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    canhas_logger = logging.getLogger("canhas")
    canhas_level = canhas_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    canhas_logger.setLevel(canhas_level)


@pytest.fixture(autouse=True)
def _restore_registries() -> Generator[None]:
    """Undo plugin registrations made during a test."""
    rules = dict(RULE_REGISTRY)
    parsers = dict(URI_PARSERS)
    yield
    RULE_REGISTRY.clear()
    RULE_REGISTRY.update(rules)
    URI_PARSERS.clear()
    URI_PARSERS.update(parsers)

