"""Config file discovery.

Looks for ``canhas.toml``, or a ``pyproject.toml`` carrying a
``[tool.canhas]`` table, in the start directory and then each parent.
``CANHAS_CONFIG`` and ``--config`` name a file directly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "canhas.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "CANHAS_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return "canhas" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file at or above *start* (default: cwd).

    ``canhas.toml`` wins over ``pyproject.toml`` in the same directory.
    An unreadable or table-less pyproject is skipped. When CANHAS_CONFIG
    is set it is the only candidate.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for folder in (directory, *directory.parents):
        dedicated = folder / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = folder / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def config_section(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    """The canhas settings inside a parsed file: ``[tool.canhas]`` for pyproject."""
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("canhas", {})
        return section if isinstance(section, dict) else {}
    return data
