"""JSON config helpers for exclude patterns and output preferences.

Reads per-user defaults from the platform config directory and per-project
settings from ``.includepaths.json`` in the analysis root. Malformed or
missing config falls back to an empty config.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "includepaths"
CONFIG_FILENAME = "config.json"
PROJECT_CONFIG_FILENAME = ".includepaths.json"
USER_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config(path: Path) -> dict[str, object]:
    """Load a JSON config object from ``path``.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_user_config() -> dict[str, object]:
    return load_config(USER_CONFIG_PATH)


def project_config_path(root: Path) -> Path:
    return root / PROJECT_CONFIG_FILENAME


def exclude_paths_from(config: dict[str, object]) -> list[str]:
    """Return the ``exclude_paths`` list, dropping non-string and blank items."""
    value = config.get("exclude_paths")
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def load_color_preference(config: dict[str, object]) -> bool:
    """Return the ``color`` preference; only explicit booleans are honored."""
    value = config.get("color")
    return value if isinstance(value, bool) else True


def merge_excludes(*groups: Iterable[str]) -> list[str]:
    """Concatenate pattern groups, dropping duplicates but keeping first-seen order."""
    seen: set[str] = set()
    merged: list[str] = []
    for group in groups:
        for pattern in group:
            if pattern in seen:
                continue
            seen.add(pattern)
            merged.append(pattern)
    return merged


def resolve_excludes(
    root: Path,
    cli_excludes: Iterable[str] = (),
    config_path: Path | None = None,
) -> list[str]:
    """Combine user, project and command-line exclude patterns for ``root``."""
    project_path = config_path if config_path is not None else project_config_path(root)
    return merge_excludes(
        exclude_paths_from(load_user_config()),
        exclude_paths_from(load_config(project_path)),
        cli_excludes,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "PROJECT_CONFIG_FILENAME",
    "USER_CONFIG_PATH",
    "load_config",
    "load_user_config",
    "project_config_path",
    "exclude_paths_from",
    "load_color_preference",
    "merge_excludes",
    "resolve_excludes",
]
