# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML configuration file loader utilities.

Used for the per-term price tables in config/pricing.yaml.

Example:
    >>> from pathlib import Path
    >>> from baila_admin.core.config.yaml_loader import load_yaml
    >>> tables = load_yaml(Path("config/pricing.yaml"))
"""

from pathlib import Path
from typing import Any

import yaml


class YAMLLoadError(Exception):
    """Raised when a YAML file cannot be loaded or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize YAMLLoadError.

        Args:
            path: Path to the YAML file that failed to load.
            reason: Description of why the file failed to load.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from disk.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed mapping. Empty dict for an empty file.

    Raises:
        YAMLLoadError: If the file is missing, unreadable, not valid YAML,
            or its root is not a mapping.
    """
    if not path.is_file():
        raise YAMLLoadError(path, "File does not exist")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise YAMLLoadError(path, f"Cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        raise YAMLLoadError(
            path, f"YAML root must be a mapping, got {type(parsed).__name__}"
        )

    return parsed


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into dicts.

    Example:
        >>> deep_merge({"KATY": {"Monday": 0, "both": 450}}, {"KATY": {"Monday": 200}})
        {'KATY': {'Monday': 200, 'both': 450}}
    """
    result: dict[str, Any] = base.copy()

    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
