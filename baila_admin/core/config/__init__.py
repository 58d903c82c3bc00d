# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for Baila Admin.

- Settings: Pydantic-based settings loaded from environment variables
- YAML loader: Utilities for loading YAML configuration files

Example:
    >>> from baila_admin.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from baila_admin.core.config.settings import (
    AdminSettings,
    APISettings,
    CORSSettings,
    DatabaseSettings,
    EnrollmentSettings,
    JWTSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from baila_admin.core.config.yaml_loader import (
    YAMLLoadError,
    deep_merge,
    load_yaml,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "DatabaseSettings",
    "JWTSettings",
    "AdminSettings",
    "EnrollmentSettings",
    "CORSSettings",
    "APISettings",
    # YAML utilities
    "load_yaml",
    "deep_merge",
    "YAMLLoadError",
]
