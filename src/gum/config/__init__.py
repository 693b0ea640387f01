# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models, sources and the layered loader."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import ConfigLoader, merge_fragments, project_config_path, user_config_path
from .models import (
    DEFAULT_BACH_VERSION,
    DEFAULT_DISCOVERY,
    KNOWN_SOURCE_KINDS,
    KNOWN_TOOLS,
    Config,
    ConfigFragment,
)
from .render import render_config
from .sources import TomlConfigSource

__all__ = [
    "DEFAULT_BACH_VERSION",
    "DEFAULT_DISCOVERY",
    "KNOWN_SOURCE_KINDS",
    "KNOWN_TOOLS",
    "Config",
    "ConfigError",
    "ConfigFragment",
    "ConfigLoader",
    "TomlConfigSource",
    "merge_fragments",
    "project_config_path",
    "render_config",
    "user_config_path",
]
