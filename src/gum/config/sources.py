# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""TOML configuration sources."""

from __future__ import annotations

import copy
import tomllib
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..errors import ConfigError
from .models import ConfigFragment

PROJECT_CONFIG_NAME: Final[str] = ".gm.toml"
USER_CONFIG_NAME: Final[str] = ".gm.toml"
WINDOWS_USER_CONFIG_DIR: Final[str] = "Gum"
WINDOWS_USER_CONFIG_NAME: Final[str] = "gm.toml"

_TOML_CACHE: dict[tuple[Path, int], Mapping[str, Any]] = {}


class TomlConfigSource:
    """Load one ``gm.toml`` document, returning an empty fragment when it is absent."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Mapping[str, Any]:
        if not self.path.is_file():
            return {}
        resolved = self.path.resolve()
        cache_key = (resolved, resolved.stat().st_mtime_ns)
        if cached := _TOML_CACHE.get(cache_key):
            return copy.deepcopy(cached)
        try:
            with resolved.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self.path} must be a table")
        _TOML_CACHE[cache_key] = copy.deepcopy(data)
        return data

    def load_fragment(self) -> ConfigFragment:
        """Return the document validated as a :class:`ConfigFragment`.

        Returns:
            ConfigFragment: Parsed settings; every field unset when the file is missing.

        Raises:
            ConfigError: If the document is not valid TOML or carries values of
                the wrong type.
        """

        data = self.load()
        try:
            return ConfigFragment.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {self.path}: {exc}") from exc


__all__ = [
    "PROJECT_CONFIG_NAME",
    "USER_CONFIG_NAME",
    "WINDOWS_USER_CONFIG_DIR",
    "WINDOWS_USER_CONFIG_NAME",
    "TomlConfigSource",
]
