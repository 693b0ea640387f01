# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render a resolved configuration back to TOML text for ``gm -gc``."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from typing import Final

from .models import Config

_BARE_KEY: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_-]+$")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _format_string(value: str) -> str:
    return json.dumps(value)


def _format_list(values: Iterable[str]) -> str:
    return "[" + ", ".join(_format_string(value) for value in values) + "]"


def _format_key(key: str) -> str:
    return key if _BARE_KEY.match(key) else _format_string(key)


def _mapping_lines(section: str, mappings: Mapping[str, str]) -> list[str]:
    if not mappings:
        return []
    lines = [f"[{section}.mappings]"]
    lines.extend(f"{_format_key(key)} = {_format_string(value)}" for key, value in sorted(mappings.items()))
    return lines


def render_config(config: Config) -> str:
    """Return ``config`` as a TOML document.

    Args:
        config: Resolved configuration.

    Returns:
        str: TOML text with one table per section, mapping tables included.
    """

    lines = [
        "[general]",
        f"quiet = {_format_bool(config.general.quiet)}",
        f"debug = {_format_bool(config.general.debug)}",
        f"discovery = {_format_list(config.general.discovery)}",
        "",
        "[gradle]",
        f"replace = {_format_bool(config.gradle.replace)}",
        f"defaults = {_format_bool(config.gradle.defaults)}",
        *_mapping_lines("gradle", config.gradle.mappings),
        "",
        "[maven]",
        f"replace = {_format_bool(config.maven.replace)}",
        f"defaults = {_format_bool(config.maven.defaults)}",
        f"mvnd = {_format_bool(config.maven.mvnd)}",
        *_mapping_lines("maven", config.maven.mappings),
        "",
        "[jbang]",
        f"discovery = {_format_list(config.jbang.discovery)}",
        f"launch_files = {_format_bool(config.jbang.launch_files)}",
        f"launch_remote = {_format_bool(config.jbang.launch_remote)}",
        "",
        "[bach]",
        f"version = {_format_string(config.bach.version)}",
    ]
    return "\n".join(lines)


__all__ = ["render_config"]
