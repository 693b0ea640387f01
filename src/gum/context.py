# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Operating-system facts consulted by every locator and resolver."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Final

WINDOWS_OS_NAME: Final[str] = "nt"
WINDOWS_PATH_VARIABLE: Final[str] = "Path"
POSIX_PATH_VARIABLE: Final[str] = "PATH"
WINDOWS_HOME_VARIABLE: Final[str] = "APPDATA"
POSIX_HOME_VARIABLE: Final[str] = "HOME"
WINDOWS_PATH_SEPARATOR: Final[str] = ";"
POSIX_PATH_SEPARATOR: Final[str] = ":"


def _is_windows() -> bool:
    return os.name == WINDOWS_OS_NAME


def paths_from_env(env: Mapping[str, str] | None = None, *, windows: bool | None = None) -> tuple[Path, ...]:
    """Return the directories listed in the platform's ``PATH`` variable.

    Args:
        env: Environment mapping to read, ``os.environ`` when omitted.
        windows: Platform override; detected from ``os.name`` when omitted.

    Returns:
        tuple[Path, ...]: Non-empty ``PATH`` entries in declaration order.
    """

    source = os.environ if env is None else env
    on_windows = _is_windows() if windows is None else windows
    raw = source.get(WINDOWS_PATH_VARIABLE if on_windows else POSIX_PATH_VARIABLE, "")
    separator = WINDOWS_PATH_SEPARATOR if on_windows else POSIX_PATH_SEPARATOR
    return tuple(Path(entry) for entry in raw.split(separator) if entry)


def home_from_env(env: Mapping[str, str] | None = None, *, windows: bool | None = None) -> Path:
    """Return the directory holding user-level configuration.

    ``APPDATA`` is used on Windows and ``HOME`` elsewhere; both fall back to
    :meth:`pathlib.Path.home` when unset.
    """

    source = os.environ if env is None else env
    on_windows = _is_windows() if windows is None else windows
    value = source.get(WINDOWS_HOME_VARIABLE if on_windows else POSIX_HOME_VARIABLE)
    return Path(value) if value else Path.home()


@dataclass(frozen=True, slots=True)
class SystemContext:
    """Filesystem probe backed by the running process.

    Every field can be overridden at construction, which is how tests point
    the locators at a temporary directory tree and a fake ``PATH``.

    Attributes:
        explicit: ``True`` when the user forced the tool being resolved.
        windows: Whether Windows naming conventions apply.
        working_dir: Directory the dispatcher was invoked from.
        paths: Directories searched for globally installed binaries.
        home_dir: Directory holding the user-level configuration.
    """

    explicit: bool = False
    windows: bool = field(default_factory=_is_windows)
    working_dir: Path = field(default_factory=Path.cwd)
    paths: tuple[Path, ...] = field(default_factory=paths_from_env)
    home_dir: Path = field(default_factory=home_from_env)

    def file_exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` names an existing file or directory."""

        return path.exists()

    def is_executable(self, path: Path) -> bool:
        """Return ``True`` when ``path`` may be executed by the current user.

        Windows has no execute permission bit, so every existing file counts.
        """

        if self.windows:
            return path.exists()
        return os.access(path, os.X_OK)

    def list_dir(self, path: Path) -> tuple[Path, ...]:
        """Return the entries of ``path`` sorted by name, or nothing when it is not a directory."""

        if not path.is_dir():
            return ()
        return tuple(sorted(path.iterdir()))

    def with_explicit(self, explicit: bool) -> SystemContext:
        """Return a copy of the context with the explicit-selection flag replaced."""

        return replace(self, explicit=explicit)


__all__ = [
    "SystemContext",
    "home_from_env",
    "paths_from_env",
]
