# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Directory walks used to locate build files, wrappers and installed binaries."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from .interfaces import Context

LOGGER = logging.getLogger(__name__)

CandidateNames = Sequence[str] | Callable[[Path], Sequence[str]]


def absolute_path(path: Path | str) -> Path:
    """Return ``path`` made absolute and normalised without resolving symlinks.

    Args:
        path: Relative or absolute path.

    Returns:
        Path: Absolute, ``..``-free path.
    """

    return Path(os.path.abspath(path))


def iter_ancestors(start: Path) -> Iterator[Path]:
    """Yield ``start`` and each of its parents, stopping before the filesystem root.

    The walk ends once the parent of the current directory equals the
    directory itself, so the root is never yielded.

    Args:
        start: Directory where the walk begins.

    Yields:
        Path: Absolute directories from ``start`` upwards.
    """

    current = absolute_path(start)
    while True:
        parent = current.parent
        if parent == current:
            return
        yield current
        current = parent


def _names_for(candidates: CandidateNames, directory: Path) -> Sequence[str]:
    if callable(candidates):
        return candidates(directory)
    return candidates


def find_in_dir(context: Context, directory: Path, candidates: CandidateNames) -> Path | None:
    """Return the first candidate present in ``directory``.

    Args:
        context: Filesystem probe.
        directory: Directory to inspect.
        candidates: Filenames in priority order, or a callable producing them
            from the directory being inspected.

    Returns:
        Path | None: Absolute path of the first existing candidate.
    """

    for name in _names_for(candidates, directory):
        path = directory / name
        if context.file_exists(path):
            return absolute_path(path)
    return None


def find_upward(context: Context, start: Path, candidates: CandidateNames) -> Path | None:
    """Walk from ``start`` towards the root and return the nearest candidate.

    Args:
        context: Filesystem probe.
        start: Directory where the search begins.
        candidates: Filenames in priority order, or a callable producing them
            per directory.

    Returns:
        Path | None: Absolute path of the nearest match, ``None`` when the walk
        reached the root without a hit.
    """

    for directory in iter_ancestors(start):
        found = find_in_dir(context, directory, candidates)
        if found is not None:
            LOGGER.debug("found %s while walking up from %s", found, start)
            return found
    return None


def find_marker_dir(context: Context, start: Path, marker: str) -> Path | None:
    """Return the nearest directory at or above ``start`` that contains ``marker``."""

    for directory in iter_ancestors(start):
        if context.file_exists(directory / marker):
            return directory
    return None


def find_on_path(context: Context, name: str) -> Path | None:
    """Return the first ``PATH`` entry providing ``name``.

    Args:
        context: Filesystem probe exposing the ``PATH`` entries.
        name: Platform-specific executable filename.

    Returns:
        Path | None: Absolute path to the binary when installed.
    """

    for entry in context.paths:
        candidate = entry / name
        if context.file_exists(candidate):
            return absolute_path(candidate)
    LOGGER.debug("%s not found on PATH", name)
    return None


def platform_name(context: Context, name: str, windows_suffix: str) -> str:
    """Return ``name`` with ``windows_suffix`` appended on Windows."""

    return f"{name}{windows_suffix}" if context.windows else name


__all__ = [
    "CandidateNames",
    "absolute_path",
    "find_in_dir",
    "find_marker_dir",
    "find_on_path",
    "find_upward",
    "iter_ancestors",
    "platform_name",
]
