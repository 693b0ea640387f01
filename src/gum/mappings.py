# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate tool-agnostic goal names into each build tool's vocabulary."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

GOAL_SEPARATOR: Final[str] = ":"

GRADLE_DEFAULT_MAPPINGS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "compile": "classes",
        "package": "assemble",
        "verify": "build",
        "install": "publishToMavenLocal",
        "exec:java": "run",
        "dependency:tree": "dependencies",
    }
)

MAVEN_DEFAULT_MAPPINGS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "classes": "compile",
        "jar": "package",
        "assemble": "package",
        "build": "verify",
        "publishToMavenLocal": "install",
        "puTML": "install",
        "check": "verify",
        "run": "exec:java",
        "dependencies": "dependency:tree",
    }
)


def remap_goal(goal: str, mapping: Mapping[str, str], *, sub_match: bool = True) -> str:
    """Return the native name for ``goal``.

    An exact match wins. Otherwise, when ``sub_match`` is enabled, the part
    after the last colon is looked up and the qualifier before it is kept, so
    ``:app:verify`` becomes ``:app:build`` for Gradle.

    Args:
        goal: Goal or task name as typed by the user.
        mapping: Canonical-to-native lookup table.
        sub_match: Whether colon-qualified goals may match on their suffix.

    Returns:
        str: Native goal name, or ``goal`` unchanged when nothing matches.
    """

    if goal in mapping:
        return mapping[goal]
    if not sub_match:
        return goal
    prefix, separator, suffix = goal.rpartition(GOAL_SEPARATOR)
    if separator and suffix in mapping:
        return f"{prefix}{separator}{mapping[suffix]}"
    return goal


def remap_goals(goals: Sequence[str], mapping: Mapping[str, str], *, sub_match: bool = True) -> tuple[str, ...]:
    """Return ``goals`` with every entry passed through :func:`remap_goal`."""

    return tuple(remap_goal(goal, mapping, sub_match=sub_match) for goal in goals)


def merge_mappings(
    defaults: Mapping[str, str] | None,
    *overrides: Mapping[str, str],
) -> dict[str, str]:
    """Layer mapping tables with later tables winning per key.

    Args:
        defaults: Built-in table, or ``None`` when defaults are disabled.
        *overrides: User-supplied tables ordered from lowest to highest precedence.

    Returns:
        dict[str, str]: Merged lookup table.
    """

    merged: dict[str, str] = dict(defaults or {})
    for layer in overrides:
        merged.update(layer)
    return merged


__all__ = [
    "GRADLE_DEFAULT_MAPPINGS",
    "MAVEN_DEFAULT_MAPPINGS",
    "merge_mappings",
    "remap_goal",
    "remap_goals",
]
