# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify raw command-line tokens into dispatcher flags, tool flags and goals.

The classifier runs a single left-to-right pass with a forward-only mode:

* leading ``-gX`` tokens naming a known dispatcher code are gm's own flags;
* the following ``-`` tokens are handed to the build tool, each greedily
  taking one value unless it is written as ``flag=value`` or the next token is
  itself a flag;
* everything from the first plain token onwards is a goal/task.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Final

FLAG_PREFIX: Final[str] = "-"
VALUE_SEPARATOR: Final[str] = "="

FORCE_GRADLE: Final[str] = "gg"
FORCE_MAVEN: Final[str] = "gm"
FORCE_JBANG: Final[str] = "gj"
FORCE_BACH: Final[str] = "gb"
FORCE_ANT: Final[str] = "ga"
QUIET: Final[str] = "gq"
DEBUG: Final[str] = "gd"
NEAREST: Final[str] = "gn"
SKIP_REPLACE: Final[str] = "gr"
SHOW_CONFIG: Final[str] = "gc"
HELP: Final[str] = "gh"
VERSION: Final[str] = "gv"

FORCE_FLAGS: Final[tuple[str, ...]] = (FORCE_GRADLE, FORCE_MAVEN, FORCE_ANT, FORCE_BACH, FORCE_JBANG)
GUM_FLAGS: Final[frozenset[str]] = frozenset(
    {
        *FORCE_FLAGS,
        QUIET,
        DEBUG,
        NEAREST,
        SKIP_REPLACE,
        SHOW_CONFIG,
        HELP,
        VERSION,
    }
)


class ArgumentMode(IntEnum):
    """Classification regions visited in order by :func:`parse_arguments`."""

    GUM_FLAGS = 0
    TOOL_ARGS = 1
    POSITIONAL = 2


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Command-line tokens split into the three disjoint groups gm understands."""

    gum_flags: frozenset[str] = field(default_factory=frozenset)
    tool_args: tuple[str, ...] = ()
    positional_args: tuple[str, ...] = ()

    def has_flag(self, code: str) -> bool:
        """Return ``True`` when the dispatcher flag ``code`` (without dash) was given.

        Args:
            code: Two-letter dispatcher flag code such as ``"gq"``.

        Returns:
            bool: Whether the flag was supplied.
        """

        return code in self.gum_flags

    def forced_tools(self) -> tuple[str, ...]:
        """Return the tool-forcing flag codes supplied, in canonical order.

        Returns:
            tuple[str, ...]: Subset of :data:`FORCE_FLAGS` present in ``gum_flags``.
        """

        return tuple(code for code in FORCE_FLAGS if code in self.gum_flags)

    def with_tool_args(self, tool_args: Sequence[str]) -> ParsedArguments:
        """Return a copy carrying ``tool_args`` in place of the current tool flags."""

        return replace(self, tool_args=tuple(tool_args))

    def with_positional_args(self, positional_args: Sequence[str]) -> ParsedArguments:
        """Return a copy carrying ``positional_args`` in place of the current goals."""

        return replace(self, positional_args=tuple(positional_args))


def _is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX)


def _gum_flag_code(token: str) -> str | None:
    if not _is_flag(token):
        return None
    code = token[len(FLAG_PREFIX) :]
    return code if code in GUM_FLAGS else None


def parse_arguments(tokens: Sequence[str]) -> ParsedArguments:
    """Split ``tokens`` into dispatcher flags, tool arguments and positional goals.

    Args:
        tokens: Raw command-line tokens following the program name.

    Returns:
        ParsedArguments: Classified tokens; every input token lands in exactly
        one of the three groups.
    """

    gum_flags: set[str] = set()
    tool_args: list[str] = []
    positional: list[str] = []
    mode = ArgumentMode.GUM_FLAGS
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if mode is ArgumentMode.GUM_FLAGS:
            code = _gum_flag_code(token)
            if code is not None:
                gum_flags.add(code)
                index += 1
                continue
            mode = ArgumentMode.TOOL_ARGS
        if mode is ArgumentMode.TOOL_ARGS:
            if _is_flag(token):
                tool_args.append(token)
                index += 1
                if VALUE_SEPARATOR not in token and index < len(tokens) and not _is_flag(tokens[index]):
                    tool_args.append(tokens[index])
                    index += 1
                continue
            mode = ArgumentMode.POSITIONAL
        positional.append(token)
        index += 1
    return ParsedArguments(
        gum_flags=frozenset(gum_flags),
        tool_args=tuple(tool_args),
        positional_args=tuple(positional),
    )


@dataclass(frozen=True, slots=True)
class FlagExtraction:
    """Outcome of pulling a path-valued flag out of an argument sequence."""

    found: bool
    value: str
    remaining: tuple[str, ...]


def extract_flag_value(names: Sequence[str], args: Sequence[str]) -> FlagExtraction:
    """Find the first of ``names`` in ``args`` and remove it together with its value.

    Both the two-token ``--flag value`` form and the single-token
    ``--flag=value`` form are recognised. Names are tried in order, so callers
    list the short spelling first. A flag in last position has no value and
    does not match.

    Args:
        names: Alternative spellings of the flag, e.g. ``("-b", "--build-file")``.
        args: Argument sequence to search.

    Returns:
        FlagExtraction: ``found`` and ``value`` describe the match; ``remaining``
        holds ``args`` without the consumed tokens (unchanged when not found).
    """

    items = tuple(args)
    for name in names:
        for index, token in enumerate(items):
            if token == name:
                if index + 1 < len(items):
                    remaining = items[:index] + items[index + 2 :]
                    return FlagExtraction(found=True, value=items[index + 1], remaining=remaining)
                continue
            head, separator, value = token.partition(VALUE_SEPARATOR)
            if separator and head == name:
                return FlagExtraction(found=True, value=value, remaining=items[:index] + items[index + 1 :])
    return FlagExtraction(found=False, value="", remaining=items)


__all__ = [
    "DEBUG",
    "FORCE_ANT",
    "FORCE_BACH",
    "FORCE_FLAGS",
    "FORCE_GRADLE",
    "FORCE_JBANG",
    "FORCE_MAVEN",
    "GUM_FLAGS",
    "HELP",
    "NEAREST",
    "QUIET",
    "SHOW_CONFIG",
    "SKIP_REPLACE",
    "VERSION",
    "ArgumentMode",
    "FlagExtraction",
    "ParsedArguments",
    "extract_flag_value",
    "parse_arguments",
]
