# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing output for gm: banners, hints, warnings, failures and debug dumps."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, replace
from functools import cache
from typing import Final

from rich.console import Console
from rich.text import Text

_KEY_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")
DEBUG_PREFIX: Final[str] = "[debug] "


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def _console(tty: bool) -> Console:
    """Return the console used while stdout is (or is not) a terminal.

    Colour is only enabled on terminals. Long paths in banners must stay on
    one line, so wrapping is disabled. The console does not bind
    ``sys.stdout`` at construction, so output follows later redirection.
    """

    return Console(
        color_system="auto" if tty else None,
        force_terminal=tty,
        no_color=not tty,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def _print_line(text: Text) -> None:
    _console(detect_tty()).print(text)


def _styled(message: str, style: str | None) -> Text:
    text = Text(message)
    if style and detect_tty():
        text.stylize(style)
    return text


@dataclass(frozen=True, slots=True)
class GumLogger:
    """Console reporter honouring gm's quiet and debug switches.

    ``echo`` output is unconditional and reserved for output the user asked
    for (``-gc``, ``-gh``, ``-gv``). Banners, hints, warnings and failures are
    dropped in quiet mode. Debug lines appear only when debug is enabled.

    Attributes:
        quiet: Whether informational output is suppressed.
        debug_enabled: Whether :meth:`debug` and :meth:`dump` print anything.
    """

    quiet: bool = False
    debug_enabled: bool = False

    def configured(self, *, quiet: bool, debug: bool) -> GumLogger:
        """Return a copy reflecting the quiet/debug settings of a resolved configuration."""

        return replace(self, quiet=quiet, debug_enabled=debug)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout regardless of quiet mode."""

        _print_line(Text(message))

    def banner(self, message: str) -> None:
        """Write the "Using <tool> at ..." banner unless quiet."""

        if not self.quiet:
            _print_line(_styled(message, "bold"))

    def info(self, message: str) -> None:
        if not self.quiet:
            _print_line(_styled(message, "cyan"))

    def warn(self, message: str) -> None:
        if not self.quiet:
            _print_line(_styled(message, "yellow"))

    def fail(self, message: str) -> None:
        if not self.quiet:
            _print_line(_styled(message, "red"))

    def debug(self, message: str) -> None:
        """Emit a debug message when debug output is enabled.

        Args:
            message: Debug payload; ``key=value`` pairs are highlighted.
        """

        if not self.debug_enabled:
            return
        color_enabled = detect_tty()
        text = Text(DEBUG_PREFIX, style="bold cyan" if color_enabled else "")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start])
            text.append(match.group(1), style="bold magenta" if color_enabled else "")
            text.append("=")
            text.append(match.group(2), style="bold green" if color_enabled else "")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:])
        _print_line(text)

    def dump(self, values: Iterable[tuple[str, object]]) -> None:
        """Emit one debug line per ``(name, value)`` pair."""

        for name, value in values:
            self.debug(f"{name}={value}")


__all__ = ["GumLogger", "detect_tty"]
