# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the dispatcher core."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

DISPATCH_FAILURE_EXIT: Final[int] = 1


class GumError(RuntimeError):
    """Error raised when a dispatch attempt fails and gm should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = DISPATCH_FAILURE_EXIT) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(GumError):
    """Raised when configuration input is invalid."""


class AmbiguousFlagsError(GumError):
    """Raised when more than one tool-forcing flag is supplied."""

    def __init__(self, flags: Sequence[str]) -> None:
        """Record the conflicting flags and build the usage message.

        Args:
            flags: Dispatcher flag codes (without the leading dash) that conflict.
        """

        self.flags = tuple(flags)
        rendered = ", ".join(f"-{flag}" for flag in self.flags)
        super().__init__(f"You cannot define {rendered} flags at the same time")


class ProjectNotFoundError(GumError):
    """Raised when no build tool claims the current directory."""


class MissingExecutableError(GumError):
    """Raised when neither a wrapper nor a global binary could be located."""


class NotExecutableError(GumError):
    """Raised when the resolved program lacks the executable permission bit."""


__all__ = [
    "DISPATCH_FAILURE_EXIT",
    "AmbiguousFlagsError",
    "ConfigError",
    "GumError",
    "MissingExecutableError",
    "NotExecutableError",
    "ProjectNotFoundError",
]
