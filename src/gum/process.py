# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrapper around ``subprocess`` for running the resolved build tool."""

from __future__ import annotations

# Bandit: subprocess usage is intentional; gm exists to launch the resolved
# build tool with a vetted argument list and no shell expansion.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path

from .errors import MissingExecutableError, NotExecutableError


def run_inherited(args: Sequence[str], *, cwd: Path | None = None) -> int:
    """Run ``args`` with the parent's standard streams and return its exit code.

    Nothing is captured: the child writes straight to the terminal and reads
    from gm's stdin, and this call blocks until it terminates.

    Args:
        args: Command where the first item is the absolute executable path.
        cwd: Working directory for the child, the current one when ``None``.

    Returns:
        int: Exit status reported by the child process.

    Raises:
        ValueError: If ``args`` is empty.
        MissingExecutableError: If the executable vanished before spawning.
        NotExecutableError: If the operating system refused to execute it.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    command = [str(arg) for arg in args]
    try:
        # Bandit: the command is an argument list resolved by gm; no shell is involved.
        completed = subprocess.run(command, cwd=cwd, check=False)  # nosec B603
    except FileNotFoundError as exc:
        raise MissingExecutableError(f"Executable '{command[0]}' was not found") from exc
    except PermissionError as exc:
        raise NotExecutableError(f"{command[0]} is not executable") from exc
    return completed.returncode


__all__ = ["run_inherited"]
