# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols shared by the locators, the tools and the dispatcher."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .arguments import ParsedArguments
    from .tools.base import DispatchSession, ResolvedCommand


@runtime_checkable
class Context(Protocol):
    """Abstraction over the operating system and environment consulted during discovery."""

    explicit: bool
    windows: bool
    working_dir: Path
    paths: tuple[Path, ...]
    home_dir: Path

    @abstractmethod
    def file_exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` exists.

        Args:
            path: File or directory to probe.

        Returns:
            bool: Whether the path exists.
        """
        raise NotImplementedError

    @abstractmethod
    def is_executable(self, path: Path) -> bool:
        """Return ``True`` when ``path`` carries the executable permission.

        Args:
            path: Program about to be spawned.

        Returns:
            bool: Whether the program may be executed.
        """
        raise NotImplementedError

    @abstractmethod
    def list_dir(self, path: Path) -> tuple[Path, ...]:
        """Return the immediate entries of ``path``.

        Args:
            path: Directory to list.

        Returns:
            tuple[Path, ...]: Entries sorted by name.
        """
        raise NotImplementedError

    @abstractmethod
    def with_explicit(self, explicit: bool) -> Context:
        """Return a copy of the context with the explicit-selection flag replaced.

        Args:
            explicit: Whether the tool being resolved was forced by the user.

        Returns:
            Context: Updated context.
        """
        raise NotImplementedError


@runtime_checkable
class BuildTool(Protocol):
    """A build tool that can claim a project and run a command for it."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the identifier used in discovery order lists (e.g. ``"gradle"``).

        Returns:
            str: Lower-case tool identifier.
        """
        raise NotImplementedError

    @abstractmethod
    def try_resolve(
        self,
        context: Context,
        args: ParsedArguments,
        session: DispatchSession,
    ) -> ResolvedCommand | None:
        """Return the command to run, or ``None`` when the tool does not claim the project.

        Args:
            context: Filesystem probe describing the invocation.
            args: Classified command-line arguments.
            session: Per-invocation configuration loader and logger.

        Returns:
            ResolvedCommand | None: Fully assembled command or ``None``.
        """
        raise NotImplementedError

    @abstractmethod
    def execute(self, command: ResolvedCommand, session: DispatchSession) -> int:
        """Run ``command`` and return the child's exit code.

        Args:
            command: Command previously produced by :meth:`try_resolve`.
            session: Per-invocation configuration loader and logger.

        Returns:
            int: Exit status of the spawned build tool.
        """
        raise NotImplementedError


__all__ = ["BuildTool", "Context"]
