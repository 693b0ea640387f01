# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the build tool that governs the working directory and run it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from .arguments import (
    FORCE_ANT,
    FORCE_BACH,
    FORCE_GRADLE,
    FORCE_JBANG,
    FORCE_MAVEN,
    SHOW_CONFIG,
    ParsedArguments,
)
from .config import ConfigLoader, render_config
from .config.models import ANT, BACH, GRADLE, JBANG, MAVEN
from .context import SystemContext
from .errors import AmbiguousFlagsError, ProjectNotFoundError
from .interfaces import BuildTool, Context
from .logging import GumLogger
from .search import absolute_path
from .tools.base import DispatchSession, ResolvedCommand
from .tools.registry import ToolRegistry, default_registry

LOGGER = logging.getLogger(__name__)

FORCED_TOOLS: Final = MappingProxyType(
    {
        FORCE_GRADLE: GRADLE,
        FORCE_MAVEN: MAVEN,
        FORCE_ANT: ANT,
        FORCE_BACH: BACH,
        FORCE_JBANG: JBANG,
    }
)

NO_PROJECT_MESSAGE: Final[str] = "Did not find a Gradle, Maven, Ant, Bach, or jbang project"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Tool that claimed the project together with the command it built."""

    tool: BuildTool
    command: ResolvedCommand


class Dispatcher:
    """Try build tools in order and execute the first one that claims the project."""

    def __init__(
        self,
        *,
        registry: ToolRegistry | None = None,
        context: Context | None = None,
        loader: ConfigLoader | None = None,
        logger: GumLogger | None = None,
    ) -> None:
        """Initialise the dispatcher.

        Args:
            registry: Tools available for discovery; every built-in tool when omitted.
            context: Filesystem probe; the running process when omitted.
            loader: Configuration loader; reads the user file for ``context`` when omitted.
            logger: Console reporter shared by every tool.
        """

        self._registry = default_registry() if registry is None else registry
        self._context = context or SystemContext()
        loader = loader or ConfigLoader.for_context(self._context)
        self._session = DispatchSession(loader=loader, logger=logger or GumLogger())

    def resolve(self, args: ParsedArguments) -> Resolution | None:
        """Find the tool governing the working directory.

        A tool-forcing flag restricts resolution to that tool and makes every
        failure fatal. Otherwise tools are tried in the configured discovery
        order and the first one returning a command wins.

        Args:
            args: Classified command-line arguments.

        Returns:
            Resolution | None: Winning tool and command, ``None`` when no tool
            claimed the project during implicit discovery.

        Raises:
            AmbiguousFlagsError: If more than one tool-forcing flag was given.
            GumError: If a forced tool could not resolve a command.
        """

        forced = args.forced_tools()
        if len(forced) > 1:
            raise AmbiguousFlagsError(forced)
        if forced:
            tool = self._registry[FORCED_TOOLS[forced[0]]]
            command = tool.try_resolve(self._context.with_explicit(True), args, self._session)
            return Resolution(tool, command) if command is not None else None

        context = self._context.with_explicit(False)
        order = self._session.config_for(absolute_path(context.working_dir), args).general.discovery_order()
        for tool in self._registry.ordered(order):
            command = tool.try_resolve(context, args, self._session)
            if command is not None:
                LOGGER.debug("%s claimed %s", tool.name, context.working_dir)
                return Resolution(tool, command)
            LOGGER.debug("%s did not claim %s", tool.name, context.working_dir)
        return None

    def dispatch(self, args: ParsedArguments) -> int:
        """Resolve and run the build tool for ``args``.

        With ``-gc`` the resolved configuration is printed instead and nothing
        is executed.

        Returns:
            int: Exit status of the build tool, or ``0`` after printing the
            configuration.

        Raises:
            ProjectNotFoundError: If no tool claimed the working directory.
            GumError: If resolution or execution failed.
        """

        resolution = self.resolve(args)
        if args.has_flag(SHOW_CONFIG):
            if resolution is not None:
                config = resolution.command.config
            else:
                config = self._session.config_for(absolute_path(self._context.working_dir), args)
            self._session.logger.echo(render_config(config))
            return 0
        if resolution is None:
            raise ProjectNotFoundError(NO_PROJECT_MESSAGE)
        return resolution.tool.execute(resolution.command, self._session)


__all__ = ["FORCED_TOOLS", "NO_PROJECT_MESSAGE", "Dispatcher", "Resolution"]
