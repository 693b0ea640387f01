# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Maven project discovery and command assembly."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from ..arguments import NEAREST, ParsedArguments, extract_flag_value
from ..config import Config
from ..config.models import MAVEN
from ..interfaces import Context
from ..mappings import remap_goals
from ..search import absolute_path, find_on_path, find_upward, iter_ancestors, platform_name
from .base import (
    BaseTool,
    CommandPlan,
    DispatchSession,
    ExecutableNames,
    ResolvedCommand,
    ToolCandidate,
    find_wrapper,
    project_not_found,
    resolve_executable,
    should_replace,
)

LOGGER = logging.getLogger(__name__)

MAVEN_NAMES: Final[ExecutableNames] = ExecutableNames(
    label="Maven",
    binary="mvn",
    binary_suffix=".cmd",
    install_url="https://maven.apache.org/download.cgi",
    wrapper="mvnw",
    wrapper_suffix=".cmd",
    wrapper_url="https://maven.apache.org/",
)

MVND_BINARY: Final[str] = "mvnd"
MVND_SUFFIX: Final[str] = ".cmd"
POM_FILE: Final[str] = "pom.xml"
BUILD_FILE_FLAGS: Final[tuple[str, ...]] = ("-f", "--file")


def find_build_file(context: Context, start: Path) -> Path | None:
    """Return the nearest ``pom.xml`` at or above ``start``."""

    return find_upward(context, start, (POM_FILE,))


def find_root_build_file(context: Context, build_file: Path) -> Path:
    """Return the topmost ``pom.xml`` of the chain that starts at ``build_file``.

    The walk climbs while the parent directory also holds a ``pom.xml``, so an
    unrelated pom further up, separated by a directory without one, is ignored.
    """

    root = build_file
    for directory in iter_ancestors(build_file.parent.parent):
        candidate = directory / POM_FILE
        if not context.file_exists(candidate):
            break
        root = absolute_path(candidate)
    return root


def find_mvnd(context: Context, config: Config) -> Path | None:
    """Return the Maven daemon when it is enabled in ``config`` and installed."""

    if not config.maven.mvnd:
        return None
    return find_on_path(context, platform_name(context, MVND_BINARY, MVND_SUFFIX))


class MavenTool(BaseTool):
    """Claim Maven builds and run them through ``mvnd``, ``mvnw`` or ``mvn``."""

    tool_name = MAVEN

    def locate(self, context: Context, args: ParsedArguments) -> tuple[ToolCandidate, ParsedArguments] | None:
        """Find the nearest and root ``pom.xml`` for the working directory.

        Raises:
            ProjectNotFoundError: If Maven was forced and no pom was found.
        """

        pwd = absolute_path(context.working_dir)
        explicit_build_file: Path | None = None
        extraction = extract_flag_value(BUILD_FILE_FLAGS, args.tool_args)
        if extraction.found:
            explicit_build_file = absolute_path(pwd / extraction.value)
            args = args.with_tool_args(extraction.remaining)
        build_file = find_build_file(context, pwd)
        root_build_file = find_root_build_file(context, build_file) if build_file is not None else None

        if explicit_build_file is not None:
            root_dir = explicit_build_file.parent
        elif root_build_file is not None:
            root_dir = root_build_file.parent
        elif build_file is not None:
            root_dir = build_file.parent
        else:
            LOGGER.debug("no pom.xml above %s", pwd)
            project_not_found(context, "Maven")
            return None
        candidate = ToolCandidate(
            root_dir=root_dir,
            build_file=build_file,
            root_build_file=root_build_file,
            explicit_build_file=explicit_build_file,
        )
        return candidate, args

    def assemble(
        self,
        candidate: ToolCandidate,
        args: ParsedArguments,
        config: Config,
        executable: Path,
    ) -> CommandPlan:
        """Build the Maven argument vector and banner for ``candidate``."""

        plan = CommandPlan(banner=[f"Using maven at '{executable}'"], tool_args=args.tool_args)
        goals = args.positional_args
        if should_replace(args, config.maven.replace):
            goals = remap_goals(goals, config.maven.mappings, sub_match=False)
        plan.goals = goals

        build_file = candidate.explicit_build_file
        if build_file is None:
            build_file = candidate.build_file if args.has_flag(NEAREST) else candidate.root_build_file
        if build_file is not None:
            plan.add_leading("-f", str(build_file))
            plan.add_banner(f"to run buildFile '{build_file}':")
        return plan

    def try_resolve(
        self,
        context: Context,
        args: ParsedArguments,
        session: DispatchSession,
    ) -> ResolvedCommand | None:
        located = self.locate(context, args)
        if located is None:
            return None
        candidate, args = located
        config = session.config_for(candidate.root_dir, args)
        executable = find_mvnd(context, config) or resolve_executable(
            context,
            MAVEN_NAMES,
            session.logger_for(config),
            wrapper=find_wrapper(context, MAVEN_NAMES, absolute_path(context.working_dir)),
        )
        if executable is None:
            return None
        plan = self.assemble(candidate, args, config, executable)
        details = (
            ("nearest", args.has_flag(NEAREST)),
            ("replace", should_replace(args, config.maven.replace)),
            ("mvnd", config.maven.mvnd),
            ("pwd", context.working_dir),
            ("rootDir", candidate.root_dir),
            ("rootBuildFile", candidate.root_build_file),
            ("buildFile", candidate.build_file),
            ("explicitBuildFile", candidate.explicit_build_file),
            ("original args", list(args.positional_args)),
            ("replaced args", list(plan.goals)),
        )
        return ResolvedCommand(
            tool=self.tool_name,
            executable=executable,
            args=plan.to_args(),
            root_dir=candidate.root_dir,
            config=config,
            banner=plan.banner_text(),
            context=context,
            details=details,
        )


__all__ = [
    "MAVEN_NAMES",
    "MavenTool",
    "find_build_file",
    "find_mvnd",
    "find_root_build_file",
]
