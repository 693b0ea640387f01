# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ant project discovery and command assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..arguments import ParsedArguments, extract_flag_value
from ..config.models import ANT
from ..interfaces import Context
from ..search import absolute_path, find_upward
from .base import (
    BaseTool,
    CommandPlan,
    DispatchSession,
    ExecutableNames,
    ResolvedCommand,
    ToolCandidate,
    project_not_found,
    resolve_executable,
)

ANT_NAMES: Final[ExecutableNames] = ExecutableNames(
    label="Ant",
    binary="ant",
    binary_suffix=".bat",
    install_url="https://ant.apache.org/bindownload.cgi",
)

BUILD_FILE: Final[str] = "build.xml"
BUILD_FILE_FLAGS: Final[tuple[str, ...]] = ("-f", "-file", "-buildfile")
BASEDIR_PROPERTY: Final[str] = "-Dbasedir="


class AntTool(BaseTool):
    """Claim Ant builds and run them through the ``ant`` found on ``PATH``."""

    tool_name = ANT

    def locate(self, context: Context, args: ParsedArguments) -> tuple[ToolCandidate, ParsedArguments] | None:
        pwd = absolute_path(context.working_dir)
        extraction = extract_flag_value(BUILD_FILE_FLAGS, args.tool_args)
        explicit_build_file = absolute_path(pwd / extraction.value) if extraction.found else None
        args = args.with_tool_args(extraction.remaining)
        build_file = find_upward(context, pwd, (BUILD_FILE,))
        selected = explicit_build_file or build_file
        if selected is None:
            project_not_found(context, "Ant")
            return None
        candidate = ToolCandidate(
            root_dir=selected.parent,
            build_file=build_file,
            explicit_build_file=explicit_build_file,
        )
        return candidate, args

    def assemble(self, candidate: ToolCandidate, args: ParsedArguments, executable: Path) -> CommandPlan:
        """Build the Ant argument vector; goals are passed through untouched."""

        plan = CommandPlan(
            banner=[f"Using Ant at '{executable}'"],
            tool_args=args.tool_args,
            goals=args.positional_args,
        )
        build_file = candidate.explicit_build_file or candidate.build_file
        if build_file is not None:
            plan.add_leading("-f", str(build_file))
            plan.add_banner(f"to run buildFile '{build_file}':")
        plan.add_trailing(f"{BASEDIR_PROPERTY}{candidate.root_dir}")
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
        executable = resolve_executable(context, ANT_NAMES, session.logger_for(config), wrapper=None)
        if executable is None:
            return None
        plan = self.assemble(candidate, args, executable)
        details = (
            ("pwd", context.working_dir),
            ("rootDir", candidate.root_dir),
            ("executable", executable),
            ("buildFile", candidate.build_file),
            ("explicitBuildFile", candidate.explicit_build_file),
            ("original args", list(args.positional_args)),
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


__all__ = ["ANT_NAMES", "AntTool"]
