# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bach project discovery and launcher selection.

Bach has no wrapper or dedicated binary. It is started either as a Java
module from the project's ``.bach/bin`` (or ``.bach/cache``) directory, or by
feeding the released ``build.jsh`` bootstrap script to ``jshell``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..arguments import ParsedArguments
from ..config import Config
from ..config.models import BACH
from ..errors import MissingExecutableError, ProjectNotFoundError
from ..interfaces import Context
from ..search import absolute_path, find_marker_dir, find_on_path, platform_name
from .base import BaseTool, CommandPlan, DispatchSession, ResolvedCommand, project_not_found

MARKER_DIR: Final[str] = ".bach"
BIN_DIR: Final[str] = "bin"
CACHE_DIR: Final[str] = "cache"
JAVA: Final[str] = "java"
JSHELL: Final[str] = "jshell"
WINDOWS_SUFFIX: Final[str] = ".exe"
BACH_MODULE: Final[str] = "com.github.sormuras.bach"
BOOTSTRAP_URL: Final[str] = "https://github.com/sormuras/bach/releases/download/{version}/build.jsh"
MISSING_JAVA_MESSAGE: Final[str] = "No java/jshell found in path. Please install Java 16+"


@dataclass(frozen=True, slots=True)
class BachLauncher:
    """Program plus the leading arguments that start Bach."""

    executable: Path
    args: tuple[str, ...]


def find_root_dir(context: Context, start: Path) -> Path | None:
    """Return the nearest directory at or above ``start`` holding ``.bach``."""

    return find_marker_dir(context, start, MARKER_DIR)


def select_launcher(context: Context, root_dir: Path, config: Config) -> BachLauncher | None:
    """Pick the way Bach is started for the project at ``root_dir``.

    ``java`` with a module path is preferred when the project ships compiled
    Bach modules; otherwise ``jshell`` runs the bootstrap script of the
    configured Bach version.

    Returns:
        BachLauncher | None: Launcher, ``None`` when neither program is usable.
    """

    java = find_on_path(context, platform_name(context, JAVA, WINDOWS_SUFFIX))
    jshell = find_on_path(context, platform_name(context, JSHELL, WINDOWS_SUFFIX))
    if java is not None:
        for module_dir in (root_dir / MARKER_DIR / BIN_DIR, root_dir / MARKER_DIR / CACHE_DIR):
            if context.file_exists(module_dir):
                return BachLauncher(java, ("-p", str(module_dir), "-m", BACH_MODULE, "build"))
    if jshell is not None:
        return BachLauncher(jshell, (BOOTSTRAP_URL.format(version=config.bach.version),))
    return None


class BachTool(BaseTool):
    """Claim Bach projects when invoked from their root directory."""

    tool_name = BACH

    def try_resolve(
        self,
        context: Context,
        args: ParsedArguments,
        session: DispatchSession,
    ) -> ResolvedCommand | None:
        """Resolve a Bach launch for the working directory.

        Raises:
            ProjectNotFoundError: If Bach was forced and there is no project, or
                gm was not started from the project root.
            MissingExecutableError: If Bach was forced and no Java is installed.
        """

        pwd = absolute_path(context.working_dir)
        root_dir = find_root_dir(context, pwd)
        if root_dir is None:
            project_not_found(context, "Bach")
            return None
        if root_dir != pwd:
            if context.explicit:
                raise ProjectNotFoundError(f"Bach must be invoked from {root_dir}")
            return None

        config = session.config_for(root_dir, args)
        launcher = select_launcher(context, root_dir, config)
        if launcher is None:
            session.logger_for(config).warn(MISSING_JAVA_MESSAGE)
            if context.explicit:
                raise MissingExecutableError(MISSING_JAVA_MESSAGE)
            return None

        plan = CommandPlan(
            banner=[f"Using Bach at '{root_dir}'"],
            tool_args=args.tool_args,
            goals=args.positional_args,
        )
        plan.add_leading(*launcher.args)
        details = (
            ("pwd", context.working_dir),
            ("rootDir", root_dir),
            ("executable", launcher.executable),
            ("original args", list(args.positional_args)),
        )
        return ResolvedCommand(
            tool=self.tool_name,
            executable=launcher.executable,
            args=plan.to_args(),
            root_dir=root_dir,
            config=config,
            banner=plan.banner_text(),
            context=context,
            details=details,
        )


__all__ = ["BachLauncher", "BachTool", "find_root_dir", "select_launcher"]
