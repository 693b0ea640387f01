# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Building blocks shared by every build tool implementation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..arguments import DEBUG, QUIET, SKIP_REPLACE, ParsedArguments
from ..config import Config, ConfigLoader
from ..errors import MissingExecutableError, NotExecutableError, ProjectNotFoundError
from ..interfaces import Context
from ..logging import GumLogger
from ..process import run_inherited
from ..search import find_on_path, find_upward, platform_name

DebugDetails = tuple[tuple[str, object], ...]

BANNER_SEPARATOR: Final[str] = " "


@dataclass(frozen=True, slots=True)
class ExecutableNames:
    """Names and documentation links used to resolve one tool's program.

    Attributes:
        label: Human-readable tool name used in messages.
        binary: Canonical name of the globally installed program.
        binary_suffix: Suffix appended to ``binary`` on Windows.
        install_url: Documentation link shown when nothing is installed.
        wrapper: Name of the project-local wrapper script, if the tool has one.
        wrapper_suffix: Suffix appended to ``wrapper`` on Windows.
        wrapper_url: Documentation link recommending the wrapper.
    """

    label: str
    binary: str
    binary_suffix: str
    install_url: str
    wrapper: str | None = None
    wrapper_suffix: str = ""
    wrapper_url: str = ""

    def binary_name(self, context: Context) -> str:
        """Return the platform-specific global binary name."""

        return platform_name(context, self.binary, self.binary_suffix)

    def wrapper_name(self, context: Context) -> str | None:
        """Return the platform-specific wrapper name, ``None`` when the tool has no wrapper."""

        if self.wrapper is None:
            return None
        return platform_name(context, self.wrapper, self.wrapper_suffix)


@dataclass(frozen=True, slots=True)
class ToolCandidate:
    """Files located for one tool before the command is assembled.

    Explicit paths come from the user's tool flags and always win over
    discovered ones, both when choosing the build-file flag and when deriving
    ``root_dir``.
    """

    root_dir: Path
    build_file: Path | None = None
    root_build_file: Path | None = None
    settings_file: Path | None = None
    explicit_build_file: Path | None = None
    explicit_settings_file: Path | None = None
    explicit_project_dir: Path | None = None


@dataclass(slots=True)
class CommandPlan:
    """Argument vector and banner under construction.

    The final vector is ``leading`` flags (launcher, build file, settings),
    then the user's tool flags, then ``trailing`` values inserted after them,
    then the goals. Empty strings are dropped everywhere.
    """

    banner: list[str]
    leading: list[str] = field(default_factory=list)
    tool_args: tuple[str, ...] = ()
    trailing: list[str] = field(default_factory=list)
    goals: tuple[str, ...] = ()

    def add_banner(self, text: str) -> None:
        self.banner.append(text)

    def add_leading(self, *args: str) -> None:
        self.leading.extend(args)

    def add_trailing(self, *args: str) -> None:
        self.trailing.extend(args)

    def to_args(self) -> tuple[str, ...]:
        """Return the assembled argument vector."""

        return compact((*self.leading, *self.tool_args, *self.trailing, *self.goals))

    def banner_text(self) -> str:
        return BANNER_SEPARATOR.join(self.banner)


@dataclass(frozen=True, slots=True)
class ResolvedCommand:
    """Everything needed to launch a build tool for one invocation.

    Attributes:
        tool: Identifier of the tool that claimed the project.
        executable: Absolute path of the program to spawn.
        args: Final argument vector passed to ``executable``.
        root_dir: Project root the command runs against.
        config: Configuration resolved for ``root_dir``.
        banner: Human-readable description printed before execution.
        context: Filesystem probe the command was resolved with.
        details: Intermediate values dumped in debug mode.
    """

    tool: str
    executable: Path
    args: tuple[str, ...]
    root_dir: Path
    config: Config
    banner: str
    context: Context = field(repr=False, compare=False)
    details: DebugDetails = ()

    @property
    def argv(self) -> tuple[str, ...]:
        """Return the executable followed by its arguments."""

        return (str(self.executable), *self.args)


@dataclass(slots=True)
class DispatchSession:
    """State shared by every tool during one ``gm`` invocation.

    Attributes:
        loader: Configuration loader; the user file is read at most once.
        logger: Base logger, refined per tool from the resolved configuration.
    """

    loader: ConfigLoader
    logger: GumLogger = field(default_factory=GumLogger)

    def config_for(self, root: Path | None, args: ParsedArguments) -> Config:
        """Return the configuration for ``root`` with dispatcher flag overrides applied.

        Args:
            root: Project root whose ``.gm.toml`` should be read.
            args: Classified arguments; ``-gq`` and ``-gd`` force quiet/debug on.

        Returns:
            Config: Resolved configuration.
        """

        config = self.loader.load(root)
        if args.has_flag(QUIET):
            config = config.with_quiet(True)
        if args.has_flag(DEBUG):
            config = config.with_debug(True)
        return config

    def logger_for(self, config: Config) -> GumLogger:
        """Return the base logger adjusted to ``config``'s quiet and debug switches."""

        return self.logger.configured(quiet=config.general.quiet, debug=config.general.debug)


def compact(args: Iterable[str]) -> tuple[str, ...]:
    """Return ``args`` without empty strings."""

    return tuple(arg for arg in args if arg)


def should_replace(args: ParsedArguments, enabled: bool) -> bool:
    """Return whether goal remapping applies, honouring ``-gr``."""

    return enabled and not args.has_flag(SKIP_REPLACE)


def project_not_found(context: Context, label: str) -> None:
    """Fail an explicit selection that found no project.

    Args:
        context: Filesystem probe carrying the explicit-selection flag.
        label: Human-readable tool name.

    Raises:
        ProjectNotFoundError: If the tool was forced by the user.
    """

    if context.explicit:
        raise ProjectNotFoundError(f"No {label} project found")


def find_wrapper(context: Context, names: ExecutableNames, start: Path) -> Path | None:
    """Return the nearest wrapper script at or above ``start``, if the tool has one."""

    wrapper = names.wrapper_name(context)
    if wrapper is None:
        return None
    return find_upward(context, start, (wrapper,))


def resolve_executable(
    context: Context,
    names: ExecutableNames,
    logger: GumLogger,
    *,
    wrapper: Path | None,
    binary: Path | None = None,
) -> Path | None:
    """Choose between a project-local wrapper and a globally installed binary.

    Args:
        context: Filesystem probe carrying PATH entries and explicit-selection state.
        names: Names and documentation links for the tool.
        logger: Logger configured for the project's quiet setting.
        wrapper: Wrapper script found for the project, if any.
        binary: Pre-resolved global binary; looked up on ``PATH`` when ``None``.

    Returns:
        Path | None: Program to execute, ``None`` when nothing is installed and
        the selection was implicit.

    Raises:
        MissingExecutableError: If nothing is installed and the tool was forced.
    """

    if wrapper is not None:
        return wrapper
    installed = binary if binary is not None else find_on_path(context, names.binary_name(context))
    if installed is not None:
        wrapper_name = names.wrapper_name(context)
        if wrapper_name is not None and context.explicit:
            logger.info(
                f"No {wrapper_name} set up for this project. Please consider setting one up. ({names.wrapper_url})"
            )
        return installed
    message = f"No {names.binary_name(context)} found in path. Please install {names.label}. ({names.install_url})"
    logger.warn(message)
    if context.explicit:
        raise MissingExecutableError(message)
    return None


def ensure_executable(context: Context, executable: Path) -> None:
    """Verify that ``executable`` carries the execute permission.

    Raises:
        NotExecutableError: If the program may not be executed.
    """

    if not context.is_executable(executable):
        raise NotExecutableError(f"{executable} is not executable")


def execute_command(command: ResolvedCommand, session: DispatchSession) -> int:
    """Print the debug dump and banner for ``command`` and run it.

    Args:
        command: Command assembled by a tool.
        session: Dispatch session providing the base logger.

    Returns:
        int: Exit status of the child process.

    Raises:
        NotExecutableError: If the resolved program lacks the execute permission.
    """

    ensure_executable(command.context, command.executable)
    logger = session.logger_for(command.config)
    logger.dump((*command.details, ("actual args", list(command.args))))
    logger.banner(command.banner)
    return run_inherited(command.argv, cwd=command.context.working_dir)


class BaseTool:
    """Shared plumbing for :class:`gum.interfaces.BuildTool` implementations."""

    tool_name: str = ""

    @property
    def name(self) -> str:
        return self.tool_name

    def execute(self, command: ResolvedCommand, session: DispatchSession) -> int:
        """Run ``command`` in the working directory it was resolved from."""

        return execute_command(command, session)


__all__ = [
    "BaseTool",
    "CommandPlan",
    "DebugDetails",
    "DispatchSession",
    "ExecutableNames",
    "ResolvedCommand",
    "ToolCandidate",
    "compact",
    "ensure_executable",
    "execute_command",
    "find_wrapper",
    "project_not_found",
    "resolve_executable",
    "should_replace",
]
