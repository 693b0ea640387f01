# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Gradle project discovery and command assembly."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..arguments import NEAREST, ParsedArguments, extract_flag_value
from ..config import Config
from ..config.models import GRADLE
from ..interfaces import Context
from ..mappings import remap_goals
from ..search import absolute_path, find_in_dir, find_upward, iter_ancestors
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

GRADLE_NAMES: Final[ExecutableNames] = ExecutableNames(
    label="Gradle",
    binary="gradle",
    binary_suffix=".bat",
    install_url="https://gradle.org/docs/current/userguide/installation.html",
    wrapper="gradlew",
    wrapper_suffix=".bat",
    wrapper_url="https://gradle.org/docs/current/userguide/gradle_wrapper.html",
)

PROJECT_DIR_FLAGS: Final[tuple[str, ...]] = ("-p", "--project-dir")
BUILD_FILE_FLAGS: Final[tuple[str, ...]] = ("-b", "--build-file")
SETTINGS_FILE_FLAGS: Final[tuple[str, ...]] = ("-c", "--settings-file")

SETTINGS_FILES: Final[tuple[str, ...]] = ("settings.gradle", "settings.gradle.kts")
ROOT_BUILD_FILES: Final[tuple[str, ...]] = ("build.gradle", "build.gradle.kts")


def build_file_names(directory: Path) -> tuple[str, ...]:
    """Return the Gradle build file names probed in ``directory``, in priority order."""

    return (*ROOT_BUILD_FILES, f"{directory.name}.gradle", f"{directory.name}.gradle.kts")


def find_build_file(context: Context, start: Path) -> Path | None:
    """Return the nearest Gradle build file at or above ``start``."""

    return find_upward(context, start, build_file_names)


def find_settings_file(context: Context, start: Path) -> Path | None:
    """Return the nearest ``settings.gradle(.kts)`` at or above ``start``."""

    return find_upward(context, start, SETTINGS_FILES)


def find_root_build_file(context: Context, start: Path, settings_file: Path | None) -> Path | None:
    """Return the build file of the enclosing multi-project build.

    The walk begins at the parent of ``start``. When a settings file is known
    it bounds the search: directories above the settings directory are never
    probed and the walk ends once the settings directory has been checked.

    Args:
        context: Filesystem probe.
        start: Working directory.
        settings_file: Discovered settings file, if any.

    Returns:
        Path | None: Root build file, ``None`` when none lies within bounds.
    """

    bound = settings_file.parent if settings_file is not None else None
    for directory in iter_ancestors(absolute_path(start).parent):
        if bound is not None and not directory.is_relative_to(bound):
            return None
        found = find_in_dir(context, directory, ROOT_BUILD_FILES)
        if found is not None:
            return found
        if directory == bound:
            return None
    return None


@dataclass(frozen=True, slots=True)
class ExplicitGradlePaths:
    """Path-valued Gradle flags pulled out of the user's arguments."""

    project_dir: Path | None
    build_file: Path | None
    settings_file: Path | None
    args: ParsedArguments


def _extract(
    working_dir: Path,
    names: Sequence[str],
    args: ParsedArguments,
    *,
    include_positional: bool,
) -> tuple[Path | None, ParsedArguments]:
    extraction = extract_flag_value(names, args.tool_args)
    if extraction.found:
        return absolute_path(working_dir / extraction.value), args.with_tool_args(extraction.remaining)
    if include_positional:
        extraction = extract_flag_value(names, args.positional_args)
        if extraction.found:
            return absolute_path(working_dir / extraction.value), args.with_positional_args(extraction.remaining)
    return None, args


def extract_explicit_paths(working_dir: Path, args: ParsedArguments) -> ExplicitGradlePaths:
    """Consume ``-p``, then ``-b``, then ``-c`` from ``args``.

    Build and settings file flags are also accepted among the goals since
    Gradle allows them after task names.
    """

    project_dir, args = _extract(working_dir, PROJECT_DIR_FLAGS, args, include_positional=False)
    build_file, args = _extract(working_dir, BUILD_FILE_FLAGS, args, include_positional=True)
    settings_file, args = _extract(working_dir, SETTINGS_FILE_FLAGS, args, include_positional=True)
    return ExplicitGradlePaths(project_dir=project_dir, build_file=build_file, settings_file=settings_file, args=args)


def resolve_root_dir(
    context: Context,
    working_dir: Path,
    explicit: ExplicitGradlePaths,
    *,
    build_file: Path | None,
    root_build_file: Path | None,
    settings_file: Path | None,
) -> Path:
    """Derive the project root from the highest-precedence path that exists.

    Explicit paths the user named but that are missing are skipped, so the
    root falls back to what discovery found.
    """

    if explicit.project_dir is not None and context.file_exists(explicit.project_dir):
        return explicit.project_dir
    for path in (explicit.build_file, root_build_file, explicit.settings_file, settings_file, build_file):
        if path is not None and context.file_exists(path):
            return path.parent
    return absolute_path(working_dir)


class GradleTool(BaseTool):
    """Claim Gradle builds and run them through ``gradlew`` or ``gradle``."""

    tool_name = GRADLE

    def locate(
        self,
        context: Context,
        args: ParsedArguments,
        session: DispatchSession,
    ) -> tuple[ToolCandidate, ParsedArguments] | None:
        """Find the Gradle files governing the working directory.

        Args:
            context: Filesystem probe describing the invocation.
            args: Classified arguments; explicit path flags are consumed.
            session: Session used to report the partial-project notices.

        Returns:
            tuple[ToolCandidate, ParsedArguments] | None: Located files and the
            remaining arguments, ``None`` when no Gradle project applies.

        Raises:
            ProjectNotFoundError: If Gradle was forced and nothing was found.
        """

        pwd = absolute_path(context.working_dir)
        explicit = extract_explicit_paths(pwd, args)
        settings_file = find_settings_file(context, pwd)
        build_file = find_build_file(context, pwd)
        root_build_file = find_root_build_file(context, pwd, settings_file)
        root_dir = resolve_root_dir(
            context,
            pwd,
            explicit,
            build_file=build_file,
            root_build_file=root_build_file,
            settings_file=settings_file,
        )
        candidate = ToolCandidate(
            root_dir=root_dir,
            build_file=build_file,
            root_build_file=root_build_file or build_file,
            settings_file=settings_file,
            explicit_build_file=explicit.build_file,
            explicit_settings_file=explicit.settings_file,
            explicit_project_dir=explicit.project_dir,
        )
        if explicit.project_dir is not None or explicit.build_file is not None:
            return candidate, explicit.args
        if build_file is None:
            logger = session.logger_for(session.config_for(root_dir, explicit.args))
            if explicit.settings_file is not None:
                logger.info(f"Did not find a suitable Gradle build file but {explicit.settings_file} is specified")
            elif settings_file is not None:
                logger.info(f"Did not find a suitable Gradle build file but found {settings_file}")
            else:
                LOGGER.debug("no Gradle build or settings file above %s", pwd)
                project_not_found(context, "Gradle")
                return None
        return candidate, explicit.args

    def assemble(
        self,
        context: Context,
        candidate: ToolCandidate,
        args: ParsedArguments,
        config: Config,
        executable: Path,
    ) -> CommandPlan:
        """Build the Gradle argument vector and banner for ``candidate``."""

        plan = CommandPlan(banner=[f"Using gradle at '{executable}'"], tool_args=args.tool_args)
        goals = args.positional_args
        if should_replace(args, config.gradle.replace):
            goals = remap_goals(goals, config.gradle.mappings, sub_match=True)
        plan.goals = goals

        if candidate.explicit_project_dir is not None:
            plan.add_leading("-p", str(candidate.explicit_project_dir))
            plan.add_banner(f"to run project at '{candidate.explicit_project_dir}':")
            return plan

        build_file = candidate.explicit_build_file
        if build_file is None:
            build_file = candidate.build_file if args.has_flag(NEAREST) else candidate.root_build_file
        if build_file is not None:
            plan.add_leading("-b", str(build_file))
            plan.add_banner(f"to run buildFile '{build_file}':")

        settings_file = candidate.explicit_settings_file
        if settings_file is not None:
            plan.add_leading("-c", str(settings_file))
        elif candidate.settings_file is not None:
            settings_dir = candidate.settings_file.parent
            if settings_dir not in (candidate.root_dir, absolute_path(context.working_dir)):
                plan.add_leading("-c", str(candidate.settings_file))
            settings_file = candidate.settings_file
        if build_file is None and settings_file is not None:
            plan.add_banner(f"with settings at '{settings_file}':")
        return plan

    def try_resolve(
        self,
        context: Context,
        args: ParsedArguments,
        session: DispatchSession,
    ) -> ResolvedCommand | None:
        located = self.locate(context, args, session)
        if located is None:
            return None
        candidate, args = located
        config = session.config_for(candidate.root_dir, args)
        start = candidate.explicit_project_dir or absolute_path(context.working_dir)
        executable = resolve_executable(
            context,
            GRADLE_NAMES,
            session.logger_for(config),
            wrapper=find_wrapper(context, GRADLE_NAMES, start),
        )
        if executable is None:
            return None
        plan = self.assemble(context, candidate, args, config, executable)
        details = (
            ("nearest", args.has_flag(NEAREST)),
            ("replace", should_replace(args, config.gradle.replace)),
            ("pwd", context.working_dir),
            ("rootDir", candidate.root_dir),
            ("rootBuildFile", candidate.root_build_file),
            ("buildFile", candidate.build_file),
            ("settingsFile", candidate.settings_file),
            ("explicitBuildFile", candidate.explicit_build_file),
            ("explicitSettingsFile", candidate.explicit_settings_file),
            ("explicitProjectDir", candidate.explicit_project_dir),
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
    "GRADLE_NAMES",
    "ExplicitGradlePaths",
    "GradleTool",
    "build_file_names",
    "extract_explicit_paths",
    "find_build_file",
    "find_root_build_file",
    "find_settings_file",
    "resolve_root_dir",
]
