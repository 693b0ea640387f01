# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""jbang single-file launcher support."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..arguments import FLAG_PREFIX, ParsedArguments
from ..config import Config
from ..config.models import JAR_SOURCE, JAVA_SOURCE, JBANG, JSH_SOURCE
from ..interfaces import Context
from ..search import absolute_path, find_in_dir
from .base import (
    BaseTool,
    CommandPlan,
    DispatchSession,
    ExecutableNames,
    ResolvedCommand,
    project_not_found,
    resolve_executable,
)

JBANG_NAMES: Final[ExecutableNames] = ExecutableNames(
    label="jbang",
    binary="jbang",
    binary_suffix=".cmd",
    install_url="https://github.com/jbangdev",
    wrapper="jbang",
    wrapper_suffix=".cmd",
    wrapper_url="https://github.com/jbangdev",
)

SOURCE_EXTENSIONS: Final[dict[str, str]] = {
    JAVA_SOURCE: ".java",
    JSH_SOURCE: ".jsh",
    JAR_SOURCE: ".jar",
}
REMOTE_PREFIXES: Final[tuple[str, ...]] = ("http:", "https:", "file:")
_ALIAS_RE: Final[re.Pattern[str]] = re.compile(r".+@.+")
_COORDINATES_RE: Final[re.Pattern[str]] = re.compile(r".+:.+:.+")


def is_source_file(value: str) -> bool:
    """Return ``True`` when ``value`` names a file jbang can launch, judged by extension."""

    return value.endswith(tuple(SOURCE_EXTENSIONS.values()))


def is_remote_target(value: str) -> bool:
    """Return ``True`` for URLs, ``alias@catalog`` references and Maven coordinates."""

    if value.startswith(REMOTE_PREFIXES):
        return True
    return bool(_ALIAS_RE.search(value) or _COORDINATES_RE.search(value))


def find_explicit_source(working_dir: Path, args: ParsedArguments, config: Config) -> str | None:
    """Return the launch target named by the first goal, if it is one.

    Args:
        working_dir: Directory relative file names are resolved against.
        args: Classified arguments.
        config: Configuration toggling the file and remote recognisers.

    Returns:
        str | None: Remote target verbatim, or an absolute source file path.
    """

    first = next((arg for arg in args.positional_args if not arg.startswith(FLAG_PREFIX)), None)
    if not first:
        return None
    if config.jbang.launch_remote and is_remote_target(first):
        return first
    if config.jbang.launch_files and is_source_file(first):
        return str(absolute_path(working_dir / first))
    return None


def find_source_file(context: Context, directory: Path, config: Config) -> Path | None:
    """Return the launchable source in ``directory`` preferred by the discovery order.

    Only ``directory`` itself is scanned. Within one extension the
    alphabetically first file wins.
    """

    entries = [entry for entry in context.list_dir(directory) if is_source_file(entry.name)]
    for kind in config.jbang.discovery_order():
        extension = SOURCE_EXTENSIONS[kind]
        for entry in entries:
            if entry.name.endswith(extension):
                return absolute_path(entry)
    return None


@dataclass(frozen=True, slots=True)
class JbangSource:
    """What jbang is asked to launch."""

    source: str
    explicit: bool
    root_dir: Path


def locate_source(context: Context, args: ParsedArguments, config: Config) -> JbangSource | None:
    """Return the explicit launch target, or the source discovered in the working directory."""

    pwd = absolute_path(context.working_dir)
    explicit = find_explicit_source(pwd, args, config)
    if explicit is not None:
        explicit_path = Path(explicit)
        root_dir = explicit_path.parent if explicit_path.is_absolute() and context.file_exists(explicit_path) else pwd
        return JbangSource(source=explicit, explicit=True, root_dir=root_dir)
    discovered = find_source_file(context, pwd, config)
    if discovered is None:
        return None
    return JbangSource(source=str(discovered), explicit=False, root_dir=discovered.parent)


class JbangTool(BaseTool):
    """Claim directories holding a launchable Java source, script or jar."""

    tool_name = JBANG

    def try_resolve(
        self,
        context: Context,
        args: ParsedArguments,
        session: DispatchSession,
    ) -> ResolvedCommand | None:
        pwd = absolute_path(context.working_dir)
        located = locate_source(context, args, session.config_for(pwd, args))
        if located is None:
            project_not_found(context, "jbang")
            return None
        config = session.config_for(located.root_dir, args)
        wrapper_name = JBANG_NAMES.wrapper_name(context)
        executable = resolve_executable(
            context,
            JBANG_NAMES,
            session.logger_for(config),
            wrapper=find_in_dir(context, pwd, (wrapper_name,)) if wrapper_name else None,
        )
        if executable is None:
            return None

        plan = CommandPlan(
            banner=[f"Using jbang at '{executable}'", f"to run '{located.source}':"],
            tool_args=args.tool_args,
            goals=args.positional_args,
        )
        if not located.explicit:
            plan.add_trailing(located.source)
        details = (
            ("discovery", list(config.jbang.discovery_order())),
            ("pwd", context.working_dir),
            ("sourceFile", None if located.explicit else located.source),
            ("explicitSourceFile", located.source if located.explicit else None),
            ("original args", list(args.positional_args)),
        )
        return ResolvedCommand(
            tool=self.tool_name,
            executable=executable,
            args=plan.to_args(),
            root_dir=located.root_dir,
            config=config,
            banner=plan.banner_text(),
            context=context,
            details=details,
        )


__all__ = [
    "JBANG_NAMES",
    "JbangSource",
    "JbangTool",
    "find_explicit_source",
    "find_source_file",
    "is_remote_target",
    "is_source_file",
    "locate_source",
]
