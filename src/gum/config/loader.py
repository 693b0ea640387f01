# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with project-over-user precedence."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from ..interfaces import Context
from ..mappings import GRADLE_DEFAULT_MAPPINGS, MAVEN_DEFAULT_MAPPINGS, merge_mappings
from ..search import absolute_path
from .models import (
    BachSection,
    Config,
    ConfigFragment,
    GeneralSection,
    GradleSection,
    JbangSection,
    MavenSection,
)
from .sources import (
    PROJECT_CONFIG_NAME,
    USER_CONFIG_NAME,
    WINDOWS_USER_CONFIG_DIR,
    WINDOWS_USER_CONFIG_NAME,
    TomlConfigSource,
)

ValueT = TypeVar("ValueT")


def _pick(project: ValueT | None, user: ValueT | None, default: ValueT) -> ValueT:
    if project is not None:
        return project
    if user is not None:
        return user
    return default


def merge_fragments(project: ConfigFragment, user: ConfigFragment) -> Config:
    """Resolve a :class:`Config` from a project fragment layered over a user fragment.

    Each field takes the project value when set, then the user value, then the
    built-in default. Goal mapping tables are merged key by key: defaults (when
    enabled) first, then user entries, then project entries.

    Args:
        project: Settings read from the project's ``.gm.toml``.
        user: Settings read from the user's configuration file.

    Returns:
        Config: Immutable merged configuration.
    """

    general = GeneralSection(
        quiet=_pick(project.general.quiet, user.general.quiet, False),
        debug=_pick(project.general.debug, user.general.debug, False),
        discovery=tuple(_pick(project.general.discovery, user.general.discovery, [])),
    )

    gradle_defaults = _pick(project.gradle.defaults, user.gradle.defaults, True)
    gradle = GradleSection(
        replace=_pick(project.gradle.replace, user.gradle.replace, True),
        defaults=gradle_defaults,
        mappings=merge_mappings(
            GRADLE_DEFAULT_MAPPINGS if gradle_defaults else None,
            user.gradle.mappings,
            project.gradle.mappings,
        ),
    )

    maven_defaults = _pick(project.maven.defaults, user.maven.defaults, True)
    maven = MavenSection(
        replace=_pick(project.maven.replace, user.maven.replace, True),
        defaults=maven_defaults,
        mvnd=_pick(project.maven.mvnd, user.maven.mvnd, False),
        mappings=merge_mappings(
            MAVEN_DEFAULT_MAPPINGS if maven_defaults else None,
            user.maven.mappings,
            project.maven.mappings,
        ),
    )

    jbang = JbangSection(
        discovery=tuple(_pick(project.jbang.discovery, user.jbang.discovery, [])),
        launch_files=_pick(project.jbang.launch_files, user.jbang.launch_files, True),
        launch_remote=_pick(project.jbang.launch_remote, user.jbang.launch_remote, True),
    )

    bach = BachSection(version=_pick(project.bach.version, user.bach.version, BachSection().version))

    return Config(general=general, gradle=gradle, maven=maven, jbang=jbang, bach=bach)


def user_config_path(context: Context) -> Path:
    """Return the location of the user-level configuration file.

    Args:
        context: Filesystem probe exposing the home directory and platform.

    Returns:
        Path: ``~/.gm.toml``, or ``%APPDATA%\\Gum\\gm.toml`` on Windows.
    """

    if context.windows:
        return context.home_dir / WINDOWS_USER_CONFIG_DIR / WINDOWS_USER_CONFIG_NAME
    return context.home_dir / USER_CONFIG_NAME


def project_config_path(root: Path) -> Path:
    """Return the location of the project-level configuration file under ``root``."""

    return root / PROJECT_CONFIG_NAME


class ConfigLoader:
    """Build configurations for one dispatch session.

    The user-level file is read once per loader; project files are read per
    root directory and cached, since every tool derives its own root.
    """

    def __init__(self, *, user_source: TomlConfigSource) -> None:
        """Initialise the loader around the user-level source.

        Args:
            user_source: Source for the user-level configuration file.
        """

        self._user_source = user_source
        self._user_fragment: ConfigFragment | None = None
        self._by_root: dict[Path, Config] = {}

    @classmethod
    def for_context(cls, context: Context) -> ConfigLoader:
        """Return a loader reading the user file appropriate for ``context``.

        Args:
            context: Filesystem probe describing the platform and home directory.

        Returns:
            ConfigLoader: Loader bound to the user configuration location.
        """

        return cls(user_source=TomlConfigSource(user_config_path(context)))

    @property
    def user_fragment(self) -> ConfigFragment:
        """Return the parsed user-level fragment, reading it on first access."""

        if self._user_fragment is None:
            self._user_fragment = self._user_source.load_fragment()
        return self._user_fragment

    def load(self, root: Path | None = None) -> Config:
        """Return the configuration for a project rooted at ``root``.

        Args:
            root: Project root directory; only the user file is consulted when
                ``None``.

        Returns:
            Config: Merged configuration.

        Raises:
            ConfigError: If either file is malformed.
        """

        if root is None:
            return merge_fragments(ConfigFragment(), self.user_fragment)
        key = absolute_path(root)
        if key not in self._by_root:
            project = TomlConfigSource(project_config_path(key)).load_fragment()
            self._by_root[key] = merge_fragments(project, self.user_fragment)
        return self._by_root[key]


__all__ = [
    "ConfigLoader",
    "merge_fragments",
    "project_config_path",
    "user_config_path",
]
