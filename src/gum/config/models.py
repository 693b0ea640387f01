# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the gm build-tool dispatcher.

Two families of models live here. ``*Fragment`` models mirror a single TOML
document and keep every scalar optional so that "not set" can be told apart
from ``false``. The resolved :class:`Config` is produced by
:func:`gum.config.loader.merge_fragments` and is immutable afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

GRADLE: Final[str] = "gradle"
MAVEN: Final[str] = "maven"
ANT: Final[str] = "ant"
BACH: Final[str] = "bach"
JBANG: Final[str] = "jbang"

KNOWN_TOOLS: Final[tuple[str, ...]] = (GRADLE, MAVEN, ANT, BACH, JBANG)
DEFAULT_DISCOVERY: Final[tuple[str, ...]] = KNOWN_TOOLS

JAVA_SOURCE: Final[str] = "java"
JSH_SOURCE: Final[str] = "jsh"
JAR_SOURCE: Final[str] = "jar"
KNOWN_SOURCE_KINDS: Final[tuple[str, ...]] = (JAVA_SOURCE, JSH_SOURCE, JAR_SOURCE)

DEFAULT_BACH_VERSION: Final[str] = "17.0-ea"


def _normalise_choices(values: Sequence[str] | None, allowed: Sequence[str], label: str) -> list[str] | None:
    """Lower-case and validate a discovery list.

    Args:
        values: Raw entries from the TOML document.
        allowed: Accepted entries.
        label: Human-readable name of the setting for error messages.

    Returns:
        list[str] | None: Normalised entries, ``None`` when the key was absent.

    Raises:
        ValueError: If an entry is not one of ``allowed``.
    """

    if values is None:
        return None
    normalised = [value.strip().lower() for value in values]
    unknown = [value for value in normalised if value not in allowed]
    if unknown:
        raise ValueError(f"Unsupported {label}: {', '.join(unknown)}")
    return normalised


class GeneralFragment(BaseModel):
    """``[general]`` table of a single configuration file."""

    model_config = ConfigDict(extra="ignore")

    quiet: bool | None = None
    debug: bool | None = None
    discovery: list[str] | None = None

    @field_validator("discovery")
    @classmethod
    def _validate_discovery(cls, value: list[str] | None) -> list[str] | None:
        return _normalise_choices(value, KNOWN_TOOLS, "tool")


class MappingFragment(BaseModel):
    """``[gradle]`` table; also the base of the ``[maven]`` table."""

    model_config = ConfigDict(extra="ignore")

    replace: bool | None = None
    defaults: bool | None = None
    mappings: dict[str, str] = Field(default_factory=dict)


class MavenFragment(MappingFragment):
    """``[maven]`` table of a single configuration file."""

    mvnd: bool | None = None


class JbangFragment(BaseModel):
    """``[jbang]`` table of a single configuration file."""

    model_config = ConfigDict(extra="ignore")

    discovery: list[str] | None = None
    launch_files: bool | None = None
    launch_remote: bool | None = None

    @field_validator("discovery")
    @classmethod
    def _validate_discovery(cls, value: list[str] | None) -> list[str] | None:
        return _normalise_choices(value, KNOWN_SOURCE_KINDS, "extension")


class BachFragment(BaseModel):
    """``[bach]`` table of a single configuration file."""

    model_config = ConfigDict(extra="ignore")

    version: str | None = None


class ConfigFragment(BaseModel):
    """One parsed configuration document (project or user level)."""

    model_config = ConfigDict(extra="ignore")

    general: GeneralFragment = Field(default_factory=GeneralFragment)
    gradle: MappingFragment = Field(default_factory=MappingFragment)
    maven: MavenFragment = Field(default_factory=MavenFragment)
    jbang: JbangFragment = Field(default_factory=JbangFragment)
    bach: BachFragment = Field(default_factory=BachFragment)


class GeneralSection(BaseModel):
    """Resolved settings shared by every tool."""

    model_config = ConfigDict(frozen=True)

    quiet: bool = False
    debug: bool = False
    discovery: tuple[str, ...] = ()

    def discovery_order(self) -> tuple[str, ...]:
        """Return the configured tool order, or the built-in order when none is set.

        Returns:
            tuple[str, ...]: Tool identifiers to try during implicit discovery.
        """

        return self.discovery or DEFAULT_DISCOVERY


class GradleSection(BaseModel):
    """Resolved Gradle task replacement settings."""

    model_config = ConfigDict(frozen=True)

    replace: bool = True
    defaults: bool = True
    mappings: dict[str, str] = Field(default_factory=dict)


class MavenSection(BaseModel):
    """Resolved Maven goal replacement and launcher settings."""

    model_config = ConfigDict(frozen=True)

    replace: bool = True
    defaults: bool = True
    mvnd: bool = False
    mappings: dict[str, str] = Field(default_factory=dict)


class JbangSection(BaseModel):
    """Resolved jbang source discovery settings."""

    model_config = ConfigDict(frozen=True)

    discovery: tuple[str, ...] = ()
    launch_files: bool = True
    launch_remote: bool = True

    def discovery_order(self) -> tuple[str, ...]:
        """Return the configured extension order, or ``java``, ``jsh``, ``jar``."""

        return self.discovery or KNOWN_SOURCE_KINDS


class BachSection(BaseModel):
    """Resolved Bach bootstrap settings."""

    model_config = ConfigDict(frozen=True)

    version: str = DEFAULT_BACH_VERSION


class Config(BaseModel):
    """Fully merged configuration for one dispatch attempt."""

    model_config = ConfigDict(frozen=True)

    general: GeneralSection = Field(default_factory=GeneralSection)
    gradle: GradleSection = Field(default_factory=GradleSection)
    maven: MavenSection = Field(default_factory=MavenSection)
    jbang: JbangSection = Field(default_factory=JbangSection)
    bach: BachSection = Field(default_factory=BachSection)

    def with_quiet(self, quiet: bool) -> Config:
        """Return a copy with ``general.quiet`` replaced."""

        return self.model_copy(update={"general": self.general.model_copy(update={"quiet": quiet})})

    def with_debug(self, debug: bool) -> Config:
        """Return a copy with ``general.debug`` replaced."""

        return self.model_copy(update={"general": self.general.model_copy(update={"debug": debug})})


__all__ = [
    "ANT",
    "BACH",
    "DEFAULT_BACH_VERSION",
    "DEFAULT_DISCOVERY",
    "GRADLE",
    "JAR_SOURCE",
    "JAVA_SOURCE",
    "JBANG",
    "JSH_SOURCE",
    "KNOWN_SOURCE_KINDS",
    "KNOWN_TOOLS",
    "MAVEN",
    "BachFragment",
    "BachSection",
    "Config",
    "ConfigFragment",
    "GeneralFragment",
    "GeneralSection",
    "GradleSection",
    "JbangFragment",
    "JbangSection",
    "MappingFragment",
    "MavenFragment",
    "MavenSection",
]
