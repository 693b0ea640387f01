# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from gum.config import (
    DEFAULT_BACH_VERSION,
    DEFAULT_DISCOVERY,
    ConfigError,
    ConfigFragment,
    ConfigLoader,
    TomlConfigSource,
    merge_fragments,
    render_config,
    user_config_path,
)


def test_defaults_without_any_file(workspace) -> None:
    loader = ConfigLoader.for_context(workspace.context())

    cfg = loader.load(workspace.root)

    assert cfg.general.quiet is False
    assert cfg.general.debug is False
    assert cfg.general.discovery_order() == DEFAULT_DISCOVERY
    assert cfg.gradle.replace is True
    assert cfg.gradle.mappings["verify"] == "build"
    assert cfg.maven.mvnd is False
    assert cfg.maven.mappings["build"] == "verify"
    assert cfg.jbang.discovery_order() == ("java", "jsh", "jar")
    assert cfg.jbang.launch_files is True
    assert cfg.jbang.launch_remote is True
    assert cfg.bach.version == DEFAULT_BACH_VERSION


def test_project_values_override_user_values(workspace) -> None:
    (workspace.home / ".gm.toml").write_text(
        """
[general]
quiet = true
discovery = ["maven", "gradle"]

[gradle]
mappings = { verify = "check", fmt = "spotlessApply" }

[maven]
mvnd = true
""".strip(),
        encoding="utf-8",
    )
    workspace.touch(
        ".gm.toml",
        """
[general]
quiet = false

[gradle]
mappings = { verify = "test" }
""".strip(),
    )

    cfg = ConfigLoader.for_context(workspace.context()).load(workspace.root)

    assert cfg.general.quiet is False
    assert cfg.general.discovery_order() == ("maven", "gradle")
    assert cfg.gradle.mappings["verify"] == "test"
    assert cfg.gradle.mappings["fmt"] == "spotlessApply"
    assert cfg.gradle.mappings["compile"] == "classes"
    assert cfg.maven.mvnd is True


def test_disabling_defaults_drops_builtin_mappings() -> None:
    project = ConfigFragment.model_validate({"maven": {"defaults": False, "mappings": {"ship": "deploy"}}})

    cfg = merge_fragments(project, ConfigFragment())

    assert cfg.maven.mappings == {"ship": "deploy"}
    assert cfg.gradle.mappings["verify"] == "build"


def test_discovery_entries_are_normalised() -> None:
    fragment = ConfigFragment.model_validate({"general": {"discovery": [" Maven", "GRADLE"]}})

    assert fragment.general.discovery == ["maven", "gradle"]


def test_unknown_discovery_entry_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / ".gm.toml"
    path.write_text('[general]\ndiscovery = ["sbt"]\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="sbt"):
        TomlConfigSource(path).load_fragment()


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / ".gm.toml"
    path.write_text("[general\nquiet = true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        TomlConfigSource(path).load()


def test_user_file_is_read_once(workspace, monkeypatch: pytest.MonkeyPatch) -> None:
    loader = ConfigLoader.for_context(workspace.context())
    calls: list[int] = []
    original = TomlConfigSource.load_fragment

    def counting(self: TomlConfigSource) -> ConfigFragment:
        calls.append(1)
        return original(self)

    monkeypatch.setattr(TomlConfigSource, "load_fragment", counting)
    loader.load(workspace.mkdir("a"))
    loader.load(workspace.mkdir("b"))
    loader.load(workspace.mkdir("a"))

    # one user read plus one project read per distinct root
    assert len(calls) == 3


def test_user_config_location_per_platform(workspace) -> None:
    assert user_config_path(workspace.context()) == workspace.home / ".gm.toml"
    assert user_config_path(workspace.context(windows=True)) == workspace.home / "Gum" / "gm.toml"


def test_render_config_round_trips_through_toml(workspace) -> None:
    workspace.touch(".gm.toml", '[gradle]\nmappings = { "a:b" = "c" }\n[bach]\nversion = "16.0"\n')
    cfg = ConfigLoader.for_context(workspace.context()).load(workspace.root)

    rendered = tomllib.loads(render_config(cfg))

    assert rendered["general"]["discovery"] == []
    assert rendered["gradle"]["mappings"]["a:b"] == "c"
    assert rendered["maven"]["mvnd"] is False
    assert rendered["bach"]["version"] == "16.0"
