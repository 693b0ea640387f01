# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the upward directory walks and PATH lookups."""

from __future__ import annotations

from pathlib import Path

from gum.context import SystemContext, home_from_env, paths_from_env
from gum.search import (
    find_marker_dir,
    find_on_path,
    find_upward,
    iter_ancestors,
    platform_name,
)


def test_iter_ancestors_stops_before_filesystem_root(tmp_path: Path) -> None:
    ancestors = list(iter_ancestors(tmp_path))

    assert ancestors[0] == tmp_path
    assert Path(tmp_path.anchor) not in ancestors
    assert all(parent.parent != parent for parent in ancestors)


def test_find_upward_prefers_nearest(workspace) -> None:
    workspace.touch("pom.xml")
    nested = workspace.touch("module/pom.xml")
    start = workspace.mkdir("module/src/main")

    found = find_upward(workspace.context(), start, ("pom.xml",))

    assert found == nested


def test_find_upward_respects_candidate_order(workspace) -> None:
    workspace.touch("app/build.gradle.kts")
    groovy = workspace.touch("app/build.gradle")

    found = find_upward(workspace.context(), workspace.root / "app", ("build.gradle", "build.gradle.kts"))

    assert found == groovy


def test_find_upward_accepts_callable_candidates(workspace) -> None:
    named = workspace.touch("app/app.gradle")

    found = find_upward(
        workspace.context(),
        workspace.root / "app",
        lambda directory: (f"{directory.name}.gradle",),
    )

    assert found == named


def test_find_upward_returns_none_without_match(workspace) -> None:
    assert find_upward(workspace.context(), workspace.root, ("does-not-exist.marker",)) is None


def test_find_marker_dir_returns_directory(workspace) -> None:
    workspace.mkdir("project/.bach")
    start = workspace.mkdir("project/src")

    assert find_marker_dir(workspace.context(), start, ".bach") == workspace.root / "project"


def test_find_on_path_scans_entries_in_order(workspace, tmp_path: Path) -> None:
    first = tmp_path / "first"
    first.mkdir()
    workspace.install("gradle")
    (first / "gradle").write_text("", encoding="utf-8")

    found = find_on_path(workspace.context(paths=(first, workspace.bin_dir)), "gradle")

    assert found == first / "gradle"


def test_platform_name_appends_windows_suffix(workspace) -> None:
    assert platform_name(workspace.context(windows=True), "mvnw", ".cmd") == "mvnw.cmd"
    assert platform_name(workspace.context(windows=False), "mvnw", ".cmd") == "mvnw"


def test_paths_from_env_uses_platform_variable() -> None:
    env = {"PATH": "/usr/bin::/opt/bin", "Path": "C:\\tools"}

    assert paths_from_env(env, windows=False) == (Path("/usr/bin"), Path("/opt/bin"))
    assert paths_from_env(env, windows=True) == (Path("C:\\tools"),)


def test_home_from_env_prefers_variables(tmp_path: Path) -> None:
    assert home_from_env({"HOME": str(tmp_path)}, windows=False) == tmp_path
    assert home_from_env({"APPDATA": str(tmp_path)}, windows=True) == tmp_path


def test_system_context_checks_execute_bit(workspace) -> None:
    script = workspace.executable("gradlew")
    plain = workspace.touch("notes.txt")
    context = workspace.context()

    assert context.is_executable(script)
    assert not context.is_executable(plain)
    assert workspace.context(windows=True).is_executable(plain)


def test_system_context_lists_directory_sorted(workspace) -> None:
    workspace.touch("b.java")
    workspace.touch("a.java")

    entries = workspace.context().list_dir(workspace.root)

    assert [entry.name for entry in entries] == ["a.java", "b.java"]
    assert SystemContext().list_dir(workspace.root / "missing") == ()
