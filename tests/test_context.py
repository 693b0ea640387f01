# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the process-backed filesystem context."""

from __future__ import annotations

from pathlib import Path

from gum.context import SystemContext, home_from_env, paths_from_env


def test_paths_from_posix_env() -> None:
    env = {"PATH": "/usr/bin::/opt/bin"}

    assert paths_from_env(env, windows=False) == (Path("/usr/bin"), Path("/opt/bin"))


def test_paths_from_windows_env() -> None:
    env = {"Path": "C:\\tools;;D:\\jdk\\bin", "PATH": "/ignored"}

    assert paths_from_env(env, windows=True) == (Path("C:\\tools"), Path("D:\\jdk\\bin"))


def test_home_from_env(tmp_path: Path) -> None:
    assert home_from_env({"HOME": str(tmp_path)}, windows=False) == tmp_path
    assert home_from_env({"APPDATA": str(tmp_path)}, windows=True) == tmp_path
    assert home_from_env({}, windows=False) == Path.home()


def test_list_dir_is_sorted_and_tolerates_files(workspace) -> None:
    workspace.touch("b.txt")
    workspace.touch("a.txt")
    context = workspace.context()

    assert [path.name for path in context.list_dir(workspace.root)] == ["a.txt", "b.txt"]
    assert context.list_dir(workspace.root / "a.txt") == ()


def test_executable_bit(workspace) -> None:
    script = workspace.executable("run.sh")
    plain = workspace.touch("plain.txt")
    plain.chmod(0o644)
    context = workspace.context()

    assert context.is_executable(script)
    assert not context.is_executable(plain)
    assert workspace.context(windows=True).is_executable(plain)


def test_with_explicit_returns_copy(workspace) -> None:
    context = workspace.context()
    forced = context.with_explicit(True)

    assert forced.explicit
    assert not context.explicit
    assert isinstance(forced, SystemContext)
