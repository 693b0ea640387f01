# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from gum.config import ConfigLoader
from gum.context import SystemContext
from gum.logging import GumLogger
from gum.tools.base import DispatchSession


@dataclass(slots=True)
class Workspace:
    """Temporary directory tree with an isolated ``PATH`` and home directory."""

    root: Path
    bin_dir: Path
    home: Path

    def mkdir(self, relative: str) -> Path:
        path = self.root / relative
        path.mkdir(parents=True, exist_ok=True)
        return path

    def touch(self, relative: str, content: str = "") -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def executable(self, relative: str) -> Path:
        """Create an executable shell script at ``relative`` under the workspace."""

        path = self.touch(relative, "#!/bin/sh\nexit 0\n")
        path.chmod(0o755)
        return path

    def install(self, name: str) -> Path:
        """Create an executable named ``name`` in the fake ``PATH`` directory."""

        path = self.bin_dir / name
        path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        path.chmod(0o755)
        return path

    def context(
        self,
        cwd: str | Path = "",
        *,
        explicit: bool = False,
        windows: bool = False,
        paths: Sequence[Path] | None = None,
    ) -> SystemContext:
        working_dir = cwd if isinstance(cwd, Path) else self.root / cwd
        return SystemContext(
            explicit=explicit,
            windows=windows,
            working_dir=working_dir,
            paths=tuple(paths) if paths is not None else (self.bin_dir,),
            home_dir=self.home,
        )

    def session(self, *, quiet: bool = False) -> DispatchSession:
        loader = ConfigLoader.for_context(self.context())
        return DispatchSession(loader=loader, logger=GumLogger(quiet=quiet))


@dataclass(slots=True)
class RecordedRun:
    """Captures the commands handed to the process runner."""

    exit_code: int = 0
    calls: list[tuple[tuple[str, ...], Path | None]] = field(default_factory=list)

    def __call__(self, args: Sequence[str], *, cwd: Path | None = None) -> int:
        self.calls.append((tuple(args), cwd))
        return self.exit_code


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Return an empty workspace rooted at ``tmp_path / "ws"``."""

    root = tmp_path / "ws"
    bin_dir = tmp_path / "bin"
    home = tmp_path / "home"
    for directory in (root, bin_dir, home):
        directory.mkdir()
    return Workspace(root=root, bin_dir=bin_dir, home=home)


@pytest.fixture
def recorded_run(monkeypatch: pytest.MonkeyPatch) -> RecordedRun:
    """Replace the process runner so no build tool is spawned."""

    recorder = RecordedRun()
    monkeypatch.setattr("gum.tools.base.run_inherited", recorder)
    return recorder
