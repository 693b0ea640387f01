# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry mapping tool identifiers to :class:`~gum.interfaces.BuildTool` instances."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from ..interfaces import BuildTool
from .ant import AntTool
from .bach import BachTool
from .gradle import GradleTool
from .jbang import JbangTool
from .maven import MavenTool


class ToolRegistry(Mapping[str, BuildTool]):
    """Read-only mapping of tool names to tools, iterated in registration order."""

    def __init__(self, tools: Iterable[BuildTool] = ()) -> None:
        self._tools: dict[str, BuildTool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: BuildTool) -> None:
        """Register ``tool`` under its name.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool

    def ordered(self, names: Sequence[str]) -> tuple[BuildTool, ...]:
        """Return the registered tools named in ``names``, in that order.

        Unknown and repeated names are skipped.
        """

        seen: set[str] = set()
        selected: list[BuildTool] = []
        for name in names:
            tool = self._tools.get(name)
            if tool is None or name in seen:
                continue
            seen.add(name)
            selected.append(tool)
        return tuple(selected)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __getitem__(self, name: str) -> BuildTool:
        return self._tools[name]


def default_registry() -> ToolRegistry:
    """Return a registry holding every built-in tool."""

    return ToolRegistry((GradleTool(), MavenTool(), AntTool(), BachTool(), JbangTool()))


__all__ = ["ToolRegistry", "default_registry"]
