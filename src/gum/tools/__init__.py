# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public exports for build tool implementations and registry helpers."""

from .ant import AntTool
from .bach import BachTool
from .base import CommandPlan, DispatchSession, ResolvedCommand, ToolCandidate
from .gradle import GradleTool
from .jbang import JbangTool
from .maven import MavenTool
from .registry import ToolRegistry, default_registry

__all__ = [
    "AntTool",
    "BachTool",
    "CommandPlan",
    "DispatchSession",
    "GradleTool",
    "JbangTool",
    "MavenTool",
    "ResolvedCommand",
    "ToolCandidate",
    "ToolRegistry",
    "default_registry",
]
