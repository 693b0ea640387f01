# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end dispatch tests with the process runner replaced."""

from __future__ import annotations

import tomllib

import pytest

from gum.arguments import parse_arguments
from gum.dispatcher import NO_PROJECT_MESSAGE, Dispatcher
from gum.errors import AmbiguousFlagsError, NotExecutableError, ProjectNotFoundError
from gum.tools import ToolRegistry
from gum.tools.maven import MavenTool


def _dispatch(workspace, tokens, cwd=""):
    dispatcher = Dispatcher(context=workspace.context(cwd))
    return dispatcher.dispatch(parse_arguments(tokens))


def test_maven_project_runs_global_mvn(workspace, recorded_run) -> None:
    pom = workspace.touch("pom.xml")
    mvn = workspace.install("mvn")

    assert _dispatch(workspace, ["build"]) == 0
    assert recorded_run.calls == [((str(mvn), "-f", str(pom), "verify"), workspace.root)]


def test_two_force_flags_are_rejected(workspace, recorded_run) -> None:
    workspace.touch("pom.xml")
    workspace.install("mvn")

    with pytest.raises(AmbiguousFlagsError) as excinfo:
        _dispatch(workspace, ["-gg", "-gm", "build"])

    assert str(excinfo.value) == "You cannot define -gg, -gm flags at the same time"
    assert excinfo.value.exit_code == 1
    assert recorded_run.calls == []


def test_nothing_found_fails(workspace, recorded_run) -> None:
    with pytest.raises(ProjectNotFoundError, match=NO_PROJECT_MESSAGE):
        _dispatch(workspace, ["build"])

    assert recorded_run.calls == []


def test_gradle_wins_by_default(workspace, recorded_run) -> None:
    workspace.touch("build.gradle")
    workspace.touch("pom.xml")
    gradle = workspace.install("gradle")
    workspace.install("mvn")

    _dispatch(workspace, ["build"])

    assert recorded_run.calls[0][0][0] == str(gradle)


def test_discovery_order_from_config(workspace, recorded_run) -> None:
    workspace.touch("build.gradle")
    workspace.touch("pom.xml")
    workspace.touch(".gm.toml", '[general]\ndiscovery = ["maven", "gradle"]\n')
    workspace.install("gradle")
    mvn = workspace.install("mvn")

    _dispatch(workspace, ["build"])

    assert recorded_run.calls[0][0][0] == str(mvn)


def test_missing_tool_falls_through_to_next(workspace, recorded_run) -> None:
    workspace.touch("build.gradle")
    pom = workspace.touch("pom.xml")
    mvn = workspace.install("mvn")

    _dispatch(workspace, ["-gq", "verify"])

    assert recorded_run.calls[0][0] == (str(mvn), "-f", str(pom), "verify")


def test_force_flag_selects_tool(workspace, recorded_run) -> None:
    workspace.touch("build.gradle")
    workspace.touch("pom.xml")
    workspace.install("gradle")
    mvn = workspace.install("mvn")

    _dispatch(workspace, ["-gm", "-gq", "verify"])

    assert recorded_run.calls[0][0][0] == str(mvn)


def test_forced_tool_without_project_fails(workspace, recorded_run) -> None:
    workspace.touch("pom.xml")
    workspace.install("mvn")
    workspace.install("ant")

    with pytest.raises(ProjectNotFoundError, match="No Ant project found"):
        _dispatch(workspace, ["-ga", "jar"])


def test_child_exit_code_is_returned(workspace, recorded_run) -> None:
    workspace.touch("pom.xml")
    workspace.install("mvn")
    recorded_run.exit_code = 3

    assert _dispatch(workspace, ["verify"]) == 3


def test_not_executable_binary_is_fatal(workspace, recorded_run) -> None:
    workspace.touch("pom.xml")
    mvn = workspace.install("mvn")
    mvn.chmod(0o644)

    with pytest.raises(NotExecutableError):
        _dispatch(workspace, ["verify"])

    assert recorded_run.calls == []


def test_show_config_prints_and_skips_execution(workspace, recorded_run, capsys) -> None:
    workspace.touch("pom.xml")
    workspace.touch(".gm.toml", "[maven]\nmvnd = true\n")
    workspace.install("mvn")

    assert _dispatch(workspace, ["-gc"]) == 0

    rendered = tomllib.loads(capsys.readouterr().out)
    assert rendered["maven"]["mvnd"] is True
    assert recorded_run.calls == []


def test_show_config_without_project(workspace, recorded_run, capsys) -> None:
    assert _dispatch(workspace, ["-gc"]) == 0

    rendered = tomllib.loads(capsys.readouterr().out)
    assert rendered["general"]["quiet"] is False


def test_banner_and_debug_dump(workspace, recorded_run, capsys) -> None:
    pom = workspace.touch("pom.xml")
    mvn = workspace.install("mvn")

    _dispatch(workspace, ["-gd", "build"])

    out = capsys.readouterr().out
    assert f"Using maven at '{mvn}' to run buildFile '{pom}':" in out
    assert f"rootDir={workspace.root}" in out
    assert "replaced args=['verify']" in out


def test_quiet_suppresses_banner(workspace, recorded_run, capsys) -> None:
    workspace.touch("pom.xml")
    workspace.install("mvn")

    _dispatch(workspace, ["-gq", "build"])

    assert capsys.readouterr().out == ""


def test_custom_registry_limits_tools(workspace, recorded_run) -> None:
    workspace.touch("build.gradle")
    workspace.install("gradle")
    dispatcher = Dispatcher(registry=ToolRegistry((MavenTool(),)), context=workspace.context())

    with pytest.raises(ProjectNotFoundError):
        dispatcher.dispatch(parse_arguments(["build"]))
