# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for quiet and debug handling in the console reporter."""

from __future__ import annotations

import pytest

from gum.logging import GumLogger, detect_tty


def test_quiet_drops_everything_but_echo(capsys: pytest.CaptureFixture[str]) -> None:
    logger = GumLogger(quiet=True, debug_enabled=False)

    logger.banner("Using gradle")
    logger.info("hint")
    logger.warn("warning")
    logger.fail("failure")
    logger.echo("gm 1.0")

    assert capsys.readouterr().out == "gm 1.0\n"


def test_messages_are_plain_without_terminal(capsys: pytest.CaptureFixture[str]) -> None:
    logger = GumLogger()

    logger.banner("Using maven at '/opt/maven/bin/mvn' to run buildFile '/work/pom.xml':")
    logger.warn("No mvn found in path. Please install Maven.")

    assert not detect_tty()
    assert capsys.readouterr().out.splitlines() == [
        "Using maven at '/opt/maven/bin/mvn' to run buildFile '/work/pom.xml':",
        "No mvn found in path. Please install Maven.",
    ]


def test_debug_dump_only_when_enabled(capsys: pytest.CaptureFixture[str]) -> None:
    GumLogger().dump((("rootDir", "/work"),))
    assert capsys.readouterr().out == ""

    GumLogger().configured(quiet=True, debug=True).dump((("rootDir", "/work"), ("actual args", ["build"])))

    assert capsys.readouterr().out.splitlines() == [
        "[debug] rootDir=/work",
        "[debug] actual args=['build']",
    ]
