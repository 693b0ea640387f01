# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for command-line token classification and flag extraction."""

from __future__ import annotations

import pytest

from gum.arguments import (
    FORCE_GRADLE,
    FORCE_MAVEN,
    NEAREST,
    QUIET,
    extract_flag_value,
    parse_arguments,
)


def test_parse_empty_input() -> None:
    args = parse_arguments([])

    assert args.gum_flags == frozenset()
    assert args.tool_args == ()
    assert args.positional_args == ()


def test_parse_splits_three_regions() -> None:
    args = parse_arguments(["-gq", "-gn", "--offline", "-Pprofile", "clean", "build"])

    assert args.gum_flags == {QUIET, NEAREST}
    assert args.tool_args == ("--offline", "-Pprofile", "clean")
    assert args.positional_args == ("build",)


def test_tool_flag_with_inline_value_leaves_goals_positional() -> None:
    args = parse_arguments(["-gq", "--offline", "-Pprofile=ci", "clean", "build"])

    assert args.tool_args == ("--offline", "-Pprofile=ci")
    assert args.positional_args == ("clean", "build")


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["build"],
        ["-gq", "-gn", "--offline", "-Pprofile", "clean", "build"],
        ["--info", "-gq", "build"],
        ["-b", "other.gradle", "build", "-c", "settings.gradle"],
        ["--build-file=other.gradle", "test", "--tests", "Foo"],
        ["-gd", "-x", "test", "check", "--", "--verbose"],
    ],
)
def test_reclassifying_tool_and_positional_args_is_stable(tokens: list[str]) -> None:
    first = parse_arguments(tokens)
    second = parse_arguments([*first.tool_args, *first.positional_args])

    assert second.gum_flags == frozenset()
    assert second.tool_args == first.tool_args
    assert second.positional_args == first.positional_args


def test_tool_flag_takes_following_value() -> None:
    args = parse_arguments(["-b", "other.gradle", "build"])

    assert args.tool_args == ("-b", "other.gradle")
    assert args.positional_args == ("build",)


def test_tool_flag_with_equals_does_not_take_value() -> None:
    args = parse_arguments(["--build-file=other.gradle", "build"])

    assert args.tool_args == ("--build-file=other.gradle",)
    assert args.positional_args == ("build",)


def test_tool_flag_followed_by_flag_takes_no_value() -> None:
    args = parse_arguments(["--offline", "-q", "test"])

    assert args.tool_args == ("--offline", "-q", "test")
    assert args.positional_args == ()


def test_dispatcher_flag_after_tool_flag_is_a_tool_flag() -> None:
    args = parse_arguments(["--info", "-gq", "build"])

    assert args.gum_flags == frozenset()
    assert args.tool_args == ("--info", "-gq", "build")
    assert args.positional_args == ()


def test_unknown_leading_flag_ends_dispatcher_flags() -> None:
    args = parse_arguments(["-gx", "-gq"])

    assert args.gum_flags == frozenset()
    assert args.tool_args == ("-gx", "-gq")


def test_positional_mode_keeps_flags() -> None:
    args = parse_arguments(["build", "-x", "test"])

    assert args.tool_args == ()
    assert args.positional_args == ("build", "-x", "test")


def test_every_token_lands_in_exactly_one_group() -> None:
    tokens = ["-gg", "-gd", "-p", "sub", "--scan", "clean", "-x", "check"]
    args = parse_arguments(tokens)

    assert len(args.gum_flags) + len(args.tool_args) + len(args.positional_args) == len(tokens)


def test_forced_tools_are_reported_in_canonical_order() -> None:
    args = parse_arguments(["-gm", "-gg"])

    assert args.forced_tools() == (FORCE_GRADLE, FORCE_MAVEN)


def test_with_tool_args_returns_new_value() -> None:
    args = parse_arguments(["-x", "build"])
    updated = args.with_tool_args(["--offline"])

    assert args.tool_args == ("-x", "build")
    assert updated.tool_args == ("--offline",)
    assert updated.positional_args == args.positional_args


def test_extract_two_token_form() -> None:
    extraction = extract_flag_value(("-b", "--build-file"), ("--offline", "-b", "x.gradle", "--scan"))

    assert extraction.found
    assert extraction.value == "x.gradle"
    assert extraction.remaining == ("--offline", "--scan")


def test_extract_equals_form() -> None:
    extraction = extract_flag_value(("-b", "--build-file"), ("--build-file=x.gradle", "--scan"))

    assert extraction.found
    assert extraction.value == "x.gradle"
    assert extraction.remaining == ("--scan",)


def test_extract_prefers_earlier_names() -> None:
    extraction = extract_flag_value(("-f", "--file"), ("--file", "a.xml", "-f", "b.xml"))

    assert extraction.value == "b.xml"
    assert extraction.remaining == ("--file", "a.xml")


def test_extract_trailing_flag_is_not_a_match() -> None:
    extraction = extract_flag_value(("-b",), ("--scan", "-b"))

    assert not extraction.found
    assert extraction.value == ""
    assert extraction.remaining == ("--scan", "-b")


def test_extract_missing_flag_keeps_arguments() -> None:
    extraction = extract_flag_value(("-p", "--project-dir"), ("clean",))

    assert not extraction.found
    assert extraction.remaining == ("clean",)
