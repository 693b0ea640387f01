# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the ``gm`` dispatcher."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import typer

from .. import __version__
from ..arguments import HELP, QUIET, VERSION, parse_arguments
from ..dispatcher import Dispatcher
from ..errors import GumError
from ..logging import GumLogger
from .typer_ext import PassthroughCommand, raw_tokens

PROGRAM_NAME: Final[str] = "gm"

HELP_ENTRIES: Final[tuple[tuple[str, str], ...]] = (
    ("-ga", "force Ant build"),
    ("-gb", "force Bach build"),
    ("-gc", "displays current configuration and quits"),
    ("-gd", "displays debug information"),
    ("-gg", "force Gradle build"),
    ("-gh", "displays help information"),
    ("-gj", "force jbang execution"),
    ("-gm", "force Maven build"),
    ("-gn", "executes nearest build file"),
    ("-gq", "run gm in quiet mode"),
    ("-gr", "do not replace goals/tasks"),
    ("-gv", "displays version information"),
)

CONTEXT_SETTINGS: Final[dict[str, object]] = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}

app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


def render_help() -> str:
    """Return the usage text printed for ``-gh``."""

    lines = [f"Usage of {PROGRAM_NAME}:"]
    lines.extend(f"  {flag}\t{description}" for flag, description in HELP_ENTRIES)
    return "\n".join(lines)


def run(tokens: Sequence[str], *, logger: GumLogger, dispatcher: Dispatcher | None = None) -> int:
    """Classify ``tokens`` and either answer ``-gv``/``-gh`` or dispatch to a build tool.

    Args:
        tokens: Raw command-line tokens following the program name.
        logger: Console reporter for user-facing output.
        dispatcher: Dispatcher to use; one bound to the running process when omitted.

    Returns:
        int: Exit status for the process.

    Raises:
        GumError: If dispatching failed.
    """

    args = parse_arguments(tokens)
    if args.has_flag(VERSION):
        logger.echo(f"{PROGRAM_NAME} {__version__}")
        return 0
    if args.has_flag(HELP):
        logger.echo(render_help())
        return 0
    dispatcher = dispatcher or Dispatcher(logger=logger)
    return dispatcher.dispatch(args)


@app.command(cls=PassthroughCommand, context_settings=CONTEXT_SETTINGS)
def main(ctx: typer.Context) -> None:
    """Run the build tool governing the current directory."""

    tokens = raw_tokens(ctx)
    logger = GumLogger(quiet=parse_arguments(tokens).has_flag(QUIET))
    try:
        code = run(tokens, logger=logger)
    except GumError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=code)


__all__ = ["HELP_ENTRIES", "app", "main", "render_help", "run"]
