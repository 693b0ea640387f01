# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer command that hands every command-line token to gm untouched."""

from __future__ import annotations

from typing import Final

from click.core import Context
from typer.core import TyperCommand

RAW_TOKENS_KEY: Final[str] = "gum.raw_tokens"


class PassthroughCommand(TyperCommand):
    """Typer command recording the raw tokens before Click parses them.

    Click drops a literal ``--`` and may reorder tokens around it, while gm
    forwards every token verbatim to the build tool.
    """

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_TOKENS_KEY] = tuple(args)
        return super().parse_args(ctx, args)


def raw_tokens(ctx: Context) -> tuple[str, ...]:
    """Return the tokens recorded by :class:`PassthroughCommand` for ``ctx``."""

    return ctx.meta.get(RAW_TOKENS_KEY, tuple(ctx.args))


__all__ = ["RAW_TOKENS_KEY", "PassthroughCommand", "raw_tokens"]
