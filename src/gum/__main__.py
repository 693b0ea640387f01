# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m gum`` to behave like the ``gm`` console script."""

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="gm")
