#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "accent": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


def isatty(stream: TextIO | None, fallback: TextIO | None) -> bool:
    for candidate in (stream, fallback):
        if candidate is None:
            continue
        try:
            return bool(candidate.isatty())
        except (AttributeError, ValueError):
            continue
    return False


def _build_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


console = _build_console(stderr=False)
console_err = _build_console(stderr=True)


def configure_ui(*, no_color: bool) -> None:
    console.no_color = no_color
    console_err.no_color = no_color


__all__ = ["THEME", "configure_ui", "console", "console_err"]
