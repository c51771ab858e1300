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

from .app import app as app, main as main
from .flows.generate import (
    GenerateArgs as GenerateArgs,
    GenerateResult as GenerateResult,
    run_generate as run_generate,
)

__all__ = [
    "GenerateArgs",
    "GenerateResult",
    "app",
    "main",
    "run_generate",
]
