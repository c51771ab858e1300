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

import os
import tempfile
from pathlib import Path

from ...core.errors import OutputWriteError


def _default_output_path(lastname: str, outing_time: str, reasons: str) -> Path:
    return Path(f"certificate-{lastname}-{outing_time}-{reasons}.pdf")


def _write_output(path: str | Path, data: bytes) -> Path:
    """Write data next to path and move it into place once fully written."""
    output_path = Path(path)
    directory = output_path.parent
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=directory,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(data)
        os.replace(tmp_name, output_path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(f"cannot write {output_path}: {exc.strerror or exc}") from exc
    return output_path
