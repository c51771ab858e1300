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

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from rich.markup import escape

from ...config import load_app_config
from ...core.clock import format_date, format_time
from ...core.errors import RenderWarning
from ...core.profile import load_profile
from ...render.compose import compose_certificate
from ..core.log import _warn
from ..io.inputs import _read_template
from ..io.outputs import _default_output_path, _write_output
from ..ui import configure_ui, console


@dataclass
class GenerateArgs:
    """Typed container for certificate command arguments."""

    reasons: str
    time: str | None = None
    date: str | None = None
    profile: str | None = None
    output: str | None = None
    template: str | None = None
    config: str | None = None
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class GenerateResult:
    output_path: Path
    payload: str
    warnings: tuple[RenderWarning, ...]


def run_generate(args: GenerateArgs, *, now: datetime | None = None) -> GenerateResult:
    now = now or datetime.now()
    config = load_app_config(args.config)
    quiet = args.quiet or config.ui.quiet
    configure_ui(no_color=args.no_color or config.ui.no_color)

    outing_date = args.date or format_date(now)
    outing_time = args.time or format_time(now)
    profile_path = Path(args.profile) if args.profile else config.paths.profile
    profile = load_profile(profile_path, datesortie=outing_date, heuresortie=outing_time)
    template_path = Path(args.template) if args.template else config.paths.template
    template_bytes = _read_template(template_path)

    result = compose_certificate(
        template_bytes,
        profile,
        args.reasons,
        generated_at=now,
        qr_config=config.qr_config,
    )
    for warning in result.warnings:
        _warn(str(warning), quiet=quiet)

    output_path = (
        Path(args.output)
        if args.output
        else _default_output_path(profile.lastname, outing_time, args.reasons)
    )
    written = _write_output(output_path, result.pdf)
    if not quiet:
        console.print(f"The certificate is ready: [accent]{escape(str(written))}[/accent]")
    return GenerateResult(output_path=written, payload=result.payload, warnings=result.warnings)
