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

import typer

from ..config import init_user_config
from ..core.models import REASONS
from .core.common import CONFIG_EXIT_CODE, _get_version, _run_cli
from .core.log import _error
from .flows.generate import GenerateArgs, run_generate
from .ui import console

_REASONS_EPILOG = "Possible reasons: " + ", ".join(REASONS) + "."

app = typer.Typer(
    add_completion=False,
    help="Fill the travel certificate template and embed its QR code.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"attestation {_get_version()}")
        raise typer.Exit()


def _init_config_callback(value: bool) -> None:
    if not value:
        return
    try:
        path = init_user_config()
    except OSError as exc:
        _error("config", str(exc))
        raise typer.Exit(code=CONFIG_EXIT_CODE)
    console.print(str(path))
    raise typer.Exit()


@app.command(epilog=_REASONS_EPILOG)
def generate(
    reasons: str = typer.Argument(
        ...,
        help="Reason(s) for going out; several may be combined, e.g. travail,courses.",
    ),
    time: str | None = typer.Option(
        None,
        "--time",
        help="Going out time, format: HHhMM (default: now).",
        rich_help_panel="Outing",
    ),
    date: str | None = typer.Option(
        None,
        "--date",
        help="Going out date, format: dd/mm/yyyy (default: today).",
        rich_help_panel="Outing",
    ),
    profile: str | None = typer.Option(
        None,
        "--profile",
        help="The path to the profile file (default: profile.json).",
        rich_help_panel="Inputs",
    ),
    template: str | None = typer.Option(
        None,
        "--template",
        help="The certificate template PDF (default: data/certificate.pdf).",
        rich_help_panel="Inputs",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="The output path of the certificate.",
        rich_help_panel="Outputs",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Global",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
        rich_help_panel="Global",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show tracebacks instead of short error messages.",
        rich_help_panel="Global",
    ),
    _init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy the default config to the user config directory and exit.",
        callback=_init_config_callback,
        is_eager=True,
        rich_help_panel="Global",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    args = GenerateArgs(
        reasons=reasons,
        time=time,
        date=date,
        profile=profile,
        output=output,
        template=template,
        config=config,
        quiet=quiet,
        no_color=no_color,
    )
    _run_cli(lambda: run_generate(args), debug=debug)


def main() -> None:
    app()
