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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..qr.codec import QrConfig
from .installer import resolve_config_path

DEFAULT_TEMPLATE_PATH = Path("data/certificate.pdf")
DEFAULT_PROFILE_PATH = Path("profile.json")
_ERROR_LEVELS = {"L", "M", "Q", "H"}


@dataclass(frozen=True)
class PathDefaults:
    template: Path = DEFAULT_TEMPLATE_PATH
    profile: Path = DEFAULT_PROFILE_PATH


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    source: Path
    paths: PathDefaults = field(default_factory=PathDefaults)
    qr_config: QrConfig = field(default_factory=QrConfig)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        source=config_path,
        paths=_parse_path_defaults(_get_dict(data, "paths")),
        qr_config=build_qr_config(_get_dict(data, "qr")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    cfg = cfg or {}
    defaults = QrConfig()
    error = str(cfg.get("error", defaults.error)).strip().upper()
    if error not in _ERROR_LEVELS:
        raise ValueError("qr.error must be one of L, M, Q, H")
    scale = _parse_positive_int(cfg.get("scale"), field="qr.scale", default=defaults.scale)
    border = _parse_non_negative_int(cfg.get("border"), field="qr.border", default=defaults.border)
    return QrConfig(
        error=error,
        scale=scale,
        border=border,
        dark=_parse_color(cfg.get("dark")),
        light=_parse_color(cfg.get("light")),
        boost_error=_parse_bool(
            cfg.get("boost_error"), field="qr.boost_error", default=defaults.boost_error
        ),
    )


def _parse_path_defaults(cfg: dict[str, object]) -> PathDefaults:
    return PathDefaults(
        template=_parse_path(cfg.get("template"), field="paths.template")
        or DEFAULT_TEMPLATE_PATH,
        profile=_parse_path(cfg.get("profile"), field="paths.profile") or DEFAULT_PROFILE_PATH,
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_path(value: object, *, field: str) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    if not normalized:
        return None
    return Path(normalized).expanduser()


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_non_negative_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must be a non-negative integer")
    return parsed


def _parse_color(value: object) -> str | tuple[int, int, int] | tuple[int, int, int, int] | None:
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip().lower() in ("none", "transparent"):
            return None
        return value
    if isinstance(value, (list, tuple)):
        if len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]))
        if len(value) == 4:
            return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
    return None
