#!/usr/bin/env python3
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any

import segno

from ..core.errors import QrGenerationError

Color = str | tuple[int, int, int] | tuple[int, int, int, int] | None


@dataclass(frozen=True)
class QrConfig:
    error: str = "M"
    scale: int = 10
    border: int = 1
    kind: str = "png"
    dark: Color = None
    light: Color = None
    boost_error: bool = False


def make_qr(
    data: bytes | str,
    *,
    error: str = "M",
    boost_error: bool = False,
) -> Any:
    try:
        return segno.make(data, error=error, micro=False, boost_error=boost_error)
    except ValueError as exc:  # segno.DataOverflowError included
        raise QrGenerationError(f"cannot encode QR payload: {exc}") from exc


def qr_bytes(
    data: bytes | str,
    *,
    error: str = "M",
    scale: int = 10,
    border: int = 1,
    kind: str = "png",
    dark: Color = None,
    light: Color = None,
    boost_error: bool = False,
) -> bytes:
    qr = make_qr(data, error=error, boost_error=boost_error)
    buf = io.BytesIO()
    try:
        qr.save(
            buf,
            kind=kind,
            scale=scale,
            border=border,
            **_segno_color_kwargs(dark=dark, light=light),
        )
    except (ValueError, TypeError) as exc:
        raise QrGenerationError(f"cannot render QR image: {exc}") from exc
    return buf.getvalue()


def qr_png_for_config(data: bytes | str, config: QrConfig) -> bytes:
    return qr_bytes(data, **vars(config))


def _segno_color_kwargs(**values: object) -> dict[str, object]:
    style: dict[str, object] = {}
    for key, value in values.items():
        normalized = _normalize_color_value(value)
        if normalized is None:
            continue
        style[key] = normalized
    return style


def _normalize_color_value(value: object) -> object | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    return value


__all__ = ["QrConfig", "make_qr", "qr_bytes", "qr_png_for_config"]
