#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from ...core.errors import TemplateLoadError


def _read_template(path: str | Path) -> bytes:
    template_path = Path(path)
    try:
        return template_path.read_bytes()
    except OSError as exc:
        raise TemplateLoadError(
            f"cannot read template {template_path}: {exc.strerror or exc}"
        ) from exc
