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

import json
from collections.abc import Mapping
from pathlib import Path

from .errors import ProfileReadError
from .models import IDENTITY_FIELDS, OUTING_FIELDS, Profile
from .validation import require_keys, require_text


def read_profile_file(path: str | Path) -> dict[str, object]:
    """Read the JSON profile record, without the runtime outing fields."""
    profile_path = Path(path)
    try:
        raw = profile_path.read_bytes()
    except OSError as exc:
        raise ProfileReadError(f"cannot read profile {profile_path}: {exc.strerror or exc}") from exc
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ProfileReadError(f"profile {profile_path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ProfileReadError(f"profile {profile_path} must contain a JSON object")
    return data


def profile_from_mapping(
    data: Mapping[str, object],
    *,
    datesortie: str | None = None,
    heuresortie: str | None = None,
) -> Profile:
    """Validate a profile mapping once, optionally injecting the outing date/time."""
    merged = dict(data)
    if datesortie is not None:
        merged["datesortie"] = datesortie
    if heuresortie is not None:
        merged["heuresortie"] = heuresortie
    required = IDENTITY_FIELDS + OUTING_FIELDS
    require_keys(merged, required, label="profile")
    values = {key: require_text(merged[key], label=key) for key in required}
    return Profile(**values)


def load_profile(path: str | Path, *, datesortie: str, heuresortie: str) -> Profile:
    return profile_from_mapping(
        read_profile_file(path),
        datesortie=datesortie,
        heuresortie=heuresortie,
    )


__all__ = ["load_profile", "profile_from_mapping", "read_profile_file"]
