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

import unicodedata
from collections.abc import Iterable, Mapping

from .errors import ProfileFieldError


def require_keys(mapping: Mapping[str, object], keys: Iterable[str], *, label: str) -> None:
    """Validate that all keys are present in mapping."""
    missing = [key for key in keys if key not in mapping]
    if missing:
        raise ProfileFieldError(f"{label} is missing required field(s): {', '.join(missing)}")


def require_text(value: object, *, label: str) -> str:
    """Validate a non-blank text field; integers are accepted and stringified."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ProfileFieldError(f"{label} must be a string")
    text = unicodedata.normalize("NFC", str(value))
    if not text.strip():
        raise ProfileFieldError(f"{label} must not be empty")
    return text


def require_two_digits(value: str, *, min_val: int, max_val: int, label: str) -> str:
    """Validate a zero-padded two-digit number within [min_val, max_val]."""
    if len(value) != 2 or not value.isascii() or not value.isdigit():
        raise ProfileFieldError(f"{label} must be two digits")
    if not min_val <= int(value) <= max_val:
        raise ProfileFieldError(f"{label} must be between {min_val:02d} and {max_val:02d}")
    return value
