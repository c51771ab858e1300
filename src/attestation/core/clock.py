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

from datetime import datetime

from .errors import ProfileFieldError
from .validation import require_two_digits


def format_date(value: datetime) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year}"


def format_time(value: datetime) -> str:
    return f"{value.hour:02d}h{value.minute:02d}"


def split_outing_time(value: str) -> tuple[str, str]:
    """Split an ``HHxMM`` outing time into its hour and minute digits.

    The separator at offset 2 is not inspected, so ``14h37`` and ``14:37``
    both yield ``("14", "37")``. Anything after the fifth character is ignored.
    """
    if len(value) < 5:
        raise ProfileFieldError(f"heuresortie must look like HHhMM, got {value!r}")
    hour = require_two_digits(value[0:2], min_val=0, max_val=23, label="heuresortie hour")
    minute = require_two_digits(value[3:5], min_val=0, max_val=59, label="heuresortie minute")
    return hour, minute


__all__ = ["format_date", "format_time", "split_outing_time"]
