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

from typing import Callable

from fpdf import FPDF

Measure = Callable[[str, int], float]

FONT_FAMILY = "helvetica"


def fit_font_size(
    measure: Measure,
    text: str,
    max_width: float,
    min_size: int,
    default_size: int,
) -> int | None:
    """Return the largest size in [min_size, default_size] whose width fits.

    Walks down one point at a time from ``default_size``; ``measure`` must be
    non-increasing as the size shrinks. Returns ``None`` when the text still
    overflows at ``min_size``.
    """
    size = default_size
    width = measure(text, size)
    while width > max_width and size > min_size:
        size -= 1
        width = measure(text, size)
    if width > max_width:
        return None
    return size


def helvetica_measure(pdf: FPDF | None = None) -> Measure:
    """Width in points of text set in the core Helvetica font."""
    target = pdf if pdf is not None else FPDF(unit="pt")

    def measure(text: str, size: int) -> float:
        target.set_font(FONT_FAMILY, size=size)
        return target.get_string_width(text)

    return measure


__all__ = ["FONT_FAMILY", "Measure", "fit_font_size", "helvetica_measure"]
