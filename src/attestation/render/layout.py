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

from ..core.clock import format_date, format_time
from ..core.errors import RenderWarning
from ..core.models import Profile, selected_reasons
from .fit import Measure, fit_font_size

# All coordinates are PDF points with the origin at the bottom-left corner
# of the template page, matching the certificate's printed boxes.


@dataclass(frozen=True)
class LayoutBox:
    x: float
    y: float
    size: int = 11
    max_width: float | None = None
    min_size: int | None = None


@dataclass(frozen=True)
class TextPlacement:
    field: str
    text: str
    x: float
    y: float
    size: int


@dataclass(frozen=True)
class ImagePlacement:
    x: float
    y: float
    width: float
    height: float


NAME_BOX = LayoutBox(123, 686)
BIRTHDAY_BOX = LayoutBox(123, 661)
BIRTHPLACE_BOX = LayoutBox(92, 638)
ADDRESS_BOX = LayoutBox(134, 613)
TOWN_MAX_WIDTH = 83.0
TOWN_MIN_SIZE = 7
TOWN_BOX = LayoutBox(111, 226, size=11, max_width=TOWN_MAX_WIDTH, min_size=TOWN_MIN_SIZE)
OUTING_DATE_BOX = LayoutBox(92, 200)
OUTING_HOUR_BOX = LayoutBox(200, 201)
OUTING_MINUTE_BOX = LayoutBox(220, 201)
CREATED_LABEL_BOX = LayoutBox(464, 150, size=7)
CREATED_VALUE_BOX = LayoutBox(455, 144, size=7)

CHECKMARK = "x"
CHECKBOX_BOXES: dict[str, LayoutBox] = {
    "travail": LayoutBox(76, 527, size=19),
    "courses": LayoutBox(76, 478, size=19),
    "sante": LayoutBox(76, 436, size=19),
    "famille": LayoutBox(76, 400, size=19),
    "sport": LayoutBox(76, 345, size=19),
    "judiciaire": LayoutBox(76, 298, size=19),
    "missions": LayoutBox(76, 260, size=19),
}

CREATED_LABEL = "Date de création:"

QR_THUMBNAIL_SIZE = 100.0
QR_THUMBNAIL_RIGHT_OFFSET = 170.0
QR_THUMBNAIL_Y = 155.0
QR_LARGE_SIZE = 300.0
QR_LARGE_X = 50.0
QR_LARGE_TOP_OFFSET = 350.0

# A4 in points, used for the appended QR page.
QR_PAGE_SIZE = (595.28, 841.89)

TOWN_OVERFLOW_MESSAGE = (
    "The town name may not display correctly because of its length. "
    'Try using abbreviations where possible ("St." instead of "Saint").'
)


def _place(field: str, text: str, box: LayoutBox, size: int | None = None) -> TextPlacement:
    return TextPlacement(field=field, text=text, x=box.x, y=box.y, size=size or box.size)


def town_font_size(town: str, measure: Measure) -> tuple[int, RenderWarning | None]:
    size = fit_font_size(measure, town, TOWN_MAX_WIDTH, TOWN_MIN_SIZE, TOWN_BOX.size)
    if size is None:
        return TOWN_MIN_SIZE, RenderWarning(TOWN_OVERFLOW_MESSAGE, field="town")
    return size, None


def plan_first_page(
    profile: Profile,
    reasons: str,
    generated_at: datetime,
    measure: Measure,
) -> tuple[list[TextPlacement], list[RenderWarning]]:
    """Resolve every text drawn on the certificate page, in drawing order."""
    warnings: list[RenderWarning] = []
    texts = [
        _place("name", profile.full_name, NAME_BOX),
        _place("birthday", profile.birthday, BIRTHDAY_BOX),
        _place("lieunaissance", profile.lieunaissance, BIRTHPLACE_BOX),
        _place("address", profile.full_address, ADDRESS_BOX),
    ]
    for reason in selected_reasons(reasons):
        texts.append(_place(f"reason:{reason}", CHECKMARK, CHECKBOX_BOXES[reason]))

    size, warning = town_font_size(profile.town, measure)
    if warning is not None:
        warnings.append(warning)
    texts.append(_place("town", profile.town, TOWN_BOX, size))

    # No outing time is stamped without a stated reason.
    if reasons != "":
        texts.append(_place("datesortie", profile.datesortie, OUTING_DATE_BOX))
        texts.append(_place("outing_hour", profile.outing_hour, OUTING_HOUR_BOX))
        texts.append(_place("outing_minute", profile.outing_minute, OUTING_MINUTE_BOX))

    created = f"{format_date(generated_at)} à {format_time(generated_at)}"
    texts.append(_place("created_label", CREATED_LABEL, CREATED_LABEL_BOX))
    texts.append(_place("created", created, CREATED_VALUE_BOX))
    return texts, warnings


def qr_thumbnail_placement(page_width: float) -> ImagePlacement:
    return ImagePlacement(
        x=page_width - QR_THUMBNAIL_RIGHT_OFFSET,
        y=QR_THUMBNAIL_Y,
        width=QR_THUMBNAIL_SIZE,
        height=QR_THUMBNAIL_SIZE,
    )


def qr_large_placement(page_height: float) -> ImagePlacement:
    return ImagePlacement(
        x=QR_LARGE_X,
        y=page_height - QR_LARGE_TOP_OFFSET,
        width=QR_LARGE_SIZE,
        height=QR_LARGE_SIZE,
    )


__all__ = [
    "CHECKBOX_BOXES",
    "ImagePlacement",
    "LayoutBox",
    "QR_PAGE_SIZE",
    "TOWN_BOX",
    "TextPlacement",
    "plan_first_page",
    "qr_large_placement",
    "qr_thumbnail_placement",
    "town_font_size",
]
