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

from .compose import ComposeResult, compose_certificate, load_template
from .fit import fit_font_size, helvetica_measure
from .layout import CHECKBOX_BOXES, LayoutBox, TextPlacement, plan_first_page
from .payload import build_payload

__all__ = [
    "CHECKBOX_BOXES",
    "ComposeResult",
    "LayoutBox",
    "TextPlacement",
    "build_payload",
    "compose_certificate",
    "fit_font_size",
    "helvetica_measure",
    "load_template",
    "plan_first_page",
]
