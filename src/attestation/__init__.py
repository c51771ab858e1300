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

"""Fill the travel certificate template with a profile and its QR code."""

from .core import (
    AttestationError,
    OutputWriteError,
    Profile,
    ProfileFieldError,
    ProfileReadError,
    QrGenerationError,
    RenderWarning,
    TemplateLoadError,
    load_profile,
    profile_from_mapping,
)
from .render import ComposeResult, build_payload, compose_certificate, fit_font_size

__all__ = [
    "AttestationError",
    "ComposeResult",
    "OutputWriteError",
    "Profile",
    "ProfileFieldError",
    "ProfileReadError",
    "QrGenerationError",
    "RenderWarning",
    "TemplateLoadError",
    "build_payload",
    "compose_certificate",
    "fit_font_size",
    "load_profile",
    "profile_from_mapping",
]
