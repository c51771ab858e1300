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

"""Profile model, clock formatting and the error taxonomy."""

from .clock import format_date, format_time, split_outing_time
from .errors import (
    AttestationError,
    OutputWriteError,
    ProfileFieldError,
    ProfileReadError,
    QrGenerationError,
    RenderWarning,
    TemplateLoadError,
)
from .models import REASONS, Profile, selected_reasons
from .profile import load_profile, profile_from_mapping, read_profile_file

__all__ = [
    "AttestationError",
    "OutputWriteError",
    "Profile",
    "ProfileFieldError",
    "ProfileReadError",
    "QrGenerationError",
    "REASONS",
    "RenderWarning",
    "TemplateLoadError",
    "format_date",
    "format_time",
    "load_profile",
    "profile_from_mapping",
    "read_profile_file",
    "selected_reasons",
    "split_outing_time",
]
