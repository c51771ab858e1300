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


class AttestationError(RuntimeError):
    """Base class for fatal certificate generation failures."""

    stage = "generate"
    exit_code = 1


class ProfileReadError(AttestationError):
    stage = "profile"
    exit_code = 3


class TemplateLoadError(AttestationError):
    stage = "template"
    exit_code = 4


class ProfileFieldError(AttestationError):
    stage = "profile fields"
    exit_code = 5


class QrGenerationError(AttestationError):
    stage = "qr code"
    exit_code = 6


class OutputWriteError(AttestationError):
    stage = "output"
    exit_code = 7


class RenderWarning(UserWarning):
    """Text overflows its box; the field is still drawn at the minimum size."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


__all__ = [
    "AttestationError",
    "OutputWriteError",
    "ProfileFieldError",
    "ProfileReadError",
    "QrGenerationError",
    "RenderWarning",
    "TemplateLoadError",
]
