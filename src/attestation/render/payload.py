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

from ..core.clock import format_date, format_time
from ..core.models import Profile


def build_payload(profile: Profile, reasons: str, generated_at: datetime) -> str:
    """Build the text encoded in the certificate QR code.

    Field order and labels are what scanners parse; changing either is a
    breaking format change.
    """
    return " ".join(
        [
            f"Cree le: {format_date(generated_at)} a {format_time(generated_at)}",
            f"Nom: {profile.lastname}",
            f"Prenom: {profile.firstname}",
            f"Naissance: {profile.birthday} a {profile.lieunaissance}",
            f"Adresse: {profile.full_address}",
            f"Sortie: {profile.datesortie} a {profile.outing_hour}h{profile.outing_minute}",
            f"Motifs: {reasons}",
        ]
    )


__all__ = ["build_payload"]
