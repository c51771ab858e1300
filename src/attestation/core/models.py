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

from .clock import split_outing_time

REASONS: tuple[str, ...] = (
    "travail",
    "courses",
    "sante",
    "famille",
    "sport",
    "judiciaire",
    "missions",
)

IDENTITY_FIELDS: tuple[str, ...] = (
    "lastname",
    "firstname",
    "birthday",
    "lieunaissance",
    "address",
    "zipcode",
    "town",
)
OUTING_FIELDS: tuple[str, ...] = ("datesortie", "heuresortie")


@dataclass(frozen=True)
class Profile:
    lastname: str
    firstname: str
    birthday: str
    lieunaissance: str
    address: str
    zipcode: str
    town: str
    datesortie: str
    heuresortie: str

    def __post_init__(self) -> None:
        split_outing_time(self.heuresortie)

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    @property
    def full_address(self) -> str:
        return f"{self.address} {self.zipcode} {self.town}"

    @property
    def outing_hour(self) -> str:
        return split_outing_time(self.heuresortie)[0]

    @property
    def outing_minute(self) -> str:
        return split_outing_time(self.heuresortie)[1]


def selected_reasons(reasons: str) -> tuple[str, ...]:
    # Substring match: "travail,courses" and "travailcourses" both select two reasons.
    return tuple(reason for reason in REASONS if reason in reasons)


__all__ = [
    "IDENTITY_FIELDS",
    "OUTING_FIELDS",
    "Profile",
    "REASONS",
    "selected_reasons",
]
