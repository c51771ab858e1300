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

import unittest

from attestation.render.payload import build_payload
from tests.test_support import GENERATED_AT, make_profile


class TestBuildPayload(unittest.TestCase):
    def test_exact_format(self) -> None:
        payload = build_payload(make_profile(heuresortie="14h37"), "sport", GENERATED_AT)
        self.assertEqual(
            payload,
            "Cree le: 05/04/2020 a 09h42 "
            "Nom: Dupont "
            "Prenom: Jean "
            "Naissance: 01/01/1990 a Paris "
            "Adresse: 1 Rue A 75000 Paris "
            "Sortie: 05/04/2020 a 14h37 "
            "Motifs: sport",
        )

    def test_colon_outing_time_is_normalized(self) -> None:
        payload = build_payload(make_profile(heuresortie="14:37"), "sport", GENERATED_AT)
        self.assertIn("Sortie: 05/04/2020 a 14h37 ", payload)

    def test_raw_reasons_are_kept_verbatim(self) -> None:
        payload = build_payload(make_profile(), "travail,courses", GENERATED_AT)
        self.assertTrue(payload.endswith("Motifs: travail,courses"))
        empty = build_payload(make_profile(), "", GENERATED_AT)
        self.assertTrue(empty.endswith("Motifs: "))

    def test_deterministic_for_identical_inputs(self) -> None:
        profile = make_profile()
        first = build_payload(profile, "sport", GENERATED_AT)
        second = build_payload(make_profile(), "sport", GENERATED_AT)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
