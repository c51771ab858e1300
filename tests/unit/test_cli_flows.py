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

import tempfile
import unittest
from pathlib import Path

from attestation.cli.flows.generate import GenerateArgs, run_generate
from tests.test_support import (
    GENERATED_AT,
    LONG_TOWN,
    SAMPLE_PROFILE,
    suppress_output,
    temp_env,
    write_profile,
    write_template,
)


class TestRunGenerate(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.tmp_path = Path(self._tmpdir.name)
        self.enterContext(temp_env({"XDG_CONFIG_HOME": str(self.tmp_path / "xdg")}))

    def _args(self, **overrides) -> GenerateArgs:
        values = {
            "reasons": "sport",
            "output": str(self.tmp_path / "out.pdf"),
            "quiet": True,
            **overrides,
        }
        if "profile" not in values:
            values["profile"] = str(write_profile(self.tmp_path))
        if "template" not in values:
            values["template"] = str(write_template(self.tmp_path))
        return GenerateArgs(**values)

    def test_outing_defaults_to_now(self) -> None:
        result = run_generate(self._args(), now=GENERATED_AT)
        self.assertEqual(result.output_path, self.tmp_path / "out.pdf")
        self.assertIn("Sortie: 05/04/2020 a 09h42 ", result.payload)
        self.assertIn("Cree le: 05/04/2020 a 09h42 ", result.payload)

    def test_explicit_outing_values(self) -> None:
        result = run_generate(
            self._args(date="06/04/2020", time="18h05"),
            now=GENERATED_AT,
        )
        self.assertIn("Sortie: 06/04/2020 a 18h05 ", result.payload)
        self.assertTrue(result.output_path.is_file())

    def test_warnings_are_returned(self) -> None:
        profile = write_profile(self.tmp_path, {**SAMPLE_PROFILE, "town": LONG_TOWN})
        with suppress_output():
            result = run_generate(
                self._args(profile=str(profile), quiet=False),
                now=GENERATED_AT,
            )
        self.assertEqual(len(result.warnings), 1)
        self.assertEqual(result.warnings[0].field, "town")

    def test_config_supplies_default_paths(self) -> None:
        profile = write_profile(self.tmp_path)
        template = write_template(self.tmp_path)
        config_path = self.tmp_path / "custom.toml"
        config_path.write_text(
            f'[paths]\nprofile = "{profile.as_posix()}"\ntemplate = "{template.as_posix()}"\n'
            "[ui]\nquiet = true\n",
            encoding="utf-8",
        )
        args = GenerateArgs(
            reasons="courses",
            output=str(self.tmp_path / "from-config.pdf"),
            config=str(config_path),
        )
        result = run_generate(args, now=GENERATED_AT)
        self.assertTrue(result.output_path.is_file())
        self.assertTrue(result.payload.endswith("Motifs: courses"))


if __name__ == "__main__":
    unittest.main()
