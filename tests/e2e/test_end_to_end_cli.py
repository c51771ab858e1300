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

import io
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from pypdf import PdfReader

from tests.test_support import build_cli_env, write_profile, write_template


class TestEndToEndCli(unittest.TestCase):
    def _run(self, tmp_path: Path, *args: str) -> subprocess.CompletedProcess[str]:
        repo_root = Path(__file__).resolve().parents[2]
        config_path = repo_root / "src" / "attestation" / "config" / "default.toml"
        env = build_cli_env(overrides={"XDG_CONFIG_HOME": str(tmp_path / "xdg")})
        return subprocess.run(
            [sys.executable, "-m", "attestation", *args, "--config", str(config_path)],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )

    def test_generate_cli_creates_certificate(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            profile = write_profile(tmp_path)
            template = write_template(tmp_path)
            result = self._run(
                tmp_path,
                "sport",
                "--time",
                "10h00",
                "--date",
                "05/04/2020",
                "--profile",
                str(profile),
                "--template",
                str(template),
            )

            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertIn("The certificate is ready", result.stdout)
            output = tmp_path / "certificate-Dupont-10h00-sport.pdf"
            self.assertTrue(output.exists())
            reader = PdfReader(io.BytesIO(output.read_bytes()))
            self.assertEqual(len(reader.pages), 2)

    def test_generate_cli_missing_profile_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            template = write_template(tmp_path)
            result = self._run(
                tmp_path,
                "travail",
                "--profile",
                str(tmp_path / "missing.json"),
                "--template",
                str(template),
            )

            self.assertEqual(result.returncode, 3)
            self.assertIn("Error:", result.stderr)
            self.assertEqual(sorted(p.suffix for p in tmp_path.iterdir() if p.is_file()), [".pdf"])


if __name__ == "__main__":
    unittest.main()
