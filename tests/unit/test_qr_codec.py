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
import unittest

from PIL import Image

from attestation.core.errors import QrGenerationError
from attestation.qr.codec import QrConfig, make_qr, qr_bytes, qr_png_for_config
from attestation.render.payload import build_payload
from tests.test_support import GENERATED_AT, make_profile

# Try to import zxingcpp for QR decoding verification
try:
    import zxingcpp

    HAS_ZXING = True
except ImportError:
    HAS_ZXING = False


def decode_qr_text(png_data: bytes) -> list[str]:
    """Decode QR code(s) from PNG bytes, returning the text payloads."""
    if not HAS_ZXING:
        return []
    with Image.open(io.BytesIO(png_data)) as img:
        return [result.text for result in zxingcpp.read_barcodes(img.convert("L"))]


class TestQrCodec(unittest.TestCase):
    def test_png_signature(self) -> None:
        data = qr_bytes("Cree le: 05/04/2020 a 09h42")
        self.assertTrue(data.startswith(b"\x89PNG\r\n\x1a\n"))

    def test_png_is_square_image(self) -> None:
        data = qr_png_for_config("payload", QrConfig())
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
        self.assertEqual(width, height)
        self.assertGreater(width, 0)

    def test_default_error_level_is_medium(self) -> None:
        qr = make_qr("payload")
        self.assertEqual(qr.error, "M")
        self.assertFalse(qr.is_micro)

    def test_border_changes_image_size(self) -> None:
        tight = qr_bytes("payload", scale=1, border=0)
        padded = qr_bytes("payload", scale=1, border=4)
        with Image.open(io.BytesIO(tight)) as img_tight, Image.open(io.BytesIO(padded)) as img_padded:
            self.assertEqual(img_padded.size[0] - img_tight.size[0], 8)

    def test_invalid_inputs_raise_generation_error(self) -> None:
        cases = (
            ("oversized", "A" * 5000, "M"),
            ("bad-level", "payload", "X"),
        )
        for label, data, error in cases:
            with self.subTest(case=label):
                with self.assertRaises(QrGenerationError):
                    qr_bytes(data, error=error)

    @unittest.skipUnless(HAS_ZXING, "zxingcpp not installed")
    def test_certificate_payload_decodes(self) -> None:
        payload = build_payload(make_profile(), "sport", GENERATED_AT)
        decoded = decode_qr_text(qr_png_for_config(payload, QrConfig(border=4)))
        self.assertEqual(decoded, [payload])


if __name__ == "__main__":
    unittest.main()
