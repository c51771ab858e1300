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

import io
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from fpdf import FPDF
from fpdf.errors import FPDFUnicodeEncodingException
from PIL import Image, UnidentifiedImageError
from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from ..core.errors import (
    ProfileFieldError,
    QrGenerationError,
    RenderWarning,
    TemplateLoadError,
)
from ..core.models import Profile
from ..core.profile import profile_from_mapping
from ..qr.codec import QrConfig, qr_png_for_config
from .fit import FONT_FAMILY, helvetica_measure
from .layout import (
    QR_PAGE_SIZE,
    ImagePlacement,
    TextPlacement,
    plan_first_page,
    qr_large_placement,
    qr_thumbnail_placement,
)
from .payload import build_payload


@dataclass(frozen=True)
class ComposeResult:
    pdf: bytes
    payload: str
    warnings: tuple[RenderWarning, ...] = ()


def compose_certificate(
    template_bytes: bytes,
    profile: Profile | Mapping[str, object],
    reasons: str,
    *,
    generated_at: datetime | None = None,
    qr_config: QrConfig | None = None,
) -> ComposeResult:
    """Fill the certificate template and return the two-page document.

    Page 1 is the template page with every field drawn over it and a QR
    thumbnail; a blank A4 page carrying an enlarged copy of the same QR image
    is appended after the template pages.
    """
    generated_at = generated_at or datetime.now()
    resolved = profile if isinstance(profile, Profile) else profile_from_mapping(profile)
    reader = load_template(template_bytes)
    template_page = reader.pages[0]
    page_w = float(template_page.mediabox.width)
    page_h = float(template_page.mediabox.height)

    overlay = FPDF(unit="pt", format=(page_w, page_h))
    overlay.set_auto_page_break(False)
    overlay.add_page()
    try:
        texts, warnings = plan_first_page(
            resolved,
            reasons,
            generated_at,
            helvetica_measure(overlay),
        )
        for placement in texts:
            _draw_text(overlay, placement, page_h=page_h)
    except FPDFUnicodeEncodingException as exc:
        raise ProfileFieldError(
            f"profile contains characters the certificate font cannot render: {exc}"
        ) from exc

    payload = build_payload(resolved, reasons, generated_at)
    png = qr_png_for_config(payload, qr_config or QrConfig())
    qr_image = _decode_qr_image(png)
    _draw_image(overlay, qr_image, qr_thumbnail_placement(page_w), page_h=page_h)
    overlay.add_page(format=QR_PAGE_SIZE)
    qr_page_h = QR_PAGE_SIZE[1]
    _draw_image(overlay, qr_image, qr_large_placement(qr_page_h), page_h=qr_page_h)
    overlay_bytes = bytes(overlay.output())

    return ComposeResult(
        pdf=_merge_overlay(reader, PdfReader(io.BytesIO(overlay_bytes))),
        payload=payload,
        warnings=tuple(warnings),
    )


def load_template(template_bytes: bytes) -> PdfReader:
    if not template_bytes:
        raise TemplateLoadError("template is empty")
    try:
        reader = PdfReader(io.BytesIO(template_bytes))
        page_count = len(reader.pages)
    except (PyPdfError, ValueError) as exc:
        raise TemplateLoadError(f"template is not a readable PDF: {exc}") from exc
    if reader.is_encrypted:
        raise TemplateLoadError("template is encrypted")
    if page_count == 0:
        raise TemplateLoadError("template has no pages")
    return reader


def _decode_qr_image(png: bytes) -> Image.Image:
    # One image asset, drawn at two scales.
    try:
        with Image.open(io.BytesIO(png)) as decoded:
            return decoded.convert("RGB")
    except (UnidentifiedImageError, OSError) as exc:
        raise QrGenerationError(f"cannot decode QR image: {exc}") from exc


def _draw_text(pdf: FPDF, placement: TextPlacement, *, page_h: float) -> None:
    # fpdf measures y from the top edge; text() anchors on the baseline.
    pdf.set_font(FONT_FAMILY, size=placement.size)
    pdf.text(placement.x, page_h - placement.y, placement.text)


def _draw_image(pdf: FPDF, image: Image.Image, placement: ImagePlacement, *, page_h: float) -> None:
    pdf.image(
        image,
        x=placement.x,
        y=page_h - placement.y - placement.height,
        w=placement.width,
        h=placement.height,
    )


def _merge_overlay(template: PdfReader, overlay: PdfReader) -> bytes:
    writer = PdfWriter(clone_from=template)
    writer.pages[0].merge_page(overlay.pages[0])
    writer.add_page(overlay.pages[1])
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


__all__ = ["ComposeResult", "compose_certificate", "load_template"]
