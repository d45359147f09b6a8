"""
Printable accreditation sheet: A4 pages of badge cards, drawn with reportlab.
"""

import logging
from io import BytesIO
from typing import Dict, List, Optional

from reportlab.lib.colors import HexColor, white
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfgen import canvas as pdf_canvas

from core.domain.constants import DEFAULT_BADGE_COLOR
from core.domain.models import Badge
from core.utils.qr_generator import generate_badge_qr

logger = logging.getLogger(__name__)

# CJK-capable font that ships with reportlab
FONT = "STSong-Light"

PAGE_PADDING = 30
CARD_W, CARD_H = 200, 300
CARD_MARGIN = 10
HEADER_H = 40
FOOTER_H = 20
PHOTO_W, PHOTO_H = 80, 100
QR_SIZE = 36

BORDER = HexColor("#e2e8f0")
PHOTO_BG = HexColor("#f1f5f9")
PHOTO_EDGE = HexColor("#cbd5e1")
NAME_COLOR = HexColor("#0f172a")
ORG_COLOR = HexColor("#64748b")
LABEL_COLOR = HexColor("#94a3b8")

_font_ready = False


def _ensure_font():
    global _font_ready
    if not _font_ready:
        pdfmetrics.registerFont(UnicodeCIDFont(FONT))
        _font_ready = True


def _grid():
    """Card origins (bottom-left) for one page, row-major from the top"""
    page_w, page_h = A4
    cell_w = CARD_W + 2 * CARD_MARGIN
    cell_h = CARD_H + 2 * CARD_MARGIN
    cols = max(1, int((page_w - 2 * PAGE_PADDING) // cell_w))
    rows = max(1, int((page_h - 2 * PAGE_PADDING) // cell_h))
    origins = []
    for r in range(rows):
        for c in range(cols):
            x = PAGE_PADDING + c * cell_w + CARD_MARGIN
            y = page_h - PAGE_PADDING - (r + 1) * cell_h + CARD_MARGIN
            origins.append((x, y))
    return origins


def _draw_card(c, x: float, y: float, badge: Badge, title: str,
               photo: Optional[bytes], with_qr: bool):
    color = HexColor(badge.color or DEFAULT_BADGE_COLOR)
    center = x + CARD_W / 2

    c.saveState()
    path = c.beginPath()
    path.roundRect(x, y, CARD_W, CARD_H, 15)
    c.clipPath(path, stroke=0)

    # header / footer bands
    c.setFillColor(color)
    c.rect(x, y + CARD_H - HEADER_H, CARD_W, HEADER_H, stroke=0, fill=1)
    c.rect(x, y, CARD_W, FOOTER_H, stroke=0, fill=1)

    c.setFillColor(white)
    c.setFont(FONT, 6)
    c.drawCentredString(center, y + CARD_H - HEADER_H / 2 - 2, title.upper())
    c.setFont(FONT, 10)
    c.drawCentredString(center, y + FOOTER_H / 2 - 3, badge.role_code)
    c.restoreState()

    # photo slot
    photo_x = center - PHOTO_W / 2
    photo_y = y + CARD_H - HEADER_H - 15 - PHOTO_H
    c.setFillColor(PHOTO_BG)
    c.setStrokeColor(PHOTO_EDGE)
    c.setLineWidth(1)
    c.roundRect(photo_x, photo_y, PHOTO_W, PHOTO_H, 5, stroke=1, fill=1)
    if photo:
        try:
            c.drawImage(ImageReader(BytesIO(photo)), photo_x, photo_y, PHOTO_W, PHOTO_H,
                        preserveAspectRatio=True, anchor="c", mask="auto")
        except Exception as e:
            # unreadable image: keep the empty slot
            logger.warning(f"[BADGE] Photo for {badge.registration_id} not drawable: {e}")

    # name / organization
    c.setFillColor(NAME_COLOR)
    c.setFont(FONT, 14)
    c.drawCentredString(center, photo_y - 22, badge.full_name)
    c.setFillColor(ORG_COLOR)
    c.setFont(FONT, 8)
    c.drawCentredString(center, photo_y - 36, badge.organization.upper())

    # role / zone row
    info_y = photo_y - 70
    c.setStrokeColor(PHOTO_BG)
    c.setLineWidth(0.5)
    c.line(x + 15, info_y + 24, x + CARD_W - 15, info_y + 24)
    c.line(x + 15, info_y - 6, x + CARD_W - 15, info_y - 6)
    for label, value, cx in (("ROLE", badge.function, x + 55), ("ZONE", badge.zone, x + CARD_W - 55)):
        c.setFillColor(LABEL_COLOR)
        c.setFont(FONT, 5)
        c.drawCentredString(cx, info_y + 12, label)
        c.setFillColor(NAME_COLOR)
        c.setFont(FONT, 8)
        c.drawCentredString(cx, info_y, value)

    if with_qr:
        qr = ImageReader(BytesIO(generate_badge_qr(badge.registration_id)))
        c.drawImage(qr, x + CARD_W - QR_SIZE - 8, y + FOOTER_H + 6, QR_SIZE, QR_SIZE)

    # outer border last so it sits on top of the bands
    c.setStrokeColor(BORDER)
    c.setLineWidth(4)
    c.roundRect(x, y, CARD_W, CARD_H, 15, stroke=1, fill=0)


def render_badges_pdf(
    badges: List[Badge],
    title: str = "",
    photos: Optional[Dict[str, bytes]] = None,
    with_qr: bool = True,
) -> bytes:
    """Render badges onto as many A4 pages as needed and return the PDF bytes."""
    _ensure_font()
    photos = photos or {}
    origins = _grid()

    buffer = BytesIO()
    c = pdf_canvas.Canvas(buffer, pagesize=A4)
    c.setTitle(title or "Accreditation")

    for index, badge in enumerate(badges):
        slot = index % len(origins)
        if index and slot == 0:
            c.showPage()
        x, y = origins[slot]
        _draw_card(c, x, y, badge, title, photos.get(badge.registration_id), with_qr)

    c.showPage()
    c.save()
    return buffer.getvalue()
