"""
QR code generator for accreditation badges.
Encodes the registration id so gate staff can look the holder up.
"""

from io import BytesIO

import qrcode
from PIL import Image

BADGE_QR_PREFIX = "GMS-ACC:"


def badge_payload(registration_id: str) -> str:
    return f"{BADGE_QR_PREFIX}{registration_id}"


def generate_badge_qr(registration_id: str, size: int = 160) -> bytes:
    """Return a square PNG (bytes) encoding the badge payload."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=8,
        border=1,
    )
    qr.add_data(badge_payload(registration_id))
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    img = img.resize((size, size), Image.NEAREST)

    out = BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()
