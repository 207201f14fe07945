"""
QR image rendering for EPC payment payloads.

The payload builder in the domain package is a pure formatter; turning
its text into pixels is a separate concern handled here with ``qrcode``
and Pillow.
"""

import io
import logging

import qrcode
from qrcode.constants import ERROR_CORRECT_M

logger = logging.getLogger(__name__)


def render_epc_qr(payload: str, box_size: int = 10, border: int = 4) -> bytes:
    """
    Render a payload as a PNG QR code.
    
    Args:
        payload: Opaque text to encode (UTF-8)
        box_size: Pixel size of a single module
        border: Quiet zone width in modules
        
    Returns:
        PNG image bytes
    """
    if box_size < 1:
        raise ValueError(f"box_size must be positive, got {box_size}")
    if border < 0:
        raise ValueError(f"border must not be negative, got {border}")
    
    qr = qrcode.QRCode(
        version=None,  # smallest version that fits
        error_correction=ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload.encode("utf-8"))
    qr.make(fit=True)
    
    image = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    
    logger.debug(f"Rendered QR version {qr.version} ({len(payload)} chars)")
    return buffer.getvalue()
