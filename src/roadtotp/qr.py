"""
QR Code Rendering
"""

import io

import qrcode
from qrcode.image.pil import PilImage
from PIL import Image

from .errors import InvalidArgument

DEFAULT_SIZE = 128
BORDER = 4  # quiet zone, in modules


def _build(text: str) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        image_factory=PilImage,
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=BORDER,
    )
    qr.add_data(text)
    qr.make(fit=True)
    return qr


def matrix_width(text: str) -> int:
    """Width in modules of the QR code for ``text``, quiet zone included."""
    return _build(text).modules_count + 2 * BORDER


def generate_qr_png(text: str, size: int = DEFAULT_SIZE, max_size: int = 1024) -> bytes:
    """
    Render ``text`` as a ``size`` x ``size`` pixel QR code PNG.

    Every module is drawn with the same whole number of pixels and the code
    is centred on a white square, so ``size`` must be at least the matrix
    width.
    """
    if size <= 0:
        raise InvalidArgument(f"size must be positive, got {size}")
    if size > max_size:
        raise InvalidArgument(f"size must be at most {max_size}, got {size}")

    qr = _build(text)
    width = qr.modules_count + 2 * BORDER
    if size < width:
        raise InvalidArgument(f"size must be at least {width} for this content, got {size}")

    qr.box_size = size // width
    code = qr.make_image(fill_color="black", back_color="white").get_image().convert("L")

    img = Image.new("L", (size, size), 255)
    padding = (size - code.size[0]) // 2
    img.paste(code, (padding, padding))

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
