"""Tests for QR code rendering."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from roadtotp.errors import InvalidArgument
from roadtotp.otp import build_url
from roadtotp.qr import BORDER, generate_qr_png, matrix_width

URL = build_url("QRTest", "QB5UDBW7OQKYYDZU")


def test_default_size_png():
    png = generate_qr_png(URL)
    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    img = Image.open(io.BytesIO(png))
    assert img.format == "PNG"
    assert img.size == (128, 128)


def test_custom_size():
    img = Image.open(io.BytesIO(generate_qr_png(URL, 256)))
    assert img.size == (256, 256)


def test_black_and_white():
    img = Image.open(io.BytesIO(generate_qr_png(URL, 200))).convert("L")
    lo, hi = img.getextrema()
    assert lo == 0
    assert hi == 255


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_size_rejected(size):
    with pytest.raises(InvalidArgument):
        generate_qr_png(URL, size)


def test_oversized_rejected():
    with pytest.raises(InvalidArgument, match="at most 512"):
        generate_qr_png(URL, 513, max_size=512)


def test_modules_have_equal_width():
    size = 200
    width = matrix_width(URL)
    box = size // width
    padding = (size - width * box) // 2
    img = Image.open(io.BytesIO(generate_qr_png(URL, size))).convert("L")

    # top row of the top-left finder pattern is 7 dark modules
    start = padding + BORDER * box
    row = [img.getpixel((x, start)) for x in range(start - 1, start + 7 * box + 1)]
    assert row[0] == 255
    assert row[1:-1] == [0] * (7 * box)
    assert row[-1] == 255


def test_padding_is_white():
    img = Image.open(io.BytesIO(generate_qr_png(URL, 200))).convert("L")
    assert img.getpixel((0, 0)) == 255
    assert img.getpixel((199, 199)) == 255


def test_smaller_than_matrix_rejected():
    width = matrix_width(URL)
    assert generate_qr_png(URL, width)
    with pytest.raises(InvalidArgument, match="at least"):
        generate_qr_png(URL, width - 1)
