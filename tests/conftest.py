import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

JPEG_HEAD = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
PNG_HEAD = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_jpeg_bytes() -> bytes:
    """JPEG/JFIF signature followed by filler bytes."""
    return JPEG_HEAD + b"\x00" * 64 + b"\xff\xd9"


@pytest.fixture()
def sample_png_bytes() -> bytes:
    return PNG_HEAD + b"\x00" * 64


@pytest.fixture()
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "download-cache"
