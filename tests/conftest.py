import io
from datetime import datetime, timezone

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from doc_extractor.ocr.base import BaseOcrEngine

REFERENCE_TIME = datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc)


class FakeOcrEngine(BaseOcrEngine):
    """OCR stand-in returning canned text, so tests do not need the tesseract binary."""

    def __init__(self, text: str = "Recognized image text") -> None:
        self.text = text
        self.calls: list[bytes] = []

    def extract(self, image_bytes: bytes) -> str:
        self.calls.append(image_bytes)
        return self.text


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a small blank PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (64, 32), color="white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def fake_ocr() -> FakeOcrEngine:
    return FakeOcrEngine()


@pytest.fixture()
def reference_time() -> datetime:
    return REFERENCE_TIME
