import io

import pytesseract
from PIL import Image

from doc_extractor.ocr.base import BaseOcrEngine
from doc_extractor.ocr.exceptions import OcrExtractionError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes image text with Tesseract through pytesseract."""

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @property
    def language(self) -> str:
        return self._language

    def extract(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                if image.mode not in ("RGB", "L"):
                    image = image.convert("RGB")
                text = pytesseract.image_to_string(image, lang=self._language)
            return text.strip()
        except Exception as exc:
            raise OcrExtractionError(f"tesseract OCR failed: {exc}") from exc
