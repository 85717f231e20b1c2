from enum import Enum

from doc_extractor.logging.logger import Log
from doc_extractor.ocr.base import BaseOcrEngine
from doc_extractor.pdf.base import BasePdfExtractor
from doc_extractor.processor.exceptions import ExtractionFailedError, UnsupportedFileTypeError


class ExtractionKind(Enum):
    PDF = "pdf"
    IMAGE = "image"


MIME_DISPATCH: dict[str, ExtractionKind] = {
    "application/pdf": ExtractionKind.PDF,
    "image/jpeg": ExtractionKind.IMAGE,
    "image/jpg": ExtractionKind.IMAGE,
    "image/png": ExtractionKind.IMAGE,
}

SUPPORTED_MIME_TYPES = frozenset(MIME_DISPATCH)


class TextExtractor:
    """Routes file bytes to the PDF or OCR adapter by MIME type.

    Adapter failures of any kind are re-raised as ExtractionFailedError with the
    original exception chained, so callers never need to know which engine ran.
    """

    def __init__(self, pdf_extractor: BasePdfExtractor, ocr_engine: BaseOcrEngine) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine

    def extract(self, content: bytes, mime_type: str) -> str:
        kind = MIME_DISPATCH.get(mime_type)
        if kind is None:
            raise UnsupportedFileTypeError()
        try:
            if kind is ExtractionKind.PDF:
                text = self._pdf_extractor.extract(content)
            else:
                text = self._ocr_engine.extract(content)
        except Exception as exc:
            Log.error(f"{kind.value} extraction failed for {mime_type}: {exc}")
            raise ExtractionFailedError(f"Text extraction failed: {exc}") from exc
        return text or ""
