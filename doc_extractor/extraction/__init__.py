from doc_extractor.extraction.extractor import (
    MIME_DISPATCH,
    SUPPORTED_MIME_TYPES,
    ExtractionKind,
    TextExtractor,
)

__all__ = ["MIME_DISPATCH", "SUPPORTED_MIME_TYPES", "ExtractionKind", "TextExtractor"]
