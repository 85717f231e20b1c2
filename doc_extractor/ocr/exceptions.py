class OcrExtractionError(Exception):
    """Raised when an OCR adapter cannot recognize text in an image."""
