class PdfExtractionError(Exception):
    """Raised when a PDF adapter cannot read text from the given bytes."""
