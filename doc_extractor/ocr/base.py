from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for image OCR adapters."""

    @abstractmethod
    def extract(self, image_bytes: bytes) -> str:
        """Recognize text in an encoded image (PNG, JPEG).

        Returns:
            Recognized text, stripped. Empty for blank or illegible images.

        Raises:
            OcrExtractionError: if the image cannot be decoded or OCR fails.
        """
