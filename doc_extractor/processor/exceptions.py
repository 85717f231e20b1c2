from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated constraint on one form field."""

    field: str
    message: str


class DocumentServiceError(Exception):
    """Base exception for all errors surfaced to API clients."""

    status_code: int = 500
    default_message: str = "Failed to process document"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFileError(DocumentServiceError):
    """Raised when the upload request carries no file."""

    status_code = 400
    default_message = "No file uploaded"


class UnsupportedFileTypeError(DocumentServiceError):
    """Raised when the uploaded file's MIME type is not accepted."""

    status_code = 400
    default_message = "Invalid file type. Only PDF and images (JPG, PNG) are allowed."


class FileTooLargeError(DocumentServiceError):
    """Raised when the uploaded file exceeds the configured size limit."""

    status_code = 400
    default_message = "File too large. Maximum size is 10 MB."


class InvalidFormDataError(DocumentServiceError):
    """Raised when one or more form fields fail validation."""

    status_code = 400
    default_message = "Invalid form data"

    def __init__(self, errors: list[FieldError], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


class ExtractionFailedError(DocumentServiceError):
    """Raised when the PDF or OCR engine fails. The engine error is chained."""

    status_code = 500
    default_message = "Text extraction failed"


class InvalidIdError(DocumentServiceError):
    """Raised when a document id is not a base-10 integer."""

    status_code = 400
    default_message = "Invalid document ID"


class DocumentNotFoundError(DocumentServiceError):
    """Raised when no document exists for the requested id."""

    status_code = 404
    default_message = "Document not found"


class ProcessingFailedError(DocumentServiceError):
    """Catch-all for unexpected failures while handling a request."""

    status_code = 500
    default_message = "Failed to process document"
