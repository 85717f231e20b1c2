from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file as received from the client."""

    file_name: str
    mime_type: str
    size_bytes: int
    content: bytes


@dataclass(frozen=True)
class UploadForm:
    """Validated and trimmed form fields."""

    first_name: str
    last_name: str
    date_of_birth: date

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
