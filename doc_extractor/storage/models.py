from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewDocument:
    """Fields of a processed upload, before the store assigns id and timestamp."""

    first_name: str
    last_name: str
    date_of_birth: str
    full_name: str
    age: int
    extracted_text: str
    file_name: str
    file_type: str


@dataclass(frozen=True)
class Document:
    """A stored, immutable record of one processed upload."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: str
    full_name: str
    age: int
    extracted_text: str
    file_name: str
    file_type: str
    created_at: datetime
