"""Validates the uploaded file and form fields before any extraction work."""

import re
from collections.abc import Mapping
from datetime import date

from doc_extractor.extraction.extractor import SUPPORTED_MIME_TYPES
from doc_extractor.processor.exceptions import (
    FieldError,
    FileTooLargeError,
    InvalidFormDataError,
    MissingFileError,
    UnsupportedFileTypeError,
)
from doc_extractor.processor.models import UploadedFile, UploadForm

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_REQUIRED_FIELDS: dict[str, str] = {
    "firstName": "First name is required",
    "lastName": "Last name is required",
    "dateOfBirth": "Date of birth is required",
}


def validate_file(upload: UploadedFile | None, max_bytes: int) -> UploadedFile:
    """Check presence, then size, then MIME type.

    Raises:
        MissingFileError: no file was sent.
        FileTooLargeError: the file is larger than ``max_bytes``.
        UnsupportedFileTypeError: the MIME type is not PDF, JPEG or PNG.
    """
    if upload is None:
        raise MissingFileError()
    if upload.size_bytes > max_bytes:
        raise FileTooLargeError(
            f"File too large. Maximum size is {_format_megabytes(max_bytes)} MB."
        )
    if upload.mime_type not in SUPPORTED_MIME_TYPES:
        raise UnsupportedFileTypeError()
    return upload


def validate_form(raw: Mapping[str, str | None], today: date) -> UploadForm:
    """Validate the three personal fields, collecting every violation.

    Raises:
        InvalidFormDataError: listing each offending field.
    """
    errors: list[FieldError] = []
    values: dict[str, str] = {}
    for field, required_message in _REQUIRED_FIELDS.items():
        value = (raw.get(field) or "").strip()
        if not value:
            errors.append(FieldError(field=field, message=required_message))
        values[field] = value

    date_of_birth: date | None = None
    if values["dateOfBirth"]:
        date_of_birth = _parse_date_of_birth(values["dateOfBirth"], today, errors)

    if errors or date_of_birth is None:
        raise InvalidFormDataError(errors)
    return UploadForm(
        first_name=values["firstName"],
        last_name=values["lastName"],
        date_of_birth=date_of_birth,
    )


def _parse_date_of_birth(value: str, today: date, errors: list[FieldError]) -> date | None:
    if not _ISO_DATE_RE.fullmatch(value):
        errors.append(FieldError("dateOfBirth", "Date of birth must be in YYYY-MM-DD format"))
        return None
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        errors.append(FieldError("dateOfBirth", "Date of birth is not a valid date"))
        return None
    if parsed > today:
        errors.append(FieldError("dateOfBirth", "Date of birth cannot be in the future"))
        return None
    return parsed


def _format_megabytes(size_bytes: int) -> str:
    megabytes = size_bytes / (1024 * 1024)
    return f"{megabytes:g}"
