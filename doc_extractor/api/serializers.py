from typing import Any

from doc_extractor.storage.models import Document


def document_to_dict(document: Document) -> dict[str, Any]:
    """Full stored document, as returned by the lookup endpoint."""
    return {
        "id": document.id,
        "firstName": document.first_name,
        "lastName": document.last_name,
        "dateOfBirth": document.date_of_birth,
        "fullName": document.full_name,
        "age": document.age,
        "extractedText": document.extracted_text,
        "fileName": document.file_name,
        "fileType": document.file_type,
        "createdAt": document.created_at.isoformat(),
    }


def upload_result_to_dict(document: Document) -> dict[str, Any]:
    """Subset of the document echoed back after an upload."""
    return {
        "id": document.id,
        "fullName": document.full_name,
        "age": document.age,
        "extractedText": document.extracted_text,
        "fileName": document.file_name,
        "fileType": document.file_type,
    }
