from typing import Any

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from doc_extractor import __version__
from doc_extractor.api.serializers import document_to_dict, upload_result_to_dict
from doc_extractor.config.settings import Settings
from doc_extractor.processor.models import UploadedFile
from doc_extractor.processor.processor import Processor

router = APIRouter()


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _read_upload(file: UploadFile | None, max_bytes: int) -> UploadedFile | None:
    """Read at most one byte past the limit so oversized files are detected cheaply."""
    if file is None or not file.filename:
        return None
    content = file.file.read(max_bytes + 1)
    size = file.size if file.size is not None else len(content)
    return UploadedFile(
        file_name=file.filename,
        mime_type=file.content_type or "",
        size_bytes=size,
        content=content,
    )


@router.post("/upload")
def upload_document(
    file: UploadFile | None = File(None),
    first_name: str | None = Form(None, alias="firstName"),
    last_name: str | None = Form(None, alias="lastName"),
    date_of_birth: str | None = Form(None, alias="dateOfBirth"),
    processor: Processor = Depends(get_processor),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    upload = _read_upload(file, settings.max_upload_bytes)
    document = processor.process(
        upload,
        {
            "firstName": first_name,
            "lastName": last_name,
            "dateOfBirth": date_of_birth,
        },
    )
    return upload_result_to_dict(document)


@router.get("/document/{document_id}")
def get_document(
    document_id: str,
    processor: Processor = Depends(get_processor),
) -> dict[str, Any]:
    return document_to_dict(processor.get_document(document_id))


@router.get("/healthz")
def healthz(processor: Processor = Depends(get_processor)) -> dict[str, Any]:
    return {
        "status": "ok",
        "version": __version__,
        "documents": processor.store.count(),
    }
