from doc_extractor.logging.logger import Log
from doc_extractor.processor.age import calculate_age
from doc_extractor.processor.pipeline import PipelineContext, PipelineStep
from doc_extractor.processor.validation import validate_file, validate_form
from doc_extractor.storage.base import BaseDocumentStore
from doc_extractor.storage.models import NewDocument
from doc_extractor.worker.extraction_pool import ExtractionPool


class ValidateFileStep(PipelineStep):
    def __init__(self, max_upload_bytes: int) -> None:
        self._max_upload_bytes = max_upload_bytes

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = validate_file(context.upload, self._max_upload_bytes)
        Log.info(
            f"Accepted file '{upload.file_name}' ({upload.mime_type}, {upload.size_bytes} bytes)"
        )
        return context


class ValidateFormStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.form = validate_form(context.raw_form, context.reference_time.date())
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extraction_pool: ExtractionPool) -> None:
        self._extraction_pool = extraction_pool

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.upload is None:
            raise ValueError("PipelineContext.upload must be set before extraction")
        context.extracted_text = self._extraction_pool.extract(
            context.upload.content, context.upload.mime_type
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from '{context.upload.file_name}'"
        )
        return context


class ComputeAgeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.form is None:
            raise ValueError("PipelineContext.form must be set before age calculation")
        context.age = calculate_age(
            context.form.date_of_birth, context.reference_time.date()
        )
        return context


class ComputeFullNameStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.form is None:
            raise ValueError("PipelineContext.form must be set before building the full name")
        context.full_name = context.form.full_name
        return context


class PersistDocumentStep(PipelineStep):
    def __init__(self, store: BaseDocumentStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.upload is None or context.form is None or context.age is None:
            raise ValueError("PipelineContext is incomplete, cannot persist document")
        context.document = self._store.create(
            NewDocument(
                first_name=context.form.first_name,
                last_name=context.form.last_name,
                date_of_birth=context.form.date_of_birth.isoformat(),
                full_name=context.full_name,
                age=context.age,
                extracted_text=context.extracted_text,
                file_name=context.upload.file_name,
                file_type=context.upload.mime_type,
            ),
            created_at=context.reference_time,
        )
        Log.info(f"Stored document {context.document.id}")
        return context
