import re
from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from doc_extractor.config.settings import Settings
from doc_extractor.extraction.extractor import TextExtractor
from doc_extractor.logging.logger import Log
from doc_extractor.ocr.base import BaseOcrEngine
from doc_extractor.ocr.tesseract_adapter import TesseractAdapter
from doc_extractor.pdf.factory import PdfExtractorFactory
from doc_extractor.processor.exceptions import (
    DocumentNotFoundError,
    DocumentServiceError,
    InvalidIdError,
    ProcessingFailedError,
)
from doc_extractor.processor.models import UploadedFile
from doc_extractor.processor.pipeline import PipelineContext, PipelineStep
from doc_extractor.processor.steps import (
    ComputeAgeStep,
    ComputeFullNameStep,
    ExtractTextStep,
    PersistDocumentStep,
    ValidateFileStep,
    ValidateFormStep,
)
from doc_extractor.storage.base import BaseDocumentStore
from doc_extractor.storage.memory_store import InMemoryDocumentStore
from doc_extractor.storage.models import Document
from doc_extractor.worker.extraction_pool import ExtractionPool

_DOCUMENT_ID_RE = re.compile(r"-?[0-9]+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Processor:
    """Orchestrates upload processing and document lookup.

    Upload pipeline: validate file -> validate form -> extract -> age ->
    full name -> persist. A document is only stored once every earlier step
    has succeeded.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        store: BaseDocumentStore,
        clock: Callable[[], datetime] = _utcnow,
        extraction_pool: ExtractionPool | None = None,
    ) -> None:
        self._steps = steps
        self._store = store
        self._clock = clock
        self._extraction_pool = extraction_pool

    @property
    def store(self) -> BaseDocumentStore:
        return self._store

    def process(
        self,
        upload: UploadedFile | None,
        raw_form: Mapping[str, str | None],
    ) -> Document:
        """Run the upload pipeline and return the stored document.

        Raises:
            DocumentServiceError: the specific subclass for the failed stage;
                unexpected errors are wrapped in ProcessingFailedError.
        """
        context = PipelineContext(
            upload=upload,
            raw_form=dict(raw_form),
            reference_time=self._clock(),
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except DocumentServiceError as exc:
            Log.warning(f"Upload rejected: {exc.message}")
            raise
        except Exception as exc:
            Log.exception(f"Upload processing failed: {exc}")
            raise ProcessingFailedError(str(exc) or None) from exc

        if context.document is None:
            raise ProcessingFailedError()
        return context.document

    def get_document(self, raw_id: str) -> Document:
        """Look up a document by its id path segment.

        Raises:
            InvalidIdError: ``raw_id`` is not a base-10 integer.
            DocumentNotFoundError: no document was stored under that id.
        """
        if not _DOCUMENT_ID_RE.fullmatch(raw_id):
            raise InvalidIdError()
        try:
            document = self._store.get(int(raw_id))
        except Exception as exc:
            Log.exception(f"Get document error: {exc}")
            raise ProcessingFailedError("Failed to retrieve document") from exc
        if document is None:
            raise DocumentNotFoundError()
        return document

    def close(self) -> None:
        if self._extraction_pool is not None:
            self._extraction_pool.shutdown()


def build_processor(
    settings: Settings,
    store: BaseDocumentStore | None = None,
    clock: Callable[[], datetime] = _utcnow,
    ocr_engine: BaseOcrEngine | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if store is None:
        store = InMemoryDocumentStore(start_id=settings.document_id_start, clock=clock)
    if ocr_engine is None:
        ocr_engine = TesseractAdapter(
            language=settings.ocr_language,
            tesseract_cmd=settings.tesseract_cmd,
        )
    extractor = TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=ocr_engine,
    )
    extraction_pool = ExtractionPool(
        extractor,
        max_workers=settings.extraction_max_workers,
        timeout_seconds=settings.extraction_timeout_seconds,
    )
    steps: list[PipelineStep] = [
        ValidateFileStep(settings.max_upload_bytes),
        ValidateFormStep(),
        ExtractTextStep(extraction_pool),
        ComputeAgeStep(),
        ComputeFullNameStep(),
        PersistDocumentStep(store),
    ]
    return Processor(
        steps=steps,
        store=store,
        clock=clock,
        extraction_pool=extraction_pool,
    )
