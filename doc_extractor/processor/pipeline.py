from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from doc_extractor.processor.models import UploadedFile, UploadForm
from doc_extractor.storage.models import Document


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile | None
    raw_form: dict[str, str | None]
    reference_time: datetime
    form: UploadForm | None = None
    extracted_text: str = ""
    age: int | None = None
    full_name: str = ""
    document: Document | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
