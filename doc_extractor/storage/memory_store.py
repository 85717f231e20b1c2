import threading
from collections.abc import Callable
from dataclasses import asdict
from datetime import datetime, timezone

from doc_extractor.storage.base import BaseDocumentStore
from doc_extractor.storage.models import Document, NewDocument


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryDocumentStore(BaseDocumentStore):
    """Process-local document store backed by a lock-guarded dict.

    Ids start at ``start_id`` and grow by one per ``create`` call. Contents are
    lost when the process exits.
    """

    def __init__(
        self,
        start_id: int = 1,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._documents: dict[int, Document] = {}
        self._next_id = start_id
        self._clock = clock
        self._lock = threading.Lock()

    def create(
        self,
        new_document: NewDocument,
        created_at: datetime | None = None,
    ) -> Document:
        with self._lock:
            document = Document(
                id=self._next_id,
                created_at=created_at if created_at is not None else self._clock(),
                **asdict(new_document),
            )
            self._documents[document.id] = document
            self._next_id += 1
        return document

    def get(self, document_id: int) -> Document | None:
        return self._documents.get(document_id)

    def count(self) -> int:
        return len(self._documents)
