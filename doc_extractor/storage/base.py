from abc import ABC, abstractmethod
from datetime import datetime

from doc_extractor.storage.models import Document, NewDocument


class BaseDocumentStore(ABC):
    """Contract for document stores. Documents are created once and never changed."""

    @abstractmethod
    def create(
        self,
        new_document: NewDocument,
        created_at: datetime | None = None,
    ) -> Document:
        """Assign the next id, stamp the creation time, store and return the document.

        ``created_at`` defaults to the store's clock. Callers that derived
        fields from a reference time pass that same time here.
        """

    @abstractmethod
    def get(self, document_id: int) -> Document | None:
        """Return the document for this id, or None if it was never created."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored documents."""
