from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.models import Document, SearchRequest


class InvalidDocumentError(ValueError):
    """Raised when save() receives no document."""


class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert by id, generating one when blank. Return the stored document."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str | None) -> Document | None:
        raise NotImplementedError
