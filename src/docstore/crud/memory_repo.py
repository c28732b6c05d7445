"""In-memory document store: upsert, filtered scan, and point lookup"""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from uuid import uuid4

from docstore.config import Settings
from docstore.crud.filters import matches
from docstore.crud.repo import DocumentRepo, InvalidDocumentError
from docstore.logging_config import get_logger
from docstore.models import Document, SearchRequest

logger = get_logger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Documents keyed by id for the lifetime of the process.

    copy_on_save keeps a deep copy of each saved document and hands out
    copies on every read, so no caller object aliases a stored entry.
    thread_safe serializes every operation on one lock; otherwise no
    locking is done.
    """
    copy_on_save: bool = True
    thread_safe: bool = False
    _docs: dict[str, Document] = field(default_factory=dict)
    _lock: AbstractContextManager = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._lock = threading.RLock() if self.thread_safe else nullcontext()

    def _out(self, doc: Document) -> Document:
        return doc.model_copy(deep=True) if self.copy_on_save else doc

    def save(self, doc: Document) -> Document:
        if doc is None:
            logger.warning("Rejected save: document is None")
            raise InvalidDocumentError("Document is None while saving")

        doc_id = (doc.id or "").strip()
        if not doc_id:
            doc_id = str(uuid4())
            logger.debug(f"Generated document id {doc_id}")
        doc.id = doc_id

        stored = self._out(doc)
        with self._lock:
            if doc_id in self._docs:
                logger.debug(f"Overwriting document {doc_id}")
            self._docs[doc_id] = stored
        return self._out(stored)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return every document passing all filters in `request`, in no particular order."""
        request = request or SearchRequest()
        with self._lock:
            total = len(self._docs)
            if request.is_empty():
                found = list(self._docs.values())
            else:
                found = [d for d in self._docs.values() if matches(d, request)]
        logger.debug(f"Search matched {len(found)} of {total} document(s)")
        return [self._out(d) for d in found]

    def find_by_id(self, doc_id: str | None) -> Document | None:
        if not doc_id:
            return None
        with self._lock:
            doc = self._docs.get(doc_id.strip())
        return None if doc is None else self._out(doc)

    def all(self) -> list[Document]:
        with self._lock:
            return [self._out(d) for d in self._docs.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        if not isinstance(doc_id, str) or not doc_id:
            return False
        with self._lock:
            return doc_id.strip() in self._docs


def make_repo(settings: Settings | None = None) -> MemoryRepo:
    settings = settings or Settings()
    return MemoryRepo(copy_on_save=settings.copy_on_save, thread_safe=settings.thread_safe)
