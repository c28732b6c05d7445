"""Per-document search predicates; a document matches when all of them pass"""

from __future__ import annotations

from typing import Callable

from docstore.models import Document, SearchRequest


def _candidates(values: list[str | None] | None) -> list[str]:
    """Drop null entries; they never contribute a match."""
    return [v for v in values if v is not None]


def title_matches(doc: Document, request: SearchRequest) -> bool:
    """Title starts with any of the requested prefixes."""
    if not request.title_prefixes:
        return True
    if doc.title is None:
        return False
    return any(doc.title.startswith(p) for p in _candidates(request.title_prefixes))


def content_matches(doc: Document, request: SearchRequest) -> bool:
    """Content contains any of the requested substrings."""
    if not request.contains_contents:
        return True
    if doc.content is None:
        return False
    return any(s in doc.content for s in _candidates(request.contains_contents))


def author_matches(doc: Document, request: SearchRequest) -> bool:
    if not request.author_ids:
        return True
    if doc.author is None or doc.author.id is None:
        return False
    return doc.author.id in _candidates(request.author_ids)


def created_in_range(doc: Document, request: SearchRequest) -> bool:
    """Inclusive [created_from, created_to]; a set bound fails a document without `created`."""
    if request.created_from is not None:
        if doc.created is None or doc.created < request.created_from:
            return False
    if request.created_to is not None:
        if doc.created is None or doc.created > request.created_to:
            return False
    return True


Predicate = Callable[[Document, SearchRequest], bool]

PREDICATES: tuple[Predicate, ...] = (title_matches, content_matches, author_matches, created_in_range)


def matches(doc: Document, request: SearchRequest) -> bool:
    return all(p(doc, request) for p in PREDICATES)
