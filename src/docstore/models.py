"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    """Naive timestamps are taken as UTC so every timestamp compares."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """A stored document; `id` is the storage key once saved."""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def utc_created(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Search filters. Absent or empty fields impose no constraint.

    Values within one list are OR-matched; the categories are AND-ed.
    Both created bounds are inclusive.
    """
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes: list[str | None] | None = None
    contains_contents: list[str | None] | None = None
    author_ids: list[str | None] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def utc_bounds(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)

    def is_empty(self) -> bool:
        """True when the request matches every document."""
        return not (
            self.title_prefixes or self.contains_contents or self.author_ids
            or self.created_from is not None or self.created_to is not None
        )
