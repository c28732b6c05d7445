"""Load documents from a YAML seed file into a store"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.crud.repo import DocumentRepo
from docstore.logging_config import get_logger
from docstore.models import Document

logger = get_logger(__name__)


def load_documents(path: str | Path) -> list[Document]:
    """Parse a seed file into Documents.

    The file holds either a list of document mappings or a mapping with a
    `documents` key. Raises ValueError for unreadable YAML or invalid documents.
    """
    path = Path(path)
    try:
        data: Any = yaml.safe_load(path.read_text()) or []
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents") or []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    try:
        docs = [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e
    logger.info(f"Loaded {len(docs)} document(s) from {path}")
    return docs


def seed_repo(repo: DocumentRepo, docs: list[Document]) -> list[Document]:
    """Save each document in order; later duplicates of an id overwrite earlier ones."""
    return [repo.save(doc) for doc in docs]
