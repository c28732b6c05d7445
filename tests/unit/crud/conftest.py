"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.models import Author, Document


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty copy-on-save store."""
    return MemoryRepo()


@pytest.fixture(name="fruit")
def fruit_fixture(repo):
    """Three documents a, b, c saved to the repo."""
    docs = [
        Document(id="a", title="Apple", content="red fruit", author=Author(id="alice"),
                 created=datetime(2024, 1, 1, tzinfo=timezone.utc)),
        Document(id="b", title="Apricot", content="orange stone fruit", author=Author(id="bob"),
                 created=datetime(2024, 2, 1, tzinfo=timezone.utc)),
        Document(id="c", title="Banana", content="yellow fruit", author=Author(id="alice"),
                 created=datetime(2024, 3, 1, tzinfo=timezone.utc)),
    ]
    return [repo.save(d) for d in docs]
