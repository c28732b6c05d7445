"""Root test configuration: seed files shared by CLI tests"""

from pathlib import Path

import pytest


SEED_YAML = """\
documents:
  - id: a
    title: Apple
    content: red fruit from the orchard
    author: {id: alice, name: Alice}
    created: 2024-01-01T00:00:00
  - id: b
    title: Apricot
    content: orange stone fruit
    author: {id: bob, name: Bob}
    created: 2024-02-01T00:00:00
  - id: c
    title: Banana
    content: yellow fruit
    author: {id: alice, name: Alice}
    created: 2024-03-01T00:00:00
"""


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path) -> Path:
    """A YAML seed file holding documents a, b and c."""
    p = tmp_path / "docs.yaml"
    p.write_text(SEED_YAML)
    return p


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run each test away from any project config.yaml and DOCSTORE_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in ("COPY_ON_SAVE", "THREAD_SAFE", "LOG_LEVEL", "OUTPUT_FORMAT", "APP_NAME"):
        monkeypatch.delenv(f"DOCSTORE_{name}", raising=False)
