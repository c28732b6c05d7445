"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.crud.memory_repo import MemoryRepo, make_repo
from docstore.crud.seed import load_documents, seed_repo
from docstore.logging_config import setup_logging
from docstore.models import Document, SearchRequest


SeedArg = Annotated[Path, typer.Argument(help="YAML file of documents to load")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="text or json")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _load(seed: Path, settings: Settings) -> MemoryRepo:
    """Build a fresh store from settings and fill it from the seed file."""
    repo = make_repo(settings)
    try:
        seed_repo(repo, load_documents(seed))
    except (OSError, ValueError) as e:
        _fail(f"Could not load {seed}", e)
    return repo


def _echo_doc(doc: Document, output_format: str) -> None:
    if output_format == "json":
        typer.echo(doc.model_dump_json(exclude_none=True))
    else:
        typer.echo(f"{doc.id}\t{doc.title or ''}")


def search_cmd(
    seed: SeedArg,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Earliest created time, inclusive")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Latest created time, inclusive")] = None,
    output_format: FormatOpt = None,
    ):
    """Print documents in the seed file that match every given filter."""
    settings = _settings(overrides={"output_format": output_format})
    repo = _load(seed, settings)
    request = SearchRequest(
        title_prefixes=title_prefix,
        contains_contents=contains,
        author_ids=author,
        created_from=created_from,
        created_to=created_to,
    )
    for doc in sorted(repo.search(request), key=lambda d: d.id):
        _echo_doc(doc, settings.output_format)


def get_cmd(
    seed: SeedArg,
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    output_format: FormatOpt = None,
    ):
    """Print a single document by id."""
    settings = _settings(overrides={"output_format": output_format})
    repo = _load(seed, settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"Not found: {doc_id}", err=True)
        raise typer.Exit(1)
    _echo_doc(doc, settings.output_format)


def count_cmd(seed: SeedArg):
    """Print how many distinct documents the seed file holds."""
    settings = _settings()
    repo = _load(seed, settings)
    typer.echo(str(len(repo)))
