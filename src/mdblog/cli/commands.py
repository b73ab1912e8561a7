"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.errors import ContentError
from mdblog.core.pipeline import build_registry, renderer_config, run_export
from mdblog.core.registry import DocumentRegistry
from mdblog.core.render import RendererAdapter, dumps
from mdblog.logging_utils import setup_logging


PathArg = Annotated[Optional[str], typer.Argument(help="Content file or directory (default: content_dir)")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _registry(path: Optional[str], settings: Settings) -> DocumentRegistry:
    """Build the registry, exiting 1 with the offending file on the first error."""
    root = Path(path or settings.content_dir)
    if not root.exists():
        _fail(f"Path not found: {root}")
    try:
        return build_registry(root, settings)
    except ContentError as e:
        _fail(str(e))
    except (OSError, UnicodeDecodeError) as e:
        _fail("Could not read content", e)


def check_cmd(
    path: PathArg = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Threads used to read files")] = None,
    log_level: LogLevelOpt = None,
    ):
    """Parse and validate every document without writing output."""
    settings = _settings(overrides={"workers": workers, "log_level": log_level})
    registry = _registry(path, settings)
    drafts = sum(1 for _ in registry.list_drafts())
    typer.echo(f"OK - {len(registry)} document(s), {drafts} draft(s)")


def build_cmd(
    path: PathArg = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    excerpt: Annotated[Optional[int], typer.Option("--excerpt-length", help="Max excerpt length in characters")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Threads used to read files")] = None,
    preview: Annotated[bool, typer.Option("--preview", help="Include drafts in the export")] = False,
    log_level: LogLevelOpt = None,
    ):
    """Validate all documents and export JSON records for the templating layer."""
    settings = _settings(overrides={
        "output_dir": out, "excerpt_length": excerpt, "workers": workers, "log_level": log_level,
    })
    registry = _registry(path, settings)
    adapter = RendererAdapter(registry, renderer_config(settings, preview))
    output_dir = Path(settings.output_dir)
    try:
        results = run_export(adapter, output_dir)
    except OSError as e:
        _fail("Export failed", e)
    for slug, json_path in results:
        typer.echo(f"  {slug} -> {json_path}")
    typer.echo(f"Exported {len(results)} document(s) to {output_dir}/")


def list_cmd(
    path: PathArg = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts carrying this tag")] = None,
    drafts: Annotated[bool, typer.Option("--drafts", help="List unpublished documents instead")] = False,
    log_level: LogLevelOpt = None,
    ):
    """List published posts, newest first."""
    settings = _settings(overrides={"log_level": log_level})
    registry = _registry(path, settings)
    if drafts:
        docs = registry.list_drafts()
    elif tag:
        docs = registry.find_by_tag(tag)
    else:
        docs = registry.list_published()

    shown = 0
    for doc in docs:
        if drafts and tag and not doc.has_tag(tag):
            continue
        typer.echo(f"{doc.date.isoformat()}  {doc.slug}  {doc.title}")
        shown += 1
    if not shown:
        typer.echo("No documents found.")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Slug of the document to show")],
    path: PathArg = None,
    preview: Annotated[bool, typer.Option("--preview", help="Allow unpublished documents")] = False,
    log_level: LogLevelOpt = None,
    ):
    """Print one document record as JSON."""
    settings = _settings(overrides={"log_level": log_level})
    registry = _registry(path, settings)
    adapter = RendererAdapter(registry, renderer_config(settings, preview))
    try:
        record = adapter.get(slug)
    except ContentError as e:
        _fail(str(e))
    typer.echo(dumps(record.model_dump(mode="json")))
