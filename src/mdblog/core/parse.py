"""File discovery and per-file parse + validate"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mdblog.core.errors import ContentError
from mdblog.core.frontmatter import parse_frontmatter
from mdblog.core.models import Document
from mdblog.core.validate import validate


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.markdown', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted Markdown files under path, or [path] if a single Markdown file.

    An explicit file without a Markdown suffix raises ContentError.
    """
    if path.is_file():
        if path.suffix.lower() not in MD_EXTENSIONS:
            raise ContentError(f"not a Markdown file (expected one of {sorted(MD_EXTENSIONS)})", path=path)
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def read_document(path: Path) -> Document:
    """Parse and validate one file. Errors carry the file path."""
    raw = path.read_text(encoding='utf-8')
    metadata, body = parse_frontmatter(raw, path=path)
    return validate(metadata, body, path=path, raw_source=raw)


def load_documents(paths: list[Path], workers: int = 1) -> list[Document]:
    """Read every path, in parallel when workers > 1.

    Results keep input order and the first failing path (in that order) raises.
    """
    if workers <= 1 or len(paths) <= 1:
        return [read_document(p) for p in paths]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(read_document, p) for p in paths]
        return [f.result() for f in futures]
