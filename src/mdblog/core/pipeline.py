"""Pipeline step functions: build the registry and export records"""

import logging
from pathlib import Path

from mdblog.config import Settings
from mdblog.core.parse import discover_files, load_documents
from mdblog.core.registry import DocumentRegistry
from mdblog.core.render import RendererAdapter, RendererConfig, dumps, to_json


logger = logging.getLogger(__name__)


def renderer_config(settings: Settings, preview: bool = False) -> RendererConfig:
    return RendererConfig(layouts=settings.layouts, default_layout=settings.default_layout, preview=preview)


def build_registry(path: str | Path, settings: Settings) -> DocumentRegistry:
    """Discover, parse, and validate every file under path, then register sequentially.

    Fails fast: the first ContentError propagates and nothing is returned.
    """
    files = discover_files(Path(path))
    logger.debug("discovered %d file(s) under %s", len(files), path)
    docs = load_documents(files, settings.workers)

    registry = DocumentRegistry(settings.excerpt_length)
    for doc in docs:
        registry.add(doc)
    logger.info("registered %d document(s) from %s", len(registry), path)
    return registry


def run_export(adapter: RendererAdapter, output_dir: Path) -> list[tuple[str, Path]]:
    """Write index.json, tags.json, and one <slug>.json per listed document.

    Returns (slug, json_path) pairs in listing order.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    records = adapter.published()

    (output_dir / "index.json").write_text(dumps(to_json(records, include_body=False)), encoding='utf-8')
    (output_dir / "tags.json").write_text(dumps(adapter.tags()), encoding='utf-8')

    results = []
    for record in records:
        out_file = output_dir / f"{record.slug}.json"
        out_file.write_text(dumps(record.model_dump(mode="json")), encoding='utf-8')
        results.append((record.slug, out_file))
    logger.info("exported %d record(s) to %s", len(results), output_dir)
    return results
