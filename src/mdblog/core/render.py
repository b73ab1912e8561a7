"""Renderer adapter: hand ordered, validated records to an external templating layer"""

import json
from typing import Iterable

from pydantic import BaseModel, Field

from mdblog.core.models import Document, PostRecord
from mdblog.core.registry import DocumentRegistry


class RendererConfig(BaseModel):
    layouts:        dict[str, str] = Field(default_factory=dict, description="Front-matter layout -> template id")
    default_layout: str = Field(default="post", description="Template id for documents without a layout")
    preview:        bool = Field(default=False, description="Include drafts in listings and lookups")


class RendererAdapter:
    """Read-only view over a registry. Performs no rendering itself."""

    def __init__(self, registry: DocumentRegistry, config: RendererConfig | None = None) -> None:
        self._registry = registry
        self.config = config or RendererConfig()

    def _layout(self, doc: Document) -> str:
        if doc.layout:
            return self.config.layouts.get(doc.layout, doc.layout)
        return self.config.default_layout

    def to_record(self, doc: Document) -> PostRecord:
        return PostRecord(
            slug=doc.slug,
            title=doc.title,
            tags=doc.tags,
            date=doc.date,
            published=doc.published,
            excerpt=doc.excerpt or "",
            body=doc.body,
            layout=self._layout(doc),
        )

    def _listing(self) -> Iterable[Document]:
        if self.config.preview:
            return self._registry.all_documents()
        return self._registry.list_published()

    def published(self) -> tuple[PostRecord, ...]:
        return tuple(self.to_record(d) for d in self._listing())

    def by_tag(self, tag: str) -> tuple[PostRecord, ...]:
        return tuple(self.to_record(d) for d in self._listing() if d.has_tag(tag))

    def get(self, slug: str) -> PostRecord:
        return self.to_record(self._registry.get(slug, preview=self.config.preview))

    def tags(self) -> dict[str, list[str]]:
        """Tag -> slugs in listing order."""
        index: dict[str, list[str]] = {}
        for doc in self._listing():
            for tag in doc.tags:
                index.setdefault(tag, []).append(doc.slug)
        return dict(sorted(index.items()))


def to_json(records: Iterable[PostRecord], include_body: bool = True) -> list[dict]:
    """JSON-ready dicts for records; dates become ISO strings."""
    exclude = None if include_body else {"body"}
    return [r.model_dump(mode="json", exclude=exclude) for r in records]


def dumps(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
