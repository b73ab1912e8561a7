"""In-memory document registry: slug assignment, uniqueness, and ordered queries"""

import logging
from collections import Counter
from typing import Iterator

from mdblog.core.errors import DuplicateSlug, InvalidFieldType, NotFound
from mdblog.core.models import Document
from mdblog.core.utils.excerpt import make_excerpt
from mdblog.core.utils.slug import slugify


logger = logging.getLogger(__name__)

DEFAULT_EXCERPT_LENGTH = 200


def sort_key(doc: Document) -> tuple[int, str]:
    """Newest first, then title ascending."""
    return (-doc.date.toordinal(), doc.title)


class DocumentRegistry:
    """Validated documents keyed by slug. Rebuilt from scratch on every run."""

    def __init__(self, excerpt_length: int = DEFAULT_EXCERPT_LENGTH) -> None:
        if excerpt_length < 1:
            raise ValueError("excerpt_length must be >= 1")
        self.excerpt_length = excerpt_length
        self._docs: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, slug: object) -> bool:
        return slug in self._docs

    def add(self, doc: Document) -> Document:
        """Register doc and return a copy carrying its slug and excerpt.

        Raises DuplicateSlug if another document already owns the slug; the
        registry is unchanged in that case.
        """
        slug = slugify(doc.title)
        if not slug:
            raise InvalidFieldType("title", "text containing letters or digits", path=doc.source_path)
        existing = self._docs.get(slug)
        if existing is not None:
            raise DuplicateSlug(slug, path=doc.source_path, existing=existing.source_path)

        registered = doc.model_copy(update={
            "slug": slug,
            "excerpt": make_excerpt(doc.body, self.excerpt_length),
        })
        self._docs[slug] = registered
        logger.debug("registered %s from %s", slug, doc.source_path)
        return registered

    def get(self, slug: str, preview: bool = False) -> Document:
        """Return the document for slug; drafts are only visible with preview=True."""
        doc = self._docs.get(slug)
        if doc is None or (not doc.published and not preview):
            raise NotFound(slug)
        return doc

    def all_documents(self) -> Iterator[Document]:
        yield from sorted(self._docs.values(), key=sort_key)

    def list_published(self) -> Iterator[Document]:
        return (d for d in self.all_documents() if d.published)

    def list_drafts(self) -> Iterator[Document]:
        return (d for d in self.all_documents() if not d.published)

    def find_by_tag(self, tag: str) -> Iterator[Document]:
        return (d for d in self.list_published() if d.has_tag(tag))

    def tags(self) -> dict[str, int]:
        """Published tag -> number of published documents carrying it, sorted by tag."""
        counts = Counter(t for d in self.list_published() for t in d.tags)
        return dict(sorted(counts.items()))
