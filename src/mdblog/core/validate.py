"""Content validation: turn a parsed (metadata, body) pair into a Document"""

import datetime as dt
from pathlib import Path
from typing import Any

from mdblog.core.errors import EmptyBody, InvalidFieldType, MissingRequiredField
from mdblog.core.models import Document


DECLARED_FIELDS = ("title", "date", "tags", "published", "layout")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _title(meta: dict, path) -> str:
    value = meta.get("title")
    if _is_blank(value):
        raise MissingRequiredField("title", path=path)
    if not isinstance(value, str):
        raise InvalidFieldType("title", "text", path=path)
    return value.strip()


def _date(meta: dict, path) -> dt.date:
    value = meta.get("date")
    if _is_blank(value):
        raise MissingRequiredField("date", path=path)
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise InvalidFieldType("date", "an ISO-8601 date", path=path)


def _published(meta: dict, path) -> bool:
    value = meta.get("published")
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidFieldType("published", "a boolean", path=path)
    return value


def _tags(meta: dict, path) -> tuple[str, ...]:
    value = meta.get("tags")
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
        raise InvalidFieldType("tags", "a sequence of text", path=path)
    # Deduplicated, first-seen order kept for display.
    return tuple(dict.fromkeys(t.strip() for t in value if t.strip()))


def validate(
    metadata: dict[str, Any],
    body: str,
    path: str | Path = "<memory>",
    raw_source: str = "",
    ) -> Document:
    """Validate parsed front matter and body; raise a ContentError on the first problem.

    Checks run in order: title, date, published, tags, body. Keys outside the
    declared set are carried through unchanged in Document.extra.
    """
    title = _title(metadata, path)
    date = _date(metadata, path)
    published = _published(metadata, path)
    tags = _tags(metadata, path)
    if not body.strip():
        raise EmptyBody(path=path)

    layout = metadata.get("layout")
    return Document(
        source_path=str(path),
        raw_source=raw_source,
        title=title,
        date=date,
        tags=tags,
        published=published,
        layout=str(layout) if layout is not None else None,
        extra={k: v for k, v in metadata.items() if k not in DECLARED_FIELDS},
        body=body,
    )
