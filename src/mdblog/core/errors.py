"""Content error taxonomy: every failure names the file or slug at fault"""

from pathlib import Path


class ContentError(ValueError):
    """Base class for authoring mistakes found during ingestion or lookup."""

    def __init__(self, message: str, *, path: str | Path | None = None, slug: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.slug = slug

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedFrontMatter(ContentError):
    """Leading front-matter block is absent, unterminated, or not a flat mapping."""

    def __init__(self, reason: str, *, path: str | Path | None = None) -> None:
        super().__init__(f"malformed front matter: {reason}", path=path)
        self.reason = reason


class MissingRequiredField(ContentError):
    def __init__(self, field: str, *, path: str | Path | None = None) -> None:
        super().__init__(f"missing required field '{field}'", path=path)
        self.field = field


class InvalidFieldType(ContentError):
    def __init__(self, field: str, expected: str, *, path: str | Path | None = None) -> None:
        super().__init__(f"field '{field}' must be {expected}", path=path)
        self.field = field
        self.expected = expected


class EmptyBody(ContentError):
    def __init__(self, *, path: str | Path | None = None) -> None:
        super().__init__("document body is empty", path=path)


class DuplicateSlug(ContentError):
    """Two documents normalize to the same slug; the registry never renames."""

    def __init__(self, slug: str, *, path: str | Path | None = None, existing: str | None = None) -> None:
        detail = f" (already used by {existing})" if existing else ""
        super().__init__(f"duplicate slug '{slug}'{detail}", path=path, slug=slug)
        self.existing = existing


class NotFound(ContentError, LookupError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"no document with slug '{slug}'", slug=slug)
