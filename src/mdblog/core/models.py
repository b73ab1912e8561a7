"""Document and record models shared by the parser, registry, and renderer adapter"""

import datetime as dt
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


Scalar = Union[bool, int, float, str, dt.datetime, dt.date, None]
MetaValue = Union[Scalar, tuple[Scalar, ...]]


class Document(BaseModel):
    """One authored article. Immutable; derived fields are attached via model_copy.

    Equality treats tags as a set; the tuple keeps first-seen order for display.
    """
    model_config = ConfigDict(frozen=True)

    source_path: str
    raw_source:  str = Field(default="", repr=False)
    title:       str
    date:        dt.date
    tags:        tuple[str, ...] = ()
    published:   bool = False
    layout:      Optional[str] = None
    extra:       Mapping[str, MetaValue] = Field(default_factory=dict, validate_default=True)   # unknown keys, source order
    body:        str = Field(repr=False)
    slug:        Optional[str] = None
    excerpt:     Optional[str] = None

    @field_validator("extra", mode="after")
    @classmethod
    def _read_only_extra(cls, value: Mapping[str, MetaValue]) -> Mapping[str, MetaValue]:
        return MappingProxyType(dict(value))

    @field_serializer("extra")
    def _serialize_extra(self, value: Mapping[str, MetaValue]) -> dict[str, MetaValue]:
        return dict(value)

    @property
    def tag_set(self) -> frozenset[str]:
        return frozenset(self.tags)

    def _identity(self) -> tuple:
        return (
            self.source_path, self.raw_source, self.title, self.date, self.tag_set,
            self.published, self.layout, self.body, self.slug, self.excerpt,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._identity() == other._identity() and dict(self.extra) == dict(other.extra)

    def __hash__(self) -> int:
        return hash(self._identity())

    @property
    def metadata(self) -> dict[str, Any]:
        """Declared fields followed by pass-through fields, in that order."""
        meta: dict[str, Any] = {
            "title": self.title,
            "date": self.date,
            "tags": list(self.tags),
            "published": self.published,
        }
        if self.layout is not None:
            meta["layout"] = self.layout
        meta.update(self.extra)
        return meta

    def has_tag(self, tag: str) -> bool:
        return tag in self.tag_set


class PostRecord(BaseModel):
    """Plain record handed to the external templating layer."""
    model_config = ConfigDict(frozen=True)

    slug:      str
    title:     str
    tags:      tuple[str, ...]
    date:      dt.date
    published: bool
    excerpt:   str
    body:      str
    layout:    str
