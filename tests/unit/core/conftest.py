"""Shared fixtures for core unit tests"""

import datetime as dt

import pytest

from mdblog.core.models import Document


_SAMPLE_MD = """\
---
title: Streaming Documents with the MongoDB Node Driver
date: 2019-10-19
published: true
tags: [mongodb, nodejs, streams]
layout: post
series: mongo-patterns
---

Cursors in the Node driver can be consumed as readable streams, which keeps
memory flat when exporting large collections.

## Setup

```js
const cursor = collection.find().stream();
```
"""


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for validated Documents with sensible defaults."""
    def _make(title="Hello World", date=dt.date(2019, 9, 1), published=True, tags=(), body="Body text.\n", **kw):
        return Document(
            source_path=kw.pop("source_path", f"content/{title.lower().replace(' ', '-')}.md"),
            title=title,
            date=date,
            published=published,
            tags=tuple(tags),
            body=body,
            **kw,
        )
    return _make


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return _SAMPLE_MD
