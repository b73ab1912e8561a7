"""Slug generation for document identifiers"""

import re


_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Lowercase text and collapse each run of non-alphanumerics into one hyphen."""
    return _NON_ALNUM_RE.sub('-', text.lower()).strip('-')
