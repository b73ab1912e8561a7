"""Excerpt extraction: first top-level paragraph, cut on a word boundary"""

from functools import lru_cache

from markdown_it import MarkdownIt


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark")


def first_paragraph(body: str) -> str:
    """Return the first top-level paragraph of body with line breaks collapsed, or ''."""
    tokens = _parser().parse(body)
    for i, tok in enumerate(tokens):
        if tok.type == 'paragraph_open' and tok.level == 0:
            inline = tokens[i + 1]
            return " ".join(inline.content.split())
    return ""


def truncate_words(text: str, budget: int) -> str:
    """Cut text to at most budget chars without splitting a word.

    A first word longer than budget is returned whole.
    """
    if len(text) <= budget:
        return text
    cut = text.rfind(" ", 0, budget + 1)
    if cut <= 0:
        return text.split(" ", 1)[0]
    return text[:cut].rstrip()


def make_excerpt(body: str, budget: int) -> str:
    return truncate_words(first_paragraph(body), budget)
