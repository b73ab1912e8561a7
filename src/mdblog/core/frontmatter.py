"""Front-matter parsing: split a raw document into a flat metadata mapping and body"""

import datetime as dt
from pathlib import Path
from typing import Any

import yaml

from mdblog.core.errors import MalformedFrontMatter


DELIMITER = "---"
CLOSERS = {"---", "..."}
_SCALARS = (str, bool, int, float, dt.date, dt.datetime)


class _FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as text; dates are checked by the validator."""


_FrontMatterLoader.add_constructor("tag:yaml.org,2002:timestamp", _FrontMatterLoader.construct_yaml_str)


def _check_value(key: str, value: Any, path) -> None:
    """Reject anything but scalars and sequences of scalars."""
    if value is None or isinstance(value, _SCALARS):
        return
    if isinstance(value, list):
        for item in value:
            if item is not None and not isinstance(item, _SCALARS):
                raise MalformedFrontMatter(f"key '{key}' holds a nested sequence item", path=path)
        return
    raise MalformedFrontMatter(
        f"key '{key}' holds a {type(value).__name__}; only scalars and lists of scalars are allowed",
        path=path,
    )


def _load_block(block: str, path) -> dict[str, Any]:
    try:
        data = yaml.load(block, Loader=_FrontMatterLoader) if block.strip() else {}
    except (yaml.YAMLError, ValueError) as e:
        raise MalformedFrontMatter(f"invalid YAML: {e}", path=path) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatter(f"expected a mapping, got {type(data).__name__}", path=path)
    for key, value in data.items():
        if not isinstance(key, str):
            raise MalformedFrontMatter(f"key {key!r} is not text", path=path)
        _check_value(key, value, path)
    return data


def parse_frontmatter(text: str, path: str | Path | None = None) -> tuple[dict[str, Any], str]:
    """Return (metadata, body) for a document that opens with a '---' block.

    Body is everything after the closing delimiter with leading blank lines
    removed; trailing whitespace is kept as-is.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        raise MalformedFrontMatter("document does not start with a '---' line", path=path)

    for end, line in enumerate(lines[1:], start=1):
        if line.rstrip() in CLOSERS:
            break
    else:
        raise MalformedFrontMatter("closing '---' line not found", path=path)

    metadata = _load_block("".join(lines[1:end]), path)
    rest = lines[end + 1:]
    while rest and not rest[0].strip():
        rest.pop(0)
    return metadata, "".join(rest)


def dump_frontmatter(metadata: dict[str, Any], body: str) -> str:
    """Serialize (metadata, body) back into a document parse_frontmatter accepts."""
    header = yaml.safe_dump(metadata, default_flow_style=False, allow_unicode=True, sort_keys=False) if metadata else ""
    return f"{DELIMITER}\n{header}{DELIMITER}\n\n{body}"
