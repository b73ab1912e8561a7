"""Root test configuration: isolated working directory and post-writing helper"""

import pytest


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so config.yaml and env vars cannot leak in."""
    monkeypatch.chdir(tmp_path)
    for name in ("CONTENT_DIR", "OUTPUT_DIR", "EXCERPT_LENGTH", "WORKERS", "DEFAULT_LAYOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"MDBLOG_{name}", raising=False)


@pytest.fixture(name="write_post")
def write_post_fixture(tmp_path):
    """Return a helper that writes a Markdown post under tmp_path/content."""
    content = tmp_path / "content"
    content.mkdir(exist_ok=True)

    def _write(name: str, title: str, date: str = "2019-09-01", published: bool = True,
               tags: list[str] | None = None, body: str = "Some body text.\n", extra: str = ""):
        tag_line = f"tags: [{', '.join(tags)}]\n" if tags is not None else ""
        text = (
            f"---\ntitle: \"{title}\"\ndate: {date}\npublished: {str(published).lower()}\n"
            f"{tag_line}{extra}---\n\n{body}"
        )
        path = content / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
