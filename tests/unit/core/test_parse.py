"""Unit tests for core/parse.py"""

import pytest

from mdblog.core.errors import ContentError, InvalidFieldType, MalformedFrontMatter, MissingRequiredField
from mdblog.core.parse import discover_files, load_documents, read_document


def test_discover_files_single(tmp_path):
    f = tmp_path / "post.md"
    f.write_text("x")
    assert discover_files(f) == [f]


def test_discover_files_rejects_single_non_markdown_file(tmp_path):
    f = tmp_path / "notes.txt"
    f.write_text("text")
    with pytest.raises(ContentError) as exc:
        discover_files(f)
    assert exc.value.path == str(f)


def test_read_document_impossible_date(tmp_path):
    path = tmp_path / "bad.md"
    path.write_text("---\ntitle: Bad\ndate: 2019-02-30\n---\nBody\n")
    with pytest.raises(InvalidFieldType) as exc:
        read_document(path)
    assert exc.value.field == "date"
    assert exc.value.path == str(path)


def test_discover_files_skips_other_suffixes(tmp_path):
    (tmp_path / "notes.txt").write_text("text")
    (tmp_path / "image.png").write_bytes(b"")
    assert discover_files(tmp_path) == []


def test_discover_files_recursive_and_sorted(tmp_path):
    (tmp_path / "b.md").write_text("b")
    sub = tmp_path / "2019"
    sub.mkdir()
    (sub / "a.markdown").write_text("a")
    assert discover_files(tmp_path) == [sub / "a.markdown", tmp_path / "b.md"]


def test_read_document(write_post):
    path = write_post("replica.md", "Run a MongoDB Replica Set Locally", tags=["mongodb"])
    doc = read_document(path)
    assert doc.title == "Run a MongoDB Replica Set Locally"
    assert doc.source_path == str(path)
    assert doc.raw_source == path.read_text(encoding="utf-8")


def test_read_document_error_names_file(tmp_path):
    path = tmp_path / "broken.md"
    path.write_text("no front matter here\n")
    with pytest.raises(MalformedFrontMatter) as exc:
        read_document(path)
    assert exc.value.path == str(path)


@pytest.mark.parametrize("workers", [1, 4])
def test_load_documents_keeps_order(write_post, workers):
    paths = [write_post(f"p{i}.md", f"Post {i}") for i in range(6)]
    docs = load_documents(paths, workers=workers)
    assert [d.title for d in docs] == [f"Post {i}" for i in range(6)]


@pytest.mark.parametrize("workers", [1, 3])
def test_load_documents_fails_on_first_bad_file(tmp_path, write_post, workers):
    good = write_post("a.md", "Good")
    bad = tmp_path / "content" / "b.md"
    bad.write_text("---\ntitle: No Date\n---\nBody\n")
    with pytest.raises(MissingRequiredField) as exc:
        load_documents([good, bad], workers=workers)
    assert exc.value.field == "date"
    assert exc.value.path == str(bad)
