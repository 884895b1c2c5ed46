"""Unit tests for loading document records from Markdown and manifests."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from docs_tree.builder import build_tree
from docs_tree.errors import FrontmatterError
from docs_tree.frontmatter import (
    load_documents,
    load_manifest,
    parse_frontmatter,
    slug_for_path,
)
from docs_tree.models import DocumentRecord

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_parse_frontmatter_reads_leading_block() -> None:
    """The YAML block delimited by ``---`` lines should become a mapping."""
    text = "---\ntitle: Flask\nsidebar_order: 4\ndescription: Web apps\n---\nBody\n"
    assert parse_frontmatter(text) == {
        "title": "Flask",
        "sidebar_order": 4,
        "description": "Web apps",
    }


def test_parse_frontmatter_handles_missing_and_empty_blocks() -> None:
    """Documents without frontmatter, or with an empty block, yield ``{}``."""
    assert parse_frontmatter("# Heading\n---\ntitle: nope\n---\n") == {}
    assert parse_frontmatter("---\n---\nBody\n") == {}


def test_parse_frontmatter_rejects_non_mapping() -> None:
    """A list in the frontmatter block is not usable metadata."""
    with pytest.raises(FrontmatterError, match="mapping"):
        parse_frontmatter("---\n- one\n- two\n---\n")


def test_parse_frontmatter_wraps_yaml_errors() -> None:
    """Malformed YAML should surface as a FrontmatterError."""
    with pytest.raises(FrontmatterError, match="Invalid YAML"):
        parse_frontmatter("---\ntitle: [unclosed\n---\n")


def test_slug_for_path_strips_suffix(tmp_path: Path) -> None:
    """Slugs are content-relative POSIX paths without the file suffix."""
    path = tmp_path / "platforms" / "python" / "index.mdx"
    assert slug_for_path(path, tmp_path) == "platforms/python/index"


def test_load_documents_reads_every_markdown_file(content_dir: Path) -> None:
    """Only configured suffixes should be loaded, each with a derived slug."""
    documents = load_documents(content_dir)
    slugs = [doc.slug for doc in documents]
    assert "notes" not in slugs, "non-Markdown files must be skipped"
    python = next(doc for doc in documents if doc.slug == "platforms/python/index")
    assert python.title == "Python"
    assert python.order == 1
    rust = next(
        doc for doc in documents if doc.slug == "platforms/rust/getting-started"
    )
    assert rust.title is None, "files without frontmatter carry only a slug"


def test_load_documents_respects_extensions(content_dir: Path) -> None:
    """Restricting extensions should drop files with other suffixes."""
    documents = load_documents(content_dir, extensions=[".md"])
    assert sorted(doc.slug for doc in documents) == [
        "platforms/go/index",
        "platforms/rust/getting-started",
    ]


def test_frontmatter_slug_overrides_path(tmp_path: Path) -> None:
    """An explicit ``slug`` key in frontmatter wins over the file path."""
    (tmp_path / "misc.md").write_text(
        "---\nslug: platforms/index\ntitle: Platforms\n---\n", encoding="utf-8"
    )
    (document,) = load_documents(tmp_path)
    assert document.slug == "platforms/index"


def test_load_documents_names_file_on_error(tmp_path: Path) -> None:
    """Errors should identify which file carries the bad frontmatter."""
    (tmp_path / "broken.md").write_text("---\n42\n---\n", encoding="utf-8")
    with pytest.raises(FrontmatterError, match="broken.md"):
        load_documents(tmp_path)


def test_load_documents_requires_directory(tmp_path: Path) -> None:
    """A missing content directory is reported as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_documents(tmp_path / "absent")


def test_loaded_content_builds_tree(content_dir: Path) -> None:
    """Records from disk should build a tree with synthesized categories."""
    root = build_tree(load_documents(content_dir))
    assert root is not None
    assert root.title == "Home Page"
    platforms = root.children[0]
    assert [child.segment for child in platforms.children] == [
        "python",
        "go",
        "rust",
    ]
    rust = platforms.children[2]
    assert rust.synthesized, "rust has no index page and must be synthesized"


def test_load_manifest_accepts_list_and_mapping(tmp_path: Path) -> None:
    """Manifests may be a bare list or a mapping with a ``documents`` key."""
    listed = tmp_path / "list.yaml"
    listed.write_text(
        dedent(
            """
            - slug: platforms/python
              title: Python
              sidebar_order: 1
            - slug: platforms/go
              title: Go
              category: mobile
            """
        ),
        encoding="utf-8",
    )
    wrapped = tmp_path / "wrapped.yaml"
    wrapped.write_text(
        "documents:\n  - slug: product\n    title: Product\n", encoding="utf-8"
    )

    documents = load_manifest(listed)
    assert documents[0] == DocumentRecord(
        slug="platforms/python", title="Python", order=1, extra={}
    )
    assert documents[1].extra == {"category": "mobile"}
    assert [doc.slug for doc in load_manifest(wrapped)] == ["product"]


def test_load_manifest_rejects_entries_without_slug(tmp_path: Path) -> None:
    """Every manifest entry must be a mapping with a slug."""
    manifest = tmp_path / "manifest.yaml"
    manifest.write_text("- title: Orphan\n", encoding="utf-8")
    with pytest.raises(FrontmatterError, match="entry 0"):
        load_manifest(manifest)
