"""Shared fixtures for docs_tree tests."""

from __future__ import annotations

import typing as typ

import pytest

from docs_tree.models import DocumentRecord

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_documents() -> list[DocumentRecord]:
    """Return a small, unordered documentation set with one missing category.

    ``platforms/python/guides`` has no document of its own, so building the
    tree must synthesize it beneath ``platforms/python``.
    """
    return [
        DocumentRecord(slug="platforms/python/guides/flask", title="Flask"),
        DocumentRecord(slug="platforms/go/index", title="Go", order=2),
        DocumentRecord(slug="index", title="Sentry Docs"),
        DocumentRecord(slug="platforms/python", title="Python", order=1),
        DocumentRecord(slug="platforms/index", title="Platforms"),
        DocumentRecord(slug="product", title="Product", order=10),
        DocumentRecord(
            slug="platforms/python/guides/django",
            title="Django",
            extra={"sdk": "sentry.python.django"},
        ),
        DocumentRecord(slug="product/alerts", title="alerts"),
        DocumentRecord(slug="product/Issues", title="Issues"),
    ]


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Write a Markdown content tree with frontmatter and return its root."""
    root = tmp_path / "content"
    files = {
        "index.mdx": "---\ntitle: Home Page\n---\nWelcome.\n",
        "platforms/index.mdx": "---\ntitle: Platforms\nsidebar_order: 1\n---\n",
        "platforms/python/index.mdx": (
            "---\ntitle: Python\nsidebar_order: 1\n---\n# Python\n"
        ),
        "platforms/go/index.md": "---\ntitle: Go\nsidebar_order: 2\n---\n# Go\n",
        "platforms/python/guides/flask.mdx": "---\ntitle: Flask\n---\n",
        "platforms/rust/getting-started.md": "# Getting started\n",
        "notes.txt": "not a document\n",
    }
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root
