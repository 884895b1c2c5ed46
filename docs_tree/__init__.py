"""Build navigable documentation trees from flat, slug-tagged documents.

Documents carry a hierarchical slug such as ``platforms/python/guides/flask``
plus optional title and ordering metadata. This package places them into a
single tree, synthesizes placeholder nodes for missing intermediate pages, and
resolves nodes by slug path. The ``docs-tree`` console script wraps the same
operations around a YAML configuration.

Exports
-------
- ``build_tree``: Build the tree from document records or mappings.
- ``resolve_path``: Look up a node by slug path.
- ``project_platforms`` / ``get_platform``: Read the ``platforms`` section.

Examples
--------
>>> from docs_tree import build_tree, resolve_path
>>> root = build_tree([{"slug": "docs/guide/index", "title": "Guide"}])
>>> resolve_path(root, "docs/guide").title
'Guide'
"""

from __future__ import annotations

import logging

from .builder import build_tree
from .errors import (
    DocsTreeError,
    FrontmatterError,
    StructuralIntegrityError,
    TreeConfigError,
)
from .models import DocNode, DocumentRecord, PlatformGuide, PlatformSummary
from .platforms import get_platform, project_platforms
from .resolver import breadcrumbs, resolve_path
from .slugs import slug_without_index
from .sorting import sort_documents

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DocNode",
    "DocsTreeError",
    "DocumentRecord",
    "FrontmatterError",
    "PlatformGuide",
    "PlatformSummary",
    "StructuralIntegrityError",
    "TreeConfigError",
    "breadcrumbs",
    "build_tree",
    "get_platform",
    "project_platforms",
    "resolve_path",
    "slug_without_index",
    "sort_documents",
]
