"""Exception hierarchy for docs_tree."""

from __future__ import annotations


class DocsTreeError(Exception):
    """Base class for errors raised by docs_tree."""


class StructuralIntegrityError(DocsTreeError):
    """Raised when a document has neither a parent nor a grandparent node.

    Attributes
    ----------
    missing_path : str
        Normalized path of the parent that could not be placed.
    slug : str
        Slug of the document whose ancestors are missing.
    """

    def __init__(self, missing_path: str, slug: str) -> None:
        self.missing_path = missing_path
        self.slug = slug
        msg = f"missing parent and grandparent: {missing_path} (while placing {slug!r})"
        super().__init__(msg)


class FrontmatterError(DocsTreeError):
    """Raised when a document's frontmatter block cannot be interpreted."""


class TreeConfigError(DocsTreeError, ValueError):
    """Raised when the docs-tree configuration is invalid or incomplete."""


__all__ = [
    "DocsTreeError",
    "FrontmatterError",
    "StructuralIntegrityError",
    "TreeConfigError",
]
