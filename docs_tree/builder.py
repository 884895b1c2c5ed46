"""Build a navigable documentation tree from a flat list of documents.

Documents are processed in :func:`~docs_tree.sorting.sort_documents` order and
attached beneath the node at their parent path. When that parent has no
document of its own but the grandparent exists, a placeholder node is
synthesized for it. Gaps of two or more levels are rejected with
:class:`~docs_tree.errors.StructuralIntegrityError`.

Examples
--------
>>> from docs_tree.builder import build_tree
>>> from docs_tree.models import DocumentRecord
>>> root = build_tree(
...     [
...         DocumentRecord(slug="platforms", title="Platforms"),
...         DocumentRecord(slug="platforms/python/guides/flask", title="Flask"),
...     ]
... )
Traceback (most recent call last):
    ...
docs_tree.errors.StructuralIntegrityError: missing parent and grandparent: platforms/python/guides (while placing 'platforms/python/guides/flask')
>>> root = build_tree(
...     [
...         DocumentRecord(slug="platforms", title="Platforms"),
...         DocumentRecord(slug="platforms/python/flask", title="Flask"),
...     ]
... )
>>> python = root.children[0].children[0]
>>> python.path, python.synthesized
('platforms/python', True)
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ._constants import ROOT_TITLE
from .errors import StructuralIntegrityError
from .models import DocNode, DocumentRecord
from .slugs import join_slug, slug_without_index
from .sorting import sort_documents

logger = logging.getLogger(__name__)

DocumentInput = DocumentRecord | cabc.Mapping[str, typ.Any]


def build_tree(documents: cabc.Iterable[DocumentInput]) -> DocNode | None:
    """Place every document into a single tree and return its root.

    Parameters
    ----------
    documents : Iterable[DocumentRecord | Mapping[str, Any]]
        Documents in any order. Mappings are converted with
        :meth:`DocumentRecord.from_mapping`.

    Returns
    -------
    DocNode | None
        The root node, or ``None`` when ``documents`` is empty.

    Raises
    ------
    StructuralIntegrityError
        If a document has neither a parent nor a grandparent node, that is
        the slug skips two or more levels with no documents.
    """
    records = [_coerce_record(document) for document in documents]
    if not records:
        return None

    root = DocNode(path="", segment="", metadata={"title": ROOT_TITLE})
    # Scoped to this call; discarded once the tree is returned.
    nodes: dict[str, DocNode] = {"": root}

    for record in sort_documents(records):
        segments = slug_without_index(record.slug)
        if not segments:
            # Several root documents: the last in sort order wins.
            root.metadata = record.metadata()
            continue

        path = join_slug(segments)
        existing = nodes.get(path)
        if existing is not None:
            # Never a placeholder: shallower documents are placed before any
            # deeper document can synthesize a node at their path.
            logger.warning(
                "ignoring document %r: path %r is already taken",
                record.slug,
                existing.path,
            )
            continue

        parent = _resolve_parent(segments, nodes, record.slug)
        node = DocNode(path=path, segment=segments[-1], metadata=record.metadata())
        parent.add_child(node)
        nodes[path] = node

    logger.debug("built docs tree with %d nodes", len(nodes))
    return root


def _coerce_record(document: DocumentInput) -> DocumentRecord:
    if isinstance(document, DocumentRecord):
        return document
    return DocumentRecord.from_mapping(document)


def _resolve_parent(
    segments: list[str], nodes: dict[str, DocNode], slug: str
) -> DocNode:
    """Return the parent node for ``segments``, synthesizing one level if needed."""
    parent_path = join_slug(segments[:-1])
    parent = nodes.get(parent_path)
    if parent is not None:
        return parent

    grandparent = nodes.get(join_slug(segments[:-2]))
    if grandparent is None:
        raise StructuralIntegrityError(parent_path, slug)

    parent = DocNode(path=parent_path, segment=segments[-2], synthesized=True)
    grandparent.add_child(parent)
    nodes[parent_path] = parent
    logger.debug("synthesized placeholder node %r for %r", parent_path, slug)
    return parent


__all__ = ["DocumentInput", "build_tree"]
