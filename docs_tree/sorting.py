"""Order documents so shallower pages are placed before their descendants."""

from __future__ import annotations

import typing as typ

from ._constants import MISSING_ORDER
from .slugs import slug_without_index

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import DocumentRecord


def document_sort_key(document: DocumentRecord) -> tuple[int, int, str]:
    """Return the (depth, order hint, folded title) key for ``document``.

    A missing order hint maps to ``MISSING_ORDER`` so unordered documents
    follow ordered ones; a missing title sorts as the empty string.
    """
    depth = len(slug_without_index(document.slug))
    order = MISSING_ORDER if document.order is None else document.order
    title = (document.title or "").casefold()
    return (depth, order, title)


def sort_documents(
    documents: cabc.Iterable[DocumentRecord],
) -> list[DocumentRecord]:
    """Return ``documents`` in tree processing order.

    The sort is stable, so documents sharing a key keep their input order.
    """
    return sorted(documents, key=document_sort_key)


__all__ = ["document_sort_key", "sort_documents"]
