"""Look up nodes in a built docs tree by slug path."""

from __future__ import annotations

import logging
import typing as typ

from .slugs import normalize_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import DocNode

logger = logging.getLogger(__name__)


def resolve_path(root: DocNode, path: str | cabc.Sequence[str]) -> DocNode | None:
    """Walk from ``root`` following the segments of ``path``.

    Parameters
    ----------
    root : DocNode
        Node to start from, normally the tree root.
    path : str | Sequence[str]
        Slug path such as ``"platforms/python"`` or an explicit segment list
        such as ``["platforms", "python"]``. A trailing ``index`` is ignored.

    Returns
    -------
    DocNode | None
        The matching node, ``root`` itself for an empty path, or ``None`` when
        any segment has no matching child. Misses are logged, not raised.
    """
    node = root
    for segment in normalize_path(path):
        child = node.child(segment)
        if child is None:
            logger.info("no child %r found under %r", segment, node.url)
            return None
        node = child
    return node


def breadcrumbs(node: DocNode) -> list[DocNode]:
    """Return the ancestors of ``node`` ordered from the root downwards.

    The node itself is not included; the root yields an empty list.
    """
    ancestors: list[DocNode] = []
    current = node.parent
    while current is not None:
        ancestors.append(current)
        current = current.parent
    ancestors.reverse()
    return ancestors


__all__ = ["breadcrumbs", "resolve_path"]
