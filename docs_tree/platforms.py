"""Project the ``platforms`` subtree into typed platform summaries.

Examples
--------
>>> from docs_tree.builder import build_tree
>>> from docs_tree.platforms import project_platforms
>>> root = build_tree(
...     [
...         {"slug": "platforms/python", "title": "Python"},
...         {"slug": "platforms/go", "title": "Go"},
...     ]
... )
>>> [platform.key for platform in project_platforms(root)]
['go', 'python']
"""

from __future__ import annotations

import typing as typ

from ._constants import PLATFORMS_SEGMENT
from .models import PlatformSummary
from .resolver import resolve_path

if typ.TYPE_CHECKING:
    from .models import DocNode


def project_platforms(root: DocNode) -> list[PlatformSummary]:
    """Return one summary per child of the ``platforms`` node, in sibling order."""
    platforms_node = resolve_path(root, PLATFORMS_SEGMENT)
    if platforms_node is None:
        return []
    return [_node_to_platform(child) for child in platforms_node.children]


def get_platform(root: DocNode, name: str) -> PlatformSummary | None:
    """Return the summary for ``platforms/<name>``, or ``None`` when absent."""
    platform_node = resolve_path(root, [PLATFORMS_SEGMENT, name])
    if platform_node is None:
        return None
    return _node_to_platform(platform_node)


def _node_to_platform(node: DocNode) -> PlatformSummary:
    # Guides are filled in by a separate extractor, not by the tree.
    return PlatformSummary(
        key=node.segment,
        name=node.segment,
        url=node.url,
        title=node.title,
        guides=[],
    )


__all__ = ["get_platform", "project_platforms"]
