"""Normalize document slugs into tree path segments.

A slug such as ``docs/guide/index`` describes the same tree position as
``docs/guide``; both normalize to ``["docs", "guide"]``.

Examples
--------
>>> from docs_tree.slugs import join_slug, slug_without_index
>>> slug_without_index("platforms/python/index")
['platforms', 'python']
>>> slug_without_index("index")
[]
>>> join_slug(["platforms", "python"])
'platforms/python'
"""

from __future__ import annotations

import collections.abc as cabc

from ._constants import INDEX_SEGMENT, SLUG_SEPARATOR


def slug_without_index(slug: str) -> list[str]:
    """Split ``slug`` into segments, dropping a trailing ``index`` segment.

    Parameters
    ----------
    slug : str
        Slash-separated slug. Leading and trailing slashes are ignored.

    Returns
    -------
    list[str]
        Ordered path segments. An empty list denotes the root.
    """
    trimmed = slug.strip(SLUG_SEPARATOR)
    if not trimmed:
        return []
    parts = trimmed.split(SLUG_SEPARATOR)
    if parts[-1] == INDEX_SEGMENT:
        parts.pop()
    return parts


def join_slug(segments: cabc.Sequence[str]) -> str:
    """Join path segments back into the normalized path string."""
    return SLUG_SEPARATOR.join(segments)


def normalize_path(path: str | cabc.Sequence[str]) -> list[str]:
    """Normalize a lookup path given as a string or an explicit segment list."""
    text = path if isinstance(path, str) else join_slug(path)
    return slug_without_index(text)


__all__ = ["join_slug", "normalize_path", "slug_without_index"]
