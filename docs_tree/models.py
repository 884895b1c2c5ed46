"""Typed dataclasses describing documents, tree nodes, and platform views."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
import weakref

from ._constants import ORDER_KEYS, PLATFORM_TYPE, SLUG_SEPARATOR


@dc.dataclass(slots=True, frozen=True)
class DocumentRecord:
    """A single document as supplied by the fetching collaborator.

    Attributes
    ----------
    slug : str
        Hierarchical slug with ``/``-separated segments, for example
        ``platforms/python/guides/flask``. A trailing ``index`` segment is
        ignored when placing the document.
    title : str | None
        Display title, if the document has one.
    order : int | None
        Explicit ordering hint among siblings (``sidebar_order`` in
        frontmatter). ``None`` sorts after every explicit hint.
    extra : Mapping[str, Any]
        Remaining metadata, passed through without inspection.
    """

    slug: str
    title: str | None = None
    order: int | None = None
    extra: cabc.Mapping[str, typ.Any] = dc.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: cabc.Mapping[str, typ.Any]) -> DocumentRecord:
        """Build a record from a frontmatter-style mapping.

        The order hint is read from ``sidebar_order`` and falls back to
        ``order`` when the former is absent or null. Every key other than
        ``slug``, ``title`` and the order keys is kept in ``extra``.
        """
        raw_slug = payload.get("slug")
        if raw_slug is None:
            msg = "Document mapping is missing 'slug'."
            raise KeyError(msg)
        order = None
        for key in ORDER_KEYS:
            order = _optional_int(payload.get(key))
            if order is not None:
                break
        reserved = {"slug", "title", *ORDER_KEYS}
        extra = {key: value for key, value in payload.items() if key not in reserved}
        return cls(
            slug=str(raw_slug),
            title=_optional_str(payload.get("title")),
            order=order,
            extra=extra,
        )

    def metadata(self) -> dict[str, typ.Any]:
        """Return the mapping exposed on the tree node for this record."""
        merged: dict[str, typ.Any] = dict(self.extra)
        merged["slug"] = self.slug
        if self.title is not None:
            merged["title"] = self.title
        if self.order is not None:
            merged["sidebar_order"] = self.order
        return merged


@dc.dataclass(slots=True, weakref_slot=True, eq=False)
class DocNode:
    """One position in the documentation hierarchy.

    Nodes compare by identity. The parent link is held weakly: the parent owns
    its children through ``children`` and the upward reference is only used
    for traversal.

    Attributes
    ----------
    path : str
        Full normalized slug path from the root. The root's path is ``""``.
    segment : str
        The node's own slug component (``""`` for the root).
    metadata : dict[str, Any]
        Metadata of the document placed here, or ``{}`` when synthesized.
    children : list[DocNode]
        Child nodes in build order.
    synthesized : bool
        ``True`` when no document normalizes to ``path``.
    """

    path: str
    segment: str
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)
    children: list[DocNode] = dc.field(default_factory=list, repr=False)
    synthesized: bool = False
    _parent_ref: weakref.ReferenceType[DocNode] | None = dc.field(
        default=None, repr=False
    )

    @property
    def parent(self) -> DocNode | None:
        """Return the owning node, or ``None`` for the root.

        The link is weak, so the parent is only reachable while the caller
        keeps the root alive. Once the root is released this returns ``None``
        and :func:`~docs_tree.resolver.breadcrumbs` yields an empty trail.
        """
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def title(self) -> str | None:
        value = self.metadata.get("title")
        return None if value is None else str(value)

    @property
    def url(self) -> str:
        return f"/{self.path}"

    @property
    def depth(self) -> int:
        if not self.path:
            return 0
        return self.path.count(SLUG_SEPARATOR) + 1

    def add_child(self, child: DocNode) -> None:
        """Attach ``child`` beneath this node, keeping segments unique."""
        if any(existing.segment == child.segment for existing in self.children):
            msg = f"Node '{self.path}' already has a child named '{child.segment}'."
            raise ValueError(msg)
        child._parent_ref = weakref.ref(self)
        self.children.append(child)

    def child(self, segment: str) -> DocNode | None:
        """Return the direct child with ``segment``, if any."""
        for candidate in self.children:
            if candidate.segment == segment:
                return candidate
        return None

    def walk(self) -> cabc.Iterator[DocNode]:
        """Yield this node and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert the subtree into plain data for comparison or JSON output."""
        return {
            "path": self.path,
            "segment": self.segment,
            "metadata": dict(self.metadata),
            "synthesized": self.synthesized,
            "children": [child.to_dict() for child in self.children],
        }


@dc.dataclass(slots=True)
class PlatformGuide:
    """A guide beneath a platform page.

    Guide extraction belongs to an external collaborator; projected platforms
    always carry an empty guide list.
    """

    key: str
    name: str
    url: str
    title: str | None = None


@dc.dataclass(slots=True)
class PlatformSummary:
    """Read-only summary of one child of the ``platforms`` node."""

    key: str
    name: str
    url: str
    title: str | None = None
    type: str = PLATFORM_TYPE
    guides: list[PlatformGuide] = dc.field(default_factory=list)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: object | None) -> int | None:
    """Return ``value`` as an int, or None when it is not an integer hint."""
    match value:
        case bool():
            return None
        case int():
            return value
        case float() if value.is_integer():
            return int(value)
        case str() as text:
            try:
                return int(text.strip())
            except ValueError:
                return None
        case _:
            return None


__all__ = ["DocNode", "DocumentRecord", "PlatformGuide", "PlatformSummary"]
