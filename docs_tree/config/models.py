"""Typed dataclasses describing docs-tree configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docs_tree.errors import TreeConfigError
from docs_tree.frontmatter import DEFAULT_EXTENSIONS

DEFAULT_SIDEBAR_OUTPUT = Path("public/sidebar.html")
DEFAULT_SITE_TITLE = "Docs"


@dc.dataclass(slots=True)
class TreeConfig:
    """Where documents come from and where rendered navigation goes.

    Attributes
    ----------
    content_dir : Path | None
        Directory of Markdown files whose frontmatter describes documents.
    manifest : Path | None
        YAML manifest listing document records directly.
    extensions : tuple[str, ...]
        File suffixes treated as documents inside ``content_dir``.
    sidebar_output : Path
        Destination for the rendered sidebar HTML.
    site_title : str
        Heading shown above the rendered sidebar.
    """

    content_dir: Path | None = None
    manifest: Path | None = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    sidebar_output: Path = DEFAULT_SIDEBAR_OUTPUT
    site_title: str = DEFAULT_SITE_TITLE

    def __post_init__(self) -> None:
        if self.content_dir is None and self.manifest is None:
            msg = "Configuration needs 'content_dir' or 'manifest'."
            raise TreeConfigError(msg)


__all__ = [
    "DEFAULT_SIDEBAR_OUTPUT",
    "DEFAULT_SITE_TITLE",
    "TreeConfig",
    "TreeConfigError",
]
