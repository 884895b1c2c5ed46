"""Render a docs tree as a nested HTML navigation sidebar.

The builder walks a tree produced by :func:`~docs_tree.builder.build_tree` and
renders ``templates/sidebar.jinja`` so every node appears in sibling order.
Synthesized nodes have no page of their own and are rendered as plain labels
rather than links.

Typical usage pairs the builder with a loaded tree:

>>> from pathlib import Path
>>> from docs_tree.builder import build_tree
>>> from docs_tree.sidebar import SidebarBuilder
>>> root = build_tree([{"slug": "platforms/python", "title": "Python"}])
>>> builder = SidebarBuilder(root, Path("public/sidebar.html"))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/sidebar.html')

Side effects are limited to creating the output directory and writing the
UTF-8 encoded HTML file.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import DocNode


class SidebarBuilder:
    """Render the navigation sidebar for a docs tree."""

    def __init__(
        self,
        root: DocNode,
        output_path: Path,
        *,
        site_title: str = "Docs",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the sidebar builder.

        Parameters
        ----------
        root : DocNode
            Root of the tree to render.
        output_path : Path
            File the rendered HTML is written to.
        site_title : str, optional
            Heading and ``aria-label`` for the navigation block.
        templates_dir : Path, optional
            Directory containing ``sidebar.jinja``. Defaults to the
            ``docs_tree/templates`` directory when ``None``.
        """
        self.root = root
        self.output_path = output_path
        self.site_title = site_title
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("sidebar.jinja")

    def render(self) -> str:
        """Return the sidebar HTML without writing it."""
        context = {
            "site_title": self.site_title,
            "root": self.root,
            "root_title": self.root.title or self.site_title,
            "items": self._gather_items(self.root),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        return self.template.render(**context)

    def run(self) -> Path:
        """Render the sidebar HTML file to the configured output path."""
        html = self.render()
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(html, encoding="utf-8")
        return self.output_path

    def _gather_items(self, node: DocNode) -> list[dict[str, typ.Any]]:
        """Collect template entries for the children of ``node``, recursively."""
        return [
            {
                "label": child.title or child.segment,
                "path": child.path,
                "url": child.url,
                "depth": child.depth,
                "synthesized": child.synthesized,
                "children": self._gather_items(child),
            }
            for child in node.children
        ]


__all__ = ["SidebarBuilder"]
