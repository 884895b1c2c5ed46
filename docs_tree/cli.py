"""Cyclopts CLI entrypoint for inspecting and rendering documentation trees.

The ``docs-tree`` console script loads documents from the sources named in a
``docs-tree.yaml`` configuration (a directory of Markdown files with
frontmatter and/or a YAML manifest), builds the navigation tree, and then
prints it, resolves a single path, lists platforms, or renders the sidebar.

Examples
--------
Print the whole tree for the default configuration:

>>> from docs_tree.cli import main
>>> main()  # doctest: +SKIP

Resolve one path against a custom configuration:

>>> from docs_tree.cli import app
>>> app(
...     ["resolve", "platforms/python", "--config", "site/docs-tree.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import build_tree
from .config import load_tree_config
from .frontmatter import load_documents, load_manifest
from .platforms import project_platforms
from .resolver import resolve_path
from .sidebar import SidebarBuilder

if typ.TYPE_CHECKING:
    from .config import TreeConfig
    from .models import DocNode, DocumentRecord

DEFAULT_CONFIG = Path("docs-tree.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="docs-tree", config=cyclopts.config.Env("DOCS_TREE_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to docs-tree config", env_var="DOCS_TREE_CONFIG")
]
VerboseOption = typ.Annotated[
    bool, Parameter(help="Log diagnostics such as lookup misses")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


def _collect_documents(tree_config: TreeConfig) -> list[DocumentRecord]:
    """Gather records from every source named in ``tree_config``."""
    documents: list[DocumentRecord] = []
    if tree_config.content_dir is not None:
        documents.extend(
            load_documents(tree_config.content_dir, extensions=tree_config.extensions)
        )
    if tree_config.manifest is not None:
        documents.extend(load_manifest(tree_config.manifest))
    return documents


def _load_tree(config: Path) -> tuple[TreeConfig, DocNode | None]:
    tree_config = load_tree_config(config)
    return tree_config, build_tree(_collect_documents(tree_config))


def _describe(node: DocNode) -> str:
    label = "/" if node.is_root else node.segment
    line = f"{'  ' * node.depth}{label}"
    if node.title:
        line = f"{line}  {node.title}"
    if node.synthesized:
        line = f"{line}  (synthesized)"
    return line


@app.command(help="Print the documentation tree, one node per line.")
def show(*, config: ConfigOption = DEFAULT_CONFIG, verbose: VerboseOption = False) -> None:
    """Print every node of the tree in pre-order with depth indentation.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docs-tree.yaml`` configuration file (overridable via
        ``DOCS_TREE_CONFIG``).
    verbose : bool, optional
        Emit debug and informational log records on stderr.

    Raises
    ------
    StructuralIntegrityError
        If the documents skip two or more hierarchy levels.
    """
    _configure_logging(verbose=verbose)
    _, root = _load_tree(config)
    if root is None:
        print("no documents found")
        return
    for node in root.walk():
        print(_describe(node))


@app.command(help="Resolve a slug path and print the matching node.")
def resolve(
    path: str, *, config: ConfigOption = DEFAULT_CONFIG, verbose: VerboseOption = False
) -> None:
    """Print the node at ``path`` or exit with status 1 when it is missing.

    Parameters
    ----------
    path : str
        Slug path to look up, for example ``platforms/python``.
    config : Path, optional
        Path to the ``docs-tree.yaml`` configuration file.
    verbose : bool, optional
        Emit debug and informational log records on stderr.
    """
    _configure_logging(verbose=verbose)
    _, root = _load_tree(config)
    node = resolve_path(root, path) if root is not None else None
    if node is None:
        print(f"not found: {path}")
        raise SystemExit(1)
    print(f"{node.url}\t{node.title or ''}")


@app.command(help="List the platforms found under the platforms section.")
def platforms(
    *, config: ConfigOption = DEFAULT_CONFIG, verbose: VerboseOption = False
) -> None:
    """Print ``key<TAB>url<TAB>title`` for every platform, in sibling order."""
    _configure_logging(verbose=verbose)
    _, root = _load_tree(config)
    if root is None:
        return
    for platform in project_platforms(root):
        print(f"{platform.key}\t{platform.url}\t{platform.title or ''}")


@app.command(help="Render the navigation sidebar as HTML.")
def sidebar(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the sidebar output file", env_var="DOCS_TREE_OUTPUT"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Render the sidebar for the configured documents and print its path.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docs-tree.yaml`` configuration file.
    output : Path or None, optional
        Write the HTML here instead of the configured ``sidebar_output``.
    verbose : bool, optional
        Emit debug and informational log records on stderr.
    """
    _configure_logging(verbose=verbose)
    tree_config, root = _load_tree(config)
    if root is None:
        print("no documents found")
        return
    builder = SidebarBuilder(
        root,
        output or tree_config.sidebar_output,
        site_title=tree_config.site_title,
    )
    written = builder.run()
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``docs-tree`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
