r"""Read document records from Markdown frontmatter or a YAML manifest.

This module is the document-fetching side of docs_tree: it walks a content
directory, parses the YAML block at the top of each ``.md``/``.mdx`` file, and
turns it into a :class:`~docs_tree.models.DocumentRecord`. Slugs are derived
from each file's path relative to the content root unless the frontmatter sets
``slug`` explicitly.

Example
-------
>>> from docs_tree.frontmatter import parse_frontmatter
>>> parse_frontmatter("---\ntitle: Flask\nsidebar_order: 2\n---\n# Flask\n")
{'title': 'Flask', 'sidebar_order': 2}
>>> parse_frontmatter("# No frontmatter\n")
{}
"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import FrontmatterError
from .models import DocumentRecord

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^(?:---|\.\.\.)[ \t]*$", re.DOTALL | re.MULTILINE
)


def _safe_yaml() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def parse_frontmatter(text: str) -> dict[str, typ.Any]:
    """Return the frontmatter mapping at the top of ``text``.

    Parameters
    ----------
    text : str
        Full Markdown source of a document.

    Returns
    -------
    dict[str, Any]
        Parsed frontmatter, or an empty mapping when the document has no
        frontmatter block or the block is empty.

    Raises
    ------
    FrontmatterError
        If the block is not valid YAML or does not contain a mapping.
    """
    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return {}
    try:
        loaded = _safe_yaml().load(match.group(1))
    except YAMLError as exc:
        msg = f"Invalid YAML in frontmatter: {exc}"
        raise FrontmatterError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"Frontmatter must be a mapping, got {type(loaded).__name__}."
        raise FrontmatterError(msg)
    return dict(loaded)


def slug_for_path(path: Path, content_dir: Path) -> str:
    """Return the slug for ``path``: its content-relative POSIX path sans suffix."""
    relative = path.relative_to(content_dir).with_suffix("")
    return relative.as_posix()


def load_documents(
    content_dir: Path,
    *,
    extensions: cabc.Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[DocumentRecord]:
    """Load a record for every Markdown file beneath ``content_dir``.

    Files are visited in sorted path order so results are reproducible. The
    tree builder does its own ordering; this order only matters for records
    whose sort keys tie.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    FrontmatterError
        If any file carries malformed frontmatter. The message names the file.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)

    suffixes = {suffix.lower() for suffix in extensions}
    documents: list[DocumentRecord] = []
    for path in sorted(content_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in suffixes:
            continue
        try:
            frontmatter = parse_frontmatter(path.read_text(encoding="utf-8"))
        except FrontmatterError as exc:
            msg = f"{path}: {exc}"
            raise FrontmatterError(msg) from exc
        payload = {"slug": slug_for_path(path, content_dir), **frontmatter}
        documents.append(DocumentRecord.from_mapping(payload))
    return documents


def load_manifest(path: Path) -> list[DocumentRecord]:
    """Load records from a YAML manifest.

    The manifest is either a list of document mappings or a mapping with a
    ``documents`` list. Every entry needs a ``slug``.

    Raises
    ------
    FileNotFoundError
        If the manifest does not exist.
    FrontmatterError
        If the manifest layout or any entry is malformed.
    """
    if not path.exists():
        msg = f"Manifest file '{path}' not found."
        raise FileNotFoundError(msg)
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = _safe_yaml().load(handle)
        except YAMLError as exc:
            msg = f"{path}: invalid YAML: {exc}"
            raise FrontmatterError(msg) from exc

    match loaded:
        case None:
            entries: list[typ.Any] = []
        case {"documents": list() as listed}:
            entries = listed
        case list():
            entries = loaded
        case _:
            msg = f"{path}: manifest must be a list of documents."
            raise FrontmatterError(msg)

    documents: list[DocumentRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "slug" not in entry:
            msg = f"{path}: entry {index} must be a mapping with a 'slug'."
            raise FrontmatterError(msg)
        documents.append(DocumentRecord.from_mapping(entry))
    return documents


__all__ = [
    "DEFAULT_EXTENSIONS",
    "load_documents",
    "load_manifest",
    "parse_frontmatter",
    "slug_for_path",
]
