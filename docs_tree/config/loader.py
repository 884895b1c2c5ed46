"""Load docs-tree configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docs_tree.errors import TreeConfigError
from docs_tree.frontmatter import DEFAULT_EXTENSIONS

from .models import DEFAULT_SIDEBAR_OUTPUT, DEFAULT_SITE_TITLE, TreeConfig


def load_tree_config(path: Path) -> TreeConfig:
    """Load the YAML configuration describing document sources and outputs.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``docs-tree.yaml``). Relative paths inside the file are resolved
        against the file's directory.

    Returns
    -------
    TreeConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    TreeConfigError
        If neither ``content_dir`` nor ``manifest`` is configured, or a value
        has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_tree.config import load_tree_config
    >>> config = load_tree_config(Path("docs-tree.yaml"))  # doctest: +SKIP
    >>> config.content_dir  # doctest: +SKIP
    PosixPath('content/docs')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    return TreeConfig(
        content_dir=_optional_path(raw.get("content_dir"), base_dir),
        manifest=_optional_path(raw.get("manifest"), base_dir),
        extensions=_normalize_extensions(raw.get("extensions")),
        sidebar_output=_optional_path(raw.get("sidebar_output"), base_dir)
        or base_dir / DEFAULT_SIDEBAR_OUTPUT,
        site_title=str(raw.get("site_title") or DEFAULT_SITE_TITLE),
    )


def _optional_path(value: object | None, base_dir: Path) -> Path | None:
    """Return ``value`` as a path resolved against ``base_dir``, or None."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    candidate = Path(text).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _normalize_extensions(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize configured suffixes into dotted, lowercase strings."""
    match value:
        case None:
            return DEFAULT_EXTENSIONS
        case str():
            items: list[object] = value.split()
        case list():
            items = value
        case _:
            msg = "'extensions' must be a string or a list of suffixes."
            raise TreeConfigError(msg)
    normalized: list[str] = []
    for item in items:
        text = str(item).strip().lower()
        if not text:
            continue
        normalized.append(text if text.startswith(".") else f".{text}")
    return tuple(normalized) or DEFAULT_EXTENSIONS


__all__ = ["load_tree_config"]
