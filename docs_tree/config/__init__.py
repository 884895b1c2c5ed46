"""Load and validate docs-tree configuration YAML.

This subpackage parses a ``docs-tree.yaml`` file naming where documents come
from (a content directory of Markdown files, a YAML manifest, or both) and
where rendered navigation is written. The primary entry point is
:func:`load_tree_config`, which applies defaults and returns a
:class:`TreeConfig`.

Examples
--------
>>> from pathlib import Path
>>> from docs_tree.config import load_tree_config
>>> config = load_tree_config(Path("docs-tree.yaml"))  # doctest: +SKIP
>>> config.sidebar_output  # doctest: +SKIP
PosixPath('public/sidebar.html')
"""

from .loader import load_tree_config
from .models import TreeConfig, TreeConfigError

__all__ = ["TreeConfig", "TreeConfigError", "load_tree_config"]
