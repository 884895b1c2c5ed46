"""Unit tests for loading docs-tree configuration files."""

from __future__ import annotations

from pathlib import Path

import pytest

from docs_tree.config import TreeConfig, TreeConfigError, load_tree_config
from docs_tree.frontmatter import DEFAULT_EXTENSIONS


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "docs-tree.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_relative_paths_resolve_against_config_dir(tmp_path: Path) -> None:
    """Paths in the config file are relative to the file, not the cwd."""
    config_path = _write(
        tmp_path,
        "content_dir: content\nsidebar_output: public/nav.html\nsite_title: Sentry\n",
    )
    config = load_tree_config(config_path)
    assert config.content_dir == tmp_path / "content"
    assert config.sidebar_output == tmp_path / "public" / "nav.html"
    assert config.site_title == "Sentry"
    assert config.manifest is None
    assert config.extensions == DEFAULT_EXTENSIONS


def test_defaults_apply_when_keys_are_missing(tmp_path: Path) -> None:
    """Only a source is required; output and title fall back to defaults."""
    config = load_tree_config(_write(tmp_path, "manifest: docs.yaml\n"))
    assert config.manifest == tmp_path / "docs.yaml"
    assert config.sidebar_output == tmp_path / "public" / "sidebar.html"
    assert config.site_title == "Docs"


def test_extensions_are_normalized(tmp_path: Path) -> None:
    """Suffixes gain a leading dot and are lowercased."""
    config = load_tree_config(
        _write(tmp_path, "content_dir: content\nextensions: [MD, .mdx, ' ']\n")
    )
    assert config.extensions == (".md", ".mdx")


def test_extensions_reject_mappings(tmp_path: Path) -> None:
    """A mapping is not a valid suffix list."""
    with pytest.raises(TreeConfigError, match="extensions"):
        load_tree_config(_write(tmp_path, "content_dir: c\nextensions: {md: 1}\n"))


def test_missing_sources_raise(tmp_path: Path) -> None:
    """A config naming neither content_dir nor manifest is invalid."""
    with pytest.raises(TreeConfigError):
        load_tree_config(_write(tmp_path, "site_title: Nothing\n"))


def test_missing_file_raises(tmp_path: Path) -> None:
    """A nonexistent config path raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_tree_config(tmp_path / "absent.yaml")


def test_non_mapping_top_level_raises(tmp_path: Path) -> None:
    """The top-level YAML node must be a mapping."""
    with pytest.raises(TypeError):
        load_tree_config(_write(tmp_path, "- content_dir\n"))


def test_tree_config_error_is_value_error() -> None:
    """Callers catching ValueError should also see configuration errors."""
    with pytest.raises(ValueError):
        TreeConfig()
