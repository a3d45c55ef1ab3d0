# =============================================================================
# core/examples.py  —  The Three Operations (framework-free)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Composes the manifest reader, source locator, tree builder and file
#   reader into the three operations the MCP server exposes:
#
#     list_examples()       → ExampleListing (structured tree + outline text)
#     read_example(path)    → fenced ```rust block with the file's content
#     get_example_path(path)→ absolute path of an example, as text
#
#   tools/mcp_server.py is a thin wrapper around these functions.
#
# STATELESS:
#   Every call re-reads Cargo.toml and re-scans the registry cache.  Nothing
#   is cached, so repeated calls against an unchanged filesystem return
#   identical results.
#
# FAILURES:
#   - ManifestError (bad Cargo.toml) propagates from all three operations.
#   - OSError from scanning examples/ propagates from list_examples().
#   - "bevy not found" is NOT a failure: list_examples() returns an empty
#     listing; read_example()/get_example_path() return explicit error text.
# =============================================================================

from pathlib import Path
from typing import Optional

from core.config import Settings
from core.locator import find_source_dir
from core.manifest import get_dependency_version
from core.models import (
    DEPENDENCY_NAME,
    EXAMPLES_DIR_NAME,
    SOURCE_LANGUAGE,
    UNKNOWN_VERSION,
    ExampleListing,
)
from core.reader import read_example_file
from core.tree import build_example_tree, format_example_tree


def _resolve_source(settings: Settings) -> tuple[Optional[str], Optional[Path]]:
    version = get_dependency_version(settings.project_dir)
    source_dir = find_source_dir(version, settings.project_dir, settings.cargo_home)
    return version, source_dir


def source_not_found_message(version: Optional[str]) -> str:
    return (
        f"Error: could not locate {DEPENDENCY_NAME} source for version "
        f"'{version or UNKNOWN_VERSION}'. Check the {DEPENDENCY_NAME} entry in "
        f"Cargo.toml and run `cargo fetch` to populate the registry cache."
    )


def list_examples(settings: Settings) -> ExampleListing:
    """Build the examples tree for the bevy version used by the project.

    Node paths are relative to the examples directory, so they can be passed
    straight back to read_example().
    """
    version, source_dir = _resolve_source(settings)
    if source_dir is None:
        return ExampleListing(version=version or UNKNOWN_VERSION)

    examples_dir = source_dir / EXAMPLES_DIR_NAME
    tree = build_example_tree(examples_dir, base_dir=examples_dir)
    return ExampleListing(
        version=version or UNKNOWN_VERSION,
        source_dir=str(source_dir),
        tree=tree,
        formatted=format_example_tree(tree),
    )


def _resolve_example(path: str, settings: Settings) -> tuple[Optional[str], Optional[Path]]:
    version, source_dir = _resolve_source(settings)
    if source_dir is None:
        return version, None
    return version, source_dir / EXAMPLES_DIR_NAME / path


def resolve_example_path(path: str, settings: Settings) -> Optional[Path]:
    """Join `path` under <bevy source>/examples, or None if bevy isn't found.

    An absolute `path` stays absolute (pathlib join semantics).
    """
    return _resolve_example(path, settings)[1]


def read_example(path: str, settings: Settings) -> str:
    """Read an example file and wrap it in a fenced code block."""
    version, example_path = _resolve_example(path, settings)
    if example_path is None:
        return source_not_found_message(version)

    content = read_example_file(example_path, settings.max_lines)
    return f"```{SOURCE_LANGUAGE}\n{content}\n```"


def get_example_path(path: str, settings: Settings) -> str:
    """Return the absolute path of an example file as text."""
    version, example_path = _resolve_example(path, settings)
    if example_path is None:
        return source_not_found_message(version)
    return str(example_path)
