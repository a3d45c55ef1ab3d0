# =============================================================================
# core/tree.py  —  Examples Tree: Building and Formatting
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. build_example_tree() walks the examples directory and returns a list
#      of ExampleNode objects (directories + .rs files only).
#   2. format_example_tree() renders that list as an indented outline an LLM
#      can skim:
#
#        - hello_world.rs
#        + 2d
#          - sprite.rs
#          - text2d.rs
#
# ORDERING:
#   Entries come out in directory-listing order (os.scandir), NOT sorted.
#   The formatter keeps whatever order the builder produced.
#
# KNOWN LIMITATION:
#   Symlinked directories are followed and there is no depth limit or cycle
#   detection.  A symlink loop under examples/ will recurse until Python's
#   recursion limit is hit.  bevy's published crates don't contain any.
# =============================================================================

import os
from pathlib import Path
from typing import Iterator, Optional

from core.models import SOURCE_EXTENSION, ExampleNode


def _is_relevant(entry: os.DirEntry) -> bool:
    return entry.is_dir() or entry.name.endswith(SOURCE_EXTENSION)


def build_example_tree(
    directory: Path,
    base_dir: Optional[Path] = None,
) -> list[ExampleNode]:
    """Recursively scan `directory` for subdirectories and .rs files.

    Args:
        directory: Directory to scan.
        base_dir: When given, node paths are relative to it ("2d/sprite.rs");
            otherwise they are full filesystem paths.

    Raises:
        OSError: if `directory` (or any subdirectory) cannot be listed.
    """
    with os.scandir(directory) as it:
        entries = [entry for entry in it if _is_relevant(entry)]

    nodes = []
    for entry in entries:
        if base_dir is None:
            path = entry.path
        else:
            path = Path(entry.path).relative_to(base_dir).as_posix()

        if entry.is_dir():
            nodes.append(ExampleNode(
                name=entry.name,
                path=path,
                is_file=False,
                children=build_example_tree(Path(entry.path), base_dir),
            ))
        else:
            nodes.append(ExampleNode(name=entry.name, path=path, is_file=True))
    return nodes


def format_example_tree(nodes: list[ExampleNode], indent: int = 0) -> str:
    """Render nodes as an indented outline, two spaces per level.

    Files render as "- name", directories as "+ name" followed by their
    children one level deeper.
    """
    pad = "  " * indent
    lines = []
    for node in nodes:
        if node.is_file:
            lines.append(f"{pad}- {node.name}")
            continue
        lines.append(f"{pad}+ {node.name}")
        if node.children:
            lines.append(format_example_tree(node.children, indent + 1))
    return "\n".join(lines)


def iter_example_files(nodes: list[ExampleNode]) -> Iterator[ExampleNode]:
    """Yield every file node, depth-first."""
    for node in nodes:
        if node.is_file:
            yield node
        else:
            yield from iter_example_files(node.children or [])


def count_example_files(nodes: list[ExampleNode]) -> int:
    return sum(1 for _ in iter_example_files(nodes))
