# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic for finding and reading bevy examples.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any protocol framework.
#   Every module here is plain Python working on the filesystem, so it can be
#   tested with a tmp_path and nothing else.
#
#   manifest.py  → which bevy does Cargo.toml ask for?
#   locator.py   → where is that bevy's source on disk?
#   tree.py      → what's under its examples/ directory?
#   reader.py    → what's in one example file (first N lines)?
#   examples.py  → the three operations, composed from the above
# =============================================================================
