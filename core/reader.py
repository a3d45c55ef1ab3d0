# =============================================================================
# core/reader.py  —  Bounded File Reads
# =============================================================================
#
# Context Budget Discipline: an example file can be a thousand lines long.
# The LLM gets the first `max_lines` lines and nothing more.
#
# Read failures are NOT raised.  They come back as an "Error reading file:"
# string so the host always has something it can show or reason about.
# =============================================================================

from pathlib import Path

from core.config import DEFAULT_MAX_LINES


def read_example_file(file_path: Path, max_lines: int = DEFAULT_MAX_LINES) -> str:
    """Return at most `max_lines` lines of the file, or an error message."""
    try:
        with open(file_path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return f"Error reading file: {e}"

    return "\n".join(content.split("\n")[:max_lines])
