# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects every knob the server reads from the environment into one
#   immutable Settings object.
#
# ENVIRONMENT VARIABLES:
#   BEVY_EXAMPLES_PROJECT_DIR  → directory holding Cargo.toml (default: cwd)
#   CARGO_HOME                 → Cargo's home directory (default: ~/.cargo)
#                                Same variable Cargo itself honors.
#   BEVY_EXAMPLES_MAX_LINES    → lines returned by read-example (default: 200)
#   BEVY_EXAMPLES_LOG_LEVEL    → logging level for stderr output (default: INFO)
#
#   main.py calls load_dotenv() first, so all of these can also live in a
#   .env file next to the project.
#
# NO CACHING:
#   The tools call Settings.from_env() on every request.  Changing the
#   environment (or the working directory) between calls takes effect on
#   the next call.
# =============================================================================

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping, Optional


DEFAULT_MAX_LINES = 200


@dataclass(frozen=True)
class Settings:
    """Where to look for the manifest and the registry cache, and how much to read."""

    project_dir: Path
    cargo_home: Path
    max_lines: int = DEFAULT_MAX_LINES
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from environment variables (os.environ by default).

        Raises:
            ValueError: if BEVY_EXAMPLES_MAX_LINES is not a positive integer.
        """
        env = os.environ if environ is None else environ

        project_dir = Path(env.get("BEVY_EXAMPLES_PROJECT_DIR") or Path.cwd())
        cargo_home = Path(env.get("CARGO_HOME") or Path.home() / ".cargo")

        raw_max_lines = env.get("BEVY_EXAMPLES_MAX_LINES", str(DEFAULT_MAX_LINES))
        try:
            max_lines = int(raw_max_lines)
        except ValueError:
            raise ValueError(
                f"BEVY_EXAMPLES_MAX_LINES must be an integer, got {raw_max_lines!r}"
            ) from None
        if max_lines <= 0:
            raise ValueError(f"BEVY_EXAMPLES_MAX_LINES must be positive, got {max_lines}")

        log_level = env.get("BEVY_EXAMPLES_LOG_LEVEL", "INFO").upper()

        return cls(
            project_dir=project_dir.absolute(),
            cargo_home=cargo_home.absolute(),
            max_lines=max_lines,
            log_level=log_level,
        )
