# =============================================================================
# core/locator.py  —  Finding bevy's Source Tree on Disk
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps a version specifier to the directory that holds that version's
#   source code.  Two layouts are supported:
#
#   1. LOCAL PATH OVERRIDE — the specifier starts with "." (e.g. "../bevy")
#      or is absolute.  It's joined onto the project directory and returned
#      as-is.  We don't check that it exists; later filesystem calls will
#      report that.
#
#   2. REGISTRY CACHE — Cargo unpacks every downloaded crate under
#
#        <cargo home>/registry/src/<registry>/<crate>-<version>/
#
#      where <registry> is something like "index.crates.io-6f17d22bba15001f".
#      A machine can have several registries, so we scan all of them and
#      take the first one that has a bevy-<version> directory.
#
# ERROR POLICY:
#   A broken candidate (permission denied, dangling symlink...) must never
#   abort the scan.  _probe_source_dir() collapses any OSError into
#   "not found here" and we move on to the next registry.
# =============================================================================

import logging
import os
from pathlib import Path
from typing import Optional

from core.models import DEPENDENCY_NAME

logger = logging.getLogger(__name__)


def registry_src_dir(cargo_home: Path) -> Path:
    """Root of Cargo's unpacked registry sources."""
    return Path(cargo_home) / "registry" / "src"


def _is_local_path(specifier: str) -> bool:
    return specifier.startswith(".") or os.path.isabs(specifier)


def _probe_source_dir(candidate: Path) -> bool:
    """True if candidate is a directory; any filesystem error counts as False."""
    try:
        return candidate.is_dir()
    except OSError as e:
        logger.debug("Skipping %s: %s", candidate, e)
        return False


def _list_registries(src_dir: Path) -> list[Path]:
    try:
        with os.scandir(src_dir) as entries:
            return [Path(entry.path) for entry in entries]
    except OSError as e:
        logger.debug("No registry cache at %s: %s", src_dir, e)
        return []


def find_source_dir(
    version: Optional[str],
    project_dir: Path,
    cargo_home: Path,
) -> Optional[Path]:
    """Return the directory holding bevy's source for `version`, or None.

    Args:
        version: Version or local path from the manifest (None if unknown).
        project_dir: Directory that contains Cargo.toml; local paths are
            resolved against it.
        cargo_home: Cargo's home directory (usually ~/.cargo).
    """
    if not version:
        return None

    if _is_local_path(version):
        return Path(os.path.normpath(Path(project_dir) / version))

    crate_dir_name = f"{DEPENDENCY_NAME}-{version}"
    # Directory-listing order: whichever registry the filesystem yields first wins.
    for registry in _list_registries(registry_src_dir(cargo_home)):
        candidate = registry / crate_dir_name
        if _probe_source_dir(candidate):
            logger.debug("Found %s in registry %s", crate_dir_name, registry.name)
            return candidate

    return None
