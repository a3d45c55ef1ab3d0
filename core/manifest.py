# =============================================================================
# core/manifest.py  —  Cargo.toml Reader
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the project's Cargo.toml and works out which bevy the project uses:
#   a registry version ("0.14.0") or a local path override ("../bevy").
#
# FAILURE MODES:
#   - Cargo.toml missing or not valid TOML  → ManifestError (fatal for the
#     calling tool; we never guess a default version)
#   - bevy not listed, or listed in a shape we can't resolve (git, workspace)
#     → None.  That's a normal "we don't know" answer, not an error.
# =============================================================================

from pathlib import Path
import tomllib
from typing import Any, Optional

from core.models import (
    DEPENDENCY_NAME,
    MANIFEST_NAME,
    DependencySpec,
    LocalPath,
    RegistryVersion,
)


# Characters that only carry requirement semantics ("^0.14", "~0.14") or
# stray quoting; none of them belong in a registry directory name.
_REQUIREMENT_CHARS = str.maketrans("", "", '^~"')


class ManifestError(Exception):
    """Cargo.toml could not be read or parsed."""


def read_manifest(project_dir: Path) -> dict[str, Any]:
    """Parse <project_dir>/Cargo.toml into a dict.

    Raises:
        ManifestError: if the file is missing, unreadable, or not valid TOML.
    """
    manifest_path = Path(project_dir) / MANIFEST_NAME
    try:
        with open(manifest_path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ManifestError(f"cannot read {manifest_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"cannot parse {manifest_path}: {e}") from e


def strip_version_requirement(requirement: str) -> str:
    """Remove caret, tilde and quote characters: '^0.14.0' → '0.14.0'."""
    return requirement.translate(_REQUIREMENT_CHARS)


def classify_dependency(entry: Any) -> Optional[DependencySpec]:
    """Turn a raw [dependencies] value into a DependencySpec.

    A `path` key wins over `version` because Cargo builds from the path when
    both are present.
    """
    if isinstance(entry, str):
        return RegistryVersion(strip_version_requirement(entry))

    if isinstance(entry, dict):
        path = entry.get("path")
        if isinstance(path, str) and path:
            return LocalPath(path)
        version = entry.get("version")
        if isinstance(version, str) and version:
            return RegistryVersion(strip_version_requirement(version))

    return None


def get_dependency_spec(project_dir: Path) -> Optional[DependencySpec]:
    """Classify the bevy entry of the project's [dependencies] table."""
    manifest = read_manifest(project_dir)
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        return None
    return classify_dependency(dependencies.get(DEPENDENCY_NAME))


def get_dependency_version(project_dir: Path) -> Optional[str]:
    """Return the version (or local path) of bevy, or None if undetermined."""
    spec = get_dependency_spec(project_dir)
    return spec.specifier if spec is not None else None
