# =============================================================================
# core/package_info.py  —  Server Identity
# =============================================================================
#
# The MCP handshake advertises a name, a version and a description.  We read
# them from the [project] table of pyproject.toml so there's one source of
# truth.  When the project was installed as a regular (non-editable) wheel,
# pyproject.toml isn't shipped; the installed distribution metadata carries
# the same three values.
# =============================================================================

from importlib import metadata
from pathlib import Path
import tomllib
from typing import Optional

from core.models import ServerInfo

DISTRIBUTION_NAME = "bevy-examples-mcp"

_PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def load_server_info(pyproject_path: Optional[Path] = None) -> ServerInfo:
    """Load ServerInfo from pyproject.toml, falling back to installed metadata.

    Raises:
        tomllib.TOMLDecodeError: if pyproject.toml exists but is malformed.
        importlib.metadata.PackageNotFoundError: if neither source exists.
    """
    path = _PYPROJECT_PATH if pyproject_path is None else Path(pyproject_path)
    if path.is_file():
        with open(path, "rb") as f:
            project = tomllib.load(f).get("project", {})
        return ServerInfo(
            name=project.get("name", DISTRIBUTION_NAME),
            version=project.get("version", "0.0.0"),
            description=project.get("description", ""),
        )

    dist = metadata.metadata(DISTRIBUTION_NAME)
    return ServerInfo(
        name=dist["Name"],
        version=dist["Version"],
        description=dist.get("Summary") or "",
    )
