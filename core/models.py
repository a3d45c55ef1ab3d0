# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the system.  They carry almost no behavior — they're structured bags
# of data that the tools layer converts to dicts with asdict().
#
# LIFECYCLE:
#   Everything here is built fresh for each tool call and thrown away after
#   the response is produced.  Nothing is cached between calls.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional, Union


# -----------------------------------------------------------------------------
# Tracked dependency
# -----------------------------------------------------------------------------
# The server only ever looks at ONE crate.  These constants describe it.
# -----------------------------------------------------------------------------
DEPENDENCY_NAME = "bevy"
SOURCE_EXTENSION = ".rs"
SOURCE_LANGUAGE = "rust"
EXAMPLES_DIR_NAME = "examples"
MANIFEST_NAME = "Cargo.toml"

# Reported when the manifest doesn't tell us which version is in use.
UNKNOWN_VERSION = "unknown"


# -----------------------------------------------------------------------------
# DependencySpec — what Cargo.toml says about the tracked dependency
# -----------------------------------------------------------------------------
# A dependency entry in Cargo.toml can take several shapes:
#
#   bevy = "0.14.0"                         → RegistryVersion("0.14.0")
#   bevy = { version = "^0.14" }            → RegistryVersion("0.14")
#   bevy = { path = "../bevy" }             → LocalPath("../bevy")
#   bevy = { git = "https://..." }          → None (nothing we can resolve)
#
# manifest.classify_dependency() turns the raw TOML value into exactly one of
# these variants.  Everything downstream works with the `specifier` string.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RegistryVersion:
    """A version requirement resolved against the Cargo registry cache."""

    version: str                       # Requirement operators already stripped

    @property
    def specifier(self) -> str:
        return self.version


@dataclass(frozen=True)
class LocalPath:
    """A `path = "..."` override pointing at a local checkout."""

    path: str                          # Kept verbatim, relative to the project

    @property
    def specifier(self) -> str:
        return self.path


DependencySpec = Union[RegistryVersion, LocalPath]


# -----------------------------------------------------------------------------
# ExampleNode — one entry in the examples tree
# -----------------------------------------------------------------------------
@dataclass
class ExampleNode:
    """A file or directory found under the examples directory.

    `path` is either the absolute filesystem path or the path relative to the
    scan root, depending on how the tree was built.  Only directories carry
    `children`; for files it stays None.
    """

    name: str
    path: str
    is_file: bool
    children: Optional[list["ExampleNode"]] = None


# -----------------------------------------------------------------------------
# ExampleListing — the result of the list-examples operation
# -----------------------------------------------------------------------------
# Carries BOTH the structured tree (for programmatic navigation) and the
# formatted text (for an LLM to read at a glance).
# -----------------------------------------------------------------------------
@dataclass
class ExampleListing:
    """The examples tree for the bevy version in use."""

    version: str                       # "0.14.0", "../bevy", or "unknown"
    source_dir: Optional[str] = None   # None when no source tree was found
    tree: list[ExampleNode] = field(default_factory=list)
    formatted: str = ""


# -----------------------------------------------------------------------------
# ServerInfo — process identity advertised to the MCP host
# -----------------------------------------------------------------------------
# Loaded once at startup (core/package_info.py) and never mutated.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ServerInfo:
    """Name, version and description of this server."""

    name: str
    version: str
    description: str = ""
