# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools the host can call.  Each tool is a thin wrapper
#   around a core/examples.py function — it handles input validation,
#   output formatting and error reporting.
#
# HOW IT WORKS (the flow):
#   1. The host's LLM decides it needs a bevy example
#   2. It calls a tool by name via MCP (e.g., "list-examples")
#   3. FastMCP routes the call to the decorated function below
#   4. The function builds fresh Settings, calls core/, formats the result
#   5. The host receives JSON (tree) or text (file contents / path)
#
# TOOLS:
#   - list-examples     → bevy version + examples tree (structured + outline)
#   - read-example      → first N lines of one example, fenced as ```rust
#   - get-example-path  → absolute path of one example
#   All tools are read-only and idempotent: same filesystem, same answer.
#
# ERRORS:
#   A broken Cargo.toml or an unlistable examples/ directory is raised as a
#   ToolError with a readable message; the host sees an error result with
#   that text.  "bevy not found" is a normal answer, not an error.
#
# RUNNING THIS SERVER:
#     a) python main.py               (loads .env first)
#     b) python -m tools.mcp_server
#   Either way it speaks MCP over stdin/stdout.
# =============================================================================

from dataclasses import asdict
import json
import logging
import sys
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

# --- Import core logic ---
# The tools layer depends on core/ (and the prompt text) and nothing else.
from agent.prompt import get_examples_policy_prompt
from core.config import Settings
from core.examples import get_example_path, list_examples, read_example
from core.manifest import ManifestError
from core.models import ServerInfo
from core.package_info import load_server_info
from core.tree import count_example_files

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because STDOUT carries the MCP JSON-RPC stream.  A stray
# print() or stdout log line would corrupt the protocol.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

# Longest response we echo to the log; example files can be big.
_MAX_LOGGED_RESPONSE = 300

logger = logging.getLogger("bevy_examples")


def configure_logging(level: str = "INFO") -> None:
    """Send log lines to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result):
    """Log the (abbreviated) tool response in GREEN, then return it."""
    if isinstance(result, str):
        text = result
    else:
        text = json.dumps(result, separators=(",", ":"))
    if len(text) > _MAX_LOGGED_RESPONSE:
        text = text[:_MAX_LOGGED_RESPONSE] + "..."
    logger.info(f"{_GREEN}  ← {tool_name} response: {text}{_RESET}")
    return result


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        raise ToolError(f"Invalid server configuration: {e}") from e


PathArg = Annotated[
    str,
    Field(
        min_length=1,
        description='Example path relative to the examples directory, as shown by list-examples (e.g. "2d/sprite.rs").',
    ),
]


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# Name, version and description come from pyproject.toml (ServerInfo).  The
# usage policy from agent/prompt.py goes out as the server's instructions.
# =============================================================================
def create_server(info: ServerInfo) -> FastMCP:
    """Build the FastMCP server with all three tools registered."""
    mcp = FastMCP(
        info.name,
        instructions=get_examples_policy_prompt(info.description),
        version=info.version,
    )

    # =========================================================================
    # TOOL 1: list-examples
    # =========================================================================
    # Call this first.  Paths in the tree are relative to examples/, so the
    # host can pass them straight to read-example.
    # =========================================================================
    @mcp.tool(name="list-examples")
    def list_examples_tool() -> dict:
        """List the bevy example files for the bevy version used by this project.

        Returns:
            A dict with:
              - version: bevy version (or local path) from Cargo.toml, or "unknown"
              - source_dir: where the bevy source was found (null if not found)
              - tree: nested list of {name, path, is_file, children}
              - formatted: the same tree as an indented outline
                ("+ dir" for directories, "- file.rs" for files)

            When the bevy source can't be located, tree is empty.
        """
        _log_request("list-examples")
        settings = _load_settings()

        try:
            listing = list_examples(settings)
        except ManifestError as e:
            raise ToolError(f"Could not read Cargo.toml: {e}") from e
        except OSError as e:
            raise ToolError(f"Could not list examples in {e.filename or 'examples directory'}: {e}") from e

        if listing.source_dir is None:
            _log_status(f"No bevy source found for version {listing.version!r}")
        else:
            _log_status(f"{count_example_files(listing.tree)} example files under {listing.source_dir}")
        return _log_response("list-examples", asdict(listing))

    # =========================================================================
    # TOOL 2: read-example
    # =========================================================================
    @mcp.tool(name="read-example")
    def read_example_tool(path: PathArg) -> str:
        """Read one bevy example file (first lines only) as a ```rust code block.

        Args:
            path: Path relative to the examples directory, exactly as listed
                  by list-examples (e.g. "2d/sprite.rs").

        Returns:
            The file content in a fenced code block.  If the file can't be
            read, the block contains an "Error reading file: ..." message.
            If the bevy source can't be located, returns an error message
            instead.
        """
        _log_request("read-example", path=path)
        settings = _load_settings()
        try:
            text = read_example(path, settings)
        except ManifestError as e:
            raise ToolError(f"Could not read Cargo.toml: {e}") from e
        return _log_response("read-example", text)

    # =========================================================================
    # TOOL 3: get-example-path
    # =========================================================================
    # Resolution only: lets the host hand the user a file path without
    # pulling the file into its context.
    # =========================================================================
    @mcp.tool(name="get-example-path")
    def get_example_path_tool(path: PathArg) -> str:
        """Get the absolute filesystem path of a bevy example file.

        Args:
            path: Path relative to the examples directory (e.g. "2d/sprite.rs").

        Returns:
            The absolute path as plain text, or an error message if the bevy
            source can't be located.  The file's existence is not checked.
        """
        _log_request("get-example-path", path=path)
        settings = _load_settings()
        try:
            text = get_example_path(path, settings)
        except ManifestError as e:
            raise ToolError(f"Could not read Cargo.toml: {e}") from e
        return _log_response("get-example-path", text)

    return mcp


# Built once at import: the identity doesn't change while the process runs.
SERVER_INFO = load_server_info()
mcp = create_server(SERVER_INFO)


def run() -> None:
    """Configure logging and serve over stdio until the host disconnects."""
    configure_logging(Settings.from_env().log_level)
    logger.info(f"{SERVER_INFO.name} {SERVER_INFO.version} running on stdio")
    mcp.run()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    run()
