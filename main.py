# =============================================================================
# main.py  —  Entry Point for the Bevy Examples MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py            (from the Rust project's directory)
#
#   or register it with an MCP host, e.g.:
#     {"command": "uv", "args": ["run", "--project", "/path/to/this/repo",
#                                "python", "/path/to/this/repo/main.py"]}
#
# WHAT HAPPENS:
#   1. Loads a .env file (BEVY_EXAMPLES_*, CARGO_HOME) into the environment
#   2. Starts the FastMCP server on stdin/stdout (tools/mcp_server.py)
#   3. Serves tool calls until the host closes the connection
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables BEFORE importing the server, so settings read
# on the first tool call already see them.
load_dotenv()

from tools.mcp_server import run


def main() -> None:
    try:
        run()
    except Exception:
        logging.getLogger("bevy_examples").exception("Fatal error in main()")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
