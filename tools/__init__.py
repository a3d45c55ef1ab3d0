# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP host and core/.
#   mcp_server.py:
#     1. Calls a plain function from core/examples.py
#     2. Converts dataclasses → dicts for JSON
#     3. Turns propagated failures into ToolErrors with readable text
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT parse manifests or walk directories (that's core/)
#   - They do NOT keep state between calls
# =============================================================================
