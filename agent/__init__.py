# =============================================================================
# agent/__init__.py
# =============================================================================
# This package holds what the server tells the HOST agent about itself.
#
# ARCHITECTURAL ROLE:
#   The host (an MCP client driving an LLM) owns reasoning and orchestration.
#   We don't run that agent here; we only ship the usage policy it should
#   follow (prompt.py), advertised as the server's instructions.
# =============================================================================
