# =============================================================================
# agent/prompt.py  —  Usage Policy Advertised to the Host Agent
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the instructions the MCP server hands to its host during the
#   handshake.  The host's LLM reads them as part of its system prompt, so
#   this text decides HOW the examples tools get used.
#
# WHY A SEPARATE FILE?
#   Prompts change often and read badly inline.  Keeping the text here keeps
#   tools/mcp_server.py about wiring only.
#
# PROMPT PRINCIPLES USED:
#   1. GROUNDING: the examples match the exact bevy version in Cargo.toml.
#      APIs change a lot between bevy releases; the LLM's memory is usually
#      for a different one.
#   2. EXPLICIT PROCESS: list first, then read, never guess paths.
#   3. BUDGET: files come back truncated, so read only what's needed.
# =============================================================================

from core.models import DEPENDENCY_NAME, MANIFEST_NAME


def get_examples_policy_prompt(description: str = "") -> str:
    """Build the instructions string sent to the host.

    Args:
        description: Free-text server description, placed at the top.
    """
    intro = f"{description.strip()}\n\n" if description.strip() else ""
    return f"""{intro}These tools expose the official example programs of the {DEPENDENCY_NAME}
crate, taken from the exact version declared in this project's {MANIFEST_NAME}.

Use them whenever you write or review {DEPENDENCY_NAME} code:

1. Call `list-examples` first. It reports the {DEPENDENCY_NAME} version in use and
   an outline of every example file. Pick candidates by directory and file name.
2. Call `read-example` with a path exactly as it appears in the listing
   (e.g. "2d/sprite.rs"). Never invent paths.
3. Use `get-example-path` when you only need to point the user at a file.

Rules:
- Prefer patterns from these examples over what you remember: {DEPENDENCY_NAME}'s
  API changes between releases and the examples match the version in use.
- File contents are truncated to the first lines. Read the few examples you
  need instead of many.
- If the version is "unknown" or the source cannot be located, say so and
  suggest checking {MANIFEST_NAME} and running `cargo fetch`; don't guess.
"""
