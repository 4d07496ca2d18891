# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP "translation layer" between FastMCP and core/.
#
#   registry.py    which tools exist (Operation enum -> handler factory)
#   handlers.py    the async tool functions and their parameter schemas
#   envelope.py    the call boundary: outcomes, error text, content blocks
#   mcp_server.py  create_server(), logging setup, transport selection
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT parse JSON-RPC or validate arguments (FastMCP does that)
# =============================================================================
