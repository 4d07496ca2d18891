# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the MCP server boilerplate.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any other protocol framework.
#   Every module here is plain Python: you can import it in a bare REPL and
#   call the operations directly.
#
# When you copy this template, replace the example data operation in
# core/example_data.py with your own data source.  The tools/ layer only
# needs the function signatures to stay the same.
# =============================================================================
