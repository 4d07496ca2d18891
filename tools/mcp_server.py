# =============================================================================
# tools/mcp_server.py  -  FastMCP Server Factory
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server: name, version, client instructions, and every
#   tool from tools/registry.py.
#
# HOW A CALL FLOWS:
#   1. A client sends tools/call with a tool name and arguments
#   2. FastMCP finds the tool and validates the arguments against its schema
#      (a bad "limit" stops here and the call fails)
#   3. The handler in tools/handlers.py runs the core/ logic inside the call
#      boundary, formats the result and returns one text content block
#   4. Handler exceptions come back as "Error: ..." text, not as faults
#
# RUNNING THIS SERVER:
#   a) python main.py                   (reads .env, honours MCP_TRANSPORT)
#   b) python -m tools.mcp_server       (stdio, default settings)
#   c) fastmcp run tools/mcp_server.py  (uses the module-level `mcp` below)
# =============================================================================

import logging
import sys
from typing import Optional

from fastmcp import FastMCP

from core.settings import SERVER_NAME, SERVER_VERSION, ServerSettings
from tools.registry import register_operations

# Clients read these instructions when they connect.  Keep them short.
INSTRUCTIONS = (
    "Call get_system_info first when you need today's date or the server's "
    "timezone, for example before applying date filters. Use get_data to "
    "look up example records; pass outputMode='compact-json' for minified output."
)

_LOG_FORMAT = "%(asctime)s [MCP] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to STDERR.

    The stdio transport owns STDOUT; anything else written there would
    corrupt the JSON-RPC stream.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def create_server(settings: Optional[ServerSettings] = None) -> FastMCP:
    """Create a fully registered server.

    Each call returns a NEW server, so tests can build one per test with
    their own settings.
    """
    if settings is None:
        settings = ServerSettings()

    server = FastMCP(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        instructions=INSTRUCTIONS,
    )
    register_operations(server, settings)
    return server


def run_server(server: FastMCP, settings: ServerSettings) -> None:
    """Serve on the transport named in ``settings`` until the client leaves."""
    if settings.transport == "stdio":
        server.run(transport="stdio")
    else:
        server.run(transport=settings.transport, host=settings.host, port=settings.port)


mcp = create_server(ServerSettings())


if __name__ == "__main__":
    configure_logging()
    mcp.run()
