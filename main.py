# =============================================================================
# main.py  -  Entry Point for the MCP Server Boilerplate
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Environment variables are loaded from .env (if present)
#   2. Settings are read (transport, host/port, log level, fake latency)
#   3. Logging is configured on STDERR
#   4. The FastMCP server is built and served on the chosen transport
#
# CONNECTING A CLIENT:
#   Point any MCP client at "python /path/to/main.py" over stdio, or set
#   MCP_TRANSPORT=http and connect to http://MCP_HOST:MCP_PORT/mcp.
# =============================================================================

import logging

from dotenv import load_dotenv

# Load .env BEFORE reading settings, so its values are visible to ServerSettings().
load_dotenv()

from core.settings import SERVER_NAME, SERVER_VERSION, ServerSettings
from tools.mcp_server import configure_logging, create_server, run_server

logger = logging.getLogger(__name__)


def main() -> None:
    settings = ServerSettings()
    configure_logging(settings.log_level)

    server = create_server(settings)
    logger.info(
        "%s %s starting (transport=%s, simulated latency=%dms)",
        SERVER_NAME, SERVER_VERSION, settings.transport, settings.simulated_latency_ms,
    )
    run_server(server, settings)


if __name__ == "__main__":
    main()
