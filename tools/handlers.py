# =============================================================================
# tools/handlers.py  -  The Tool Functions
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the async functions FastMCP calls for each tool.  Each one is a
#   thin wrapper around a core/ function: it logs the call, runs the core
#   logic inside the call boundary (tools/envelope.py), formats the result
#   and hands back the text envelope.
#
# PARAMETER SCHEMAS:
#   FastMCP builds each tool's JSON Schema from the function signature.
#   Bounds, enums, defaults and descriptions all live in the Annotated[...]
#   types below; FastMCP validates incoming arguments against them BEFORE
#   the function body runs.  Parameter names are camelCase because they are
#   the wire names clients send.
#
# WHY FACTORIES?
#   Handlers need the server settings (the simulated latency), but any extra
#   parameter would show up in the tool schema.  make_*() closes over the
#   settings instead, so every server built by create_server() gets its own
#   handlers.
# =============================================================================

import logging
from typing import Annotated, Awaitable, Callable, Optional

from mcp.types import TextContent
from pydantic import Field

from core.example_data import example_data_operation
from core.formatter import format_response
from core.models import DataQuery, OutputFormat, SystemInfoKind
from core.settings import ServerSettings
from core.system_info import build_system_info
from tools.envelope import ToolOutcome, run_tool, to_content

logger = logging.getLogger(__name__)

# Every handler, whatever its parameters, is awaited by FastMCP and resolves
# to the text envelope.
ToolHandler = Callable[..., Awaitable[list[TextContent]]]

# ANSI color codes for terminal output (logs go to stderr, never stdout)
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # In-band errors
_RESET = "\033[0m"


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, outcome: ToolOutcome) -> list[TextContent]:
    """Log the outcome, then wrap it in the envelope."""
    if outcome.ok:
        logger.info(f"{_GREEN}  ← {tool_name} response: {len(outcome.render())} chars{_RESET}")
    else:
        logger.warning(f"{_RED}  ← {tool_name} failed: {outcome.render()}{_RESET}")
    return to_content(outcome)


# =============================================================================
# TOOL 1: get_data
# =============================================================================
def make_get_data(settings: ServerSettings) -> ToolHandler:
    async def get_data(
        limit: Annotated[
            int,
            Field(ge=1, le=100, description="Maximum number of items to return (1-100)"),
        ] = 10,
        filter: Annotated[
            Optional[str],
            Field(description="Filter criteria for the data"),
        ] = None,
        includeMetadata: Annotated[
            bool,
            Field(description="Include additional metadata in the response"),
        ] = False,
        outputMode: Annotated[
            OutputFormat,
            Field(
                description='Output format: "json" for formatted JSON (default), '
                '"compact-json" for minified JSON'
            ),
        ] = "json",
    ) -> list[TextContent]:
        """Retrieve data from your custom data source with optional filtering and pagination."""
        _log_request("get_data", limit=limit, filter=filter,
                     includeMetadata=includeMetadata, outputMode=outputMode)

        async def body() -> str:
            query = DataQuery(limit=limit, filter=filter, include_metadata=includeMetadata)
            result = await example_data_operation(query, latency=settings.simulated_latency)
            _log_status(f"Found {result.total_found} items, returning {len(result.items)}")
            return format_response(result.to_dict(), outputMode)

        return _log_response("get_data", await run_tool("get_data", body))

    return get_data


# =============================================================================
# TOOL 2: get_system_info
# =============================================================================
# Call this BEFORE applying date filters: it tells the client what "today"
# is on the server, and in which timezone.
# =============================================================================
def make_get_system_info(settings: ServerSettings) -> ToolHandler:
    async def get_system_info(
        info: Annotated[
            SystemInfoKind,
            Field(description="Type of system information to retrieve"),
        ] = "all",
    ) -> list[TextContent]:
        """Get system information and utilities."""
        _log_request("get_system_info", info=info)

        async def body() -> str:
            return build_system_info(info)

        return _log_response("get_system_info", await run_tool("get_system_info", body))

    return get_system_info

