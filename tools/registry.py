# =============================================================================
# tools/registry.py  -  Operation Registry
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Lists every tool this server exposes, in ONE static mapping:
#
#       Operation (enum)  ->  OperationSpec (description + handler factory)
#
#   create_server() walks the mapping and registers each entry with FastMCP
#   under the enum's value.  Clients still look tools up by string name; the
#   code never does.
#
# ADDING A TOOL:
#   1. Write make_<tool>(settings) in tools/handlers.py
#   2. Add a member to Operation
#   3. Add its OperationSpec to OPERATIONS
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from fastmcp import FastMCP

from core.settings import ServerSettings
from tools.handlers import ToolHandler, make_get_data, make_get_system_info


class Operation(str, Enum):
    """Identifiers of the tools exposed over MCP (values are the wire names)."""

    GET_DATA = "get_data"
    GET_SYSTEM_INFO = "get_system_info"


@dataclass(frozen=True)
class OperationSpec:
    description: str
    make_handler: Callable[[ServerSettings], ToolHandler]


OPERATIONS: dict[Operation, OperationSpec] = {
    Operation.GET_DATA: OperationSpec(
        description=(
            "Retrieve data from your custom data source with optional filtering "
            "and pagination."
        ),
        make_handler=make_get_data,
    ),
    Operation.GET_SYSTEM_INFO: OperationSpec(
        description=(
            "Get system information and utilities. Provides current date, "
            "timezone, and other helpful context."
        ),
        make_handler=make_get_system_info,
    ),
}


def register_operations(server: FastMCP, settings: ServerSettings) -> None:
    """Register every entry of OPERATIONS as a tool on ``server``."""
    for operation, spec in OPERATIONS.items():
        handler = spec.make_handler(settings)
        server.tool(name=operation.value, description=spec.description)(handler)
