# =============================================================================
# tools/envelope.py  -  Call Boundary & Error Translation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every tool body runs through run_tool().  It turns whatever happened into
#   a tagged outcome:
#     ToolSuccess(text)            the handler returned normally
#     ToolFailure(kind, message)   the handler raised
#   and both render to the SAME envelope shape: one "text" content block.
#
# WHY NOT LET EXCEPTIONS ESCAPE?
#   Existing callers of this server expect failures as in-band text starting
#   with "Error: ", with the protocol call itself succeeding.  Keeping the
#   tagged outcome internally means code (and tests) can still tell a failure
#   apart without parsing strings.
#
# WHAT THIS MODULE DOES NOT CATCH:
#   Argument validation happens inside FastMCP before run_tool() is reached,
#   so a bad "limit" is still a real protocol-level call failure.
# =============================================================================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Union

from mcp.types import TextContent

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error occurred"


class ToolErrorKind(str, Enum):
    """Why a tool call failed."""

    HANDLER_ERROR = "handler_error"


@dataclass(frozen=True)
class ToolSuccess:
    text: str

    ok = True

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class ToolFailure:
    kind: ToolErrorKind
    message: str

    ok = False

    def render(self) -> str:
        return f"Error: {self.message}"


ToolOutcome = Union[ToolSuccess, ToolFailure]


def to_content(outcome: ToolOutcome) -> list[TextContent]:
    """Wrap an outcome in the MCP envelope: a single text content block."""
    return [TextContent(type="text", text=outcome.render())]


async def run_tool(tool_name: str, body: Callable[[], Awaitable[str]]) -> ToolOutcome:
    """Await ``body`` and capture its result or its exception.

    Only ``Exception`` subclasses are translated; cancellation and
    KeyboardInterrupt still propagate.
    """
    try:
        text = await body()
    except Exception as exc:
        logger.exception("Tool %s failed", tool_name)
        message = str(exc) or UNKNOWN_ERROR
        return ToolFailure(kind=ToolErrorKind.HANDLER_ERROR, message=message)
    return ToolSuccess(text=text)
