# =============================================================================
# core/formatter.py  -  Response Formatting
# =============================================================================
# Turns a tool result into the text that goes inside the MCP envelope.
#   "json"          pretty, 2-space indented (the default)
#   "compact-json"  no whitespace at all, for clients counting tokens
# =============================================================================

import json
import logging
from typing import Any, Optional

from core.models import OutputFormat

logger = logging.getLogger(__name__)


def format_response(data: Any, mode: Optional[OutputFormat] = "json") -> str:
    """Serialize ``data`` as JSON text in the requested mode.

    If serialization fails the error is logged and pretty serialization is
    tried once more.  A second failure propagates to the caller.
    """
    try:
        if mode == "compact-json":
            return json.dumps(data, separators=(",", ":"))
        return json.dumps(data, indent=2)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.error("Formatting failed, falling back to JSON: %s", exc)
        return json.dumps(data, indent=2)
