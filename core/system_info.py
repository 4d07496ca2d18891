# =============================================================================
# core/system_info.py  -  Date, Timezone & Version Report
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the text that get_system_info returns.  Clients call it before
#   applying date filters so they know what "today" means on this machine.
#
# TIMEZONE RESOLUTION:
#   We want an IANA name ("Europe/Prague"), not an abbreviation ("CET").
#   The lookup order is the one most Unix tools use:
#     1. the TZ environment variable, when it names a loadable zone
#     2. the /etc/localtime symlink target
#     3. /etc/timezone (Debian-style)
#     4. "UTC"
#   Zone paths under zoneinfo/posix/ or zoneinfo/right/ are reported
#   without that prefix.
# =============================================================================

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.models import SystemInfoKind
from core.settings import SERVER_VERSION

GUIDANCE = "Use this information for date filtering and context."

_LOCALTIME = Path("/etc/localtime")
_TIMEZONE_FILE = Path("/etc/timezone")


def _iana_name(name: str) -> Optional[str]:
    """Return ``name`` without a posix/ or right/ prefix if it is a loadable zone."""
    name = name.strip().lstrip(":")
    for prefix in ("posix/", "right/"):
        if name.startswith(prefix):
            name = name[len(prefix):]
    if not name:
        return None
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None
    return name


def resolve_timezone_name() -> str:
    """Return the process's IANA timezone name, falling back to ``"UTC"``."""
    name = _iana_name(os.environ.get("TZ", ""))
    if name:
        return name

    target = os.path.realpath(_LOCALTIME)
    if "zoneinfo/" in target:
        name = _iana_name(target.rsplit("zoneinfo/", 1)[1])
        if name:
            return name

    try:
        name = _iana_name(_TIMEZONE_FILE.read_text(encoding="utf-8"))
    except OSError:
        name = None
    return name or "UTC"


def build_system_info(
    kind: SystemInfoKind = "all",
    now: Optional[datetime] = None,
    timezone_name: Optional[str] = None,
) -> str:
    """Render the system information report.

    ``now`` and ``timezone_name`` exist so tests can pin the clock; in normal
    use both are looked up on every call.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    current_date = now.date().isoformat()
    current_time = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    if kind == "date":
        return f"Current date: {current_date}"
    if kind == "timezone":
        return f"Timezone: {timezone_name or resolve_timezone_name()}"
    if kind == "version":
        return f"Server version: {SERVER_VERSION}"

    return "\n".join([
        f"Current date: {current_date}",
        f"Current time: {current_time}",
        f"Timezone: {timezone_name or resolve_timezone_name()}",
        f"Server version: {SERVER_VERSION}",
        "",
        GUIDANCE,
    ])
