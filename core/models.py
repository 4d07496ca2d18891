# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the server.  They carry almost no behavior; each one knows how to
# turn itself into the JSON-ready dict that goes over the wire.
#
# WIRE NAMES:
#   MCP clients see camelCase keys ("createdAt", "totalFound") because that is
#   what existing callers of this server expect.  The Python attributes stay
#   snake_case; to_dict() does the translation in one place.
# =============================================================================

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Optional


# Output format accepted by the formatter and the get_data tool.
OutputFormat = Literal["json", "compact-json"]

# Which slice of system information get_system_info should report.
SystemInfoKind = Literal["date", "timezone", "version", "all"]


# -----------------------------------------------------------------------------
# ExampleItem - one record of the example data source
# -----------------------------------------------------------------------------
# Replace this with whatever your real data source returns.  Fixture items are
# shared between calls, so they are frozen: a handler that wants to add
# metadata must build a copy with with_metadata().
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ExampleItem:
    """A single record returned by the example data operation."""

    id: str                            # Opaque, unique identifier
    title: str
    description: str
    category: str                      # e.g. "sample", "demo", "test"
    created_at: str                    # ISO-8601 timestamp
    updated_at: str                    # ISO-8601 timestamp
    metadata: Optional[dict[str, Any]] = None

    def with_metadata(self, **extra: Any) -> "ExampleItem":
        """Return a shallow copy whose metadata is merged with ``extra``."""
        merged = {**(self.metadata or {}), **extra}
        return replace(self, metadata=merged)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
        }
        if self.metadata is not None:
            result["metadata"] = dict(self.metadata)
        result["createdAt"] = self.created_at
        result["updatedAt"] = self.updated_at
        return result


# -----------------------------------------------------------------------------
# DataQuery - the validated arguments of a data lookup
# -----------------------------------------------------------------------------
# The MCP layer has already enforced the schema (limit in 1..100) by the time
# one of these is built, so the core does not re-validate.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DataQuery:
    """Arguments for example_data_operation()."""

    limit: int = 10
    filter: Optional[str] = None
    include_metadata: bool = False

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"limit": self.limit}
        if self.filter is not None:
            result["filter"] = self.filter
        result["includeMetadata"] = self.include_metadata
        return result


@dataclass
class DataLookupResult:
    """What the data lookup hands back to the tool layer."""

    items: list[ExampleItem] = field(default_factory=list)
    total_found: int = 0               # Matches BEFORE the limit was applied
    filters: DataQuery = field(default_factory=DataQuery)

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "totalFound": self.total_found,
            "filters": self.filters.to_dict(),
        }
