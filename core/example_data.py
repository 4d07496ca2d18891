# =============================================================================
# core/example_data.py  -  Example Data Source & Lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds a tiny, hardcoded "database" of ExampleItems and the async lookup
#   operation the get_data tool calls.
#
# WHY MOCK DATA?
#   This is a template.  In a real server this module would query a database
#   or an HTTP API.  The INTERFACE is what matters:
#       await example_data_operation(DataQuery(...)) -> DataLookupResult
#   Swap the body for real I/O and neither the tool layer nor the tests of the
#   protocol surface need to change.
#
# THE SEPARATION OF "FILTER" AND "FETCH":
#   filter_items() is a plain function over a list, so the matching rules can
#   be tested without any event loop.  example_data_operation() adds the async
#   contract (and the fake latency) on top.
# =============================================================================

import asyncio
from datetime import datetime, timezone
from typing import Iterable, Optional

from core.models import DataLookupResult, DataQuery, ExampleItem

DATA_SOURCE_TAG = "example-data-source"
DEFAULT_LATENCY_SECONDS = 0.1


# -----------------------------------------------------------------------------
# Fixture records
# -----------------------------------------------------------------------------
# Two of the three records mention "sample", so a "sample" filter finds
# exactly two items.  Item 3 ships with metadata of its own to show that
# includeMetadata merges rather than replaces.
# -----------------------------------------------------------------------------
_EXAMPLE_ITEMS: tuple[ExampleItem, ...] = (
    ExampleItem(
        id="1",
        title="Example Item 1",
        description="This is a sample item for demonstration",
        category="sample",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-01T00:00:00Z",
    ),
    ExampleItem(
        id="2",
        title="Example Item 2",
        description="Another sample item with different category",
        category="demo",
        created_at="2024-01-02T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
    ),
    ExampleItem(
        id="3",
        title="Example Item 3",
        description="Third record for testing filters",
        category="test",
        metadata={"tags": ["important", "featured"]},
        created_at="2024-01-03T00:00:00Z",
        updated_at="2024-01-03T00:00:00Z",
    ),
)


def list_items() -> list[ExampleItem]:
    """Return every fixture record, in a fresh list the caller may reorder."""
    return list(_EXAMPLE_ITEMS)


def _matches(item: ExampleItem, needle: str) -> bool:
    return (
        needle in item.title.lower()
        or needle in item.description.lower()
        or needle in item.category.lower()
    )


def filter_items(items: Iterable[ExampleItem], text: Optional[str]) -> list[ExampleItem]:
    """Keep items whose title, description or category contains ``text``.

    Matching is a case-insensitive substring test.  A missing or empty filter
    keeps everything.
    """
    if not text:
        return list(items)
    needle = text.lower()
    return [item for item in items if _matches(item, needle)]


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def example_data_operation(
    query: DataQuery,
    latency: float = DEFAULT_LATENCY_SECONDS,
) -> DataLookupResult:
    """Look up example records.

    Args:
        query: Validated lookup arguments (limit, filter, include_metadata).
        latency: Seconds to sleep before answering, standing in for real I/O.
            Pass 0 to skip the delay.

    Returns:
        A DataLookupResult.  ``total_found`` counts every match, even the ones
        cut off by ``query.limit``.
    """
    if latency > 0:
        await asyncio.sleep(latency)

    matched = filter_items(_EXAMPLE_ITEMS, query.filter)
    limited = matched[: query.limit]

    if query.include_metadata:
        processed_at = _utc_timestamp()
        limited = [
            item.with_metadata(processingTime=processed_at, source=DATA_SOURCE_TAG)
            for item in limited
        ]

    return DataLookupResult(items=limited, total_found=len(matched), filters=query)
