"""Shared test fixtures and configuration for pytest."""

from datetime import datetime, timezone

import pytest
from fastmcp import FastMCP

from core.models import DataQuery
from core.settings import ServerSettings
from tools.mcp_server import create_server


# ==================== Settings & Server Fixtures ====================


@pytest.fixture
def settings() -> ServerSettings:
    """Settings with the simulated latency switched off."""
    return ServerSettings(simulated_latency_ms=0)


@pytest.fixture
def server(settings: ServerSettings) -> FastMCP:
    """A fresh, fully registered server."""
    return create_server(settings)


# ==================== Sample Data Fixtures ====================


@pytest.fixture
def sample_query() -> DataQuery:
    """The canonical "sample" lookup used throughout the tests."""
    return DataQuery(limit=5, filter="sample", include_metadata=True)


@pytest.fixture
def fixed_now() -> datetime:
    """A pinned clock for system info tests."""
    return datetime(2024, 1, 1, 12, 30, 0, tzinfo=timezone.utc)
