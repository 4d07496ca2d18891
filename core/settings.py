# =============================================================================
# core/settings.py  -  Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Loads the handful of knobs this server has from environment variables
#   (or a local .env file) with Pydantic Settings, which also validates them.
#
# VARIABLES:
#   MCP_TRANSPORT         stdio (default), http or sse
#   MCP_HOST / MCP_PORT   bind address for the network transports
#   LOG_LEVEL             DEBUG, INFO (default), WARNING, ERROR, CRITICAL
#   SIMULATED_LATENCY_MS  fake I/O delay of the data lookup (default 100, 0 = off)
#
# The server's name and version are NOT configurable: get_system_info reports
# the version, and it must always match what the server declares.
# =============================================================================

from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVER_NAME = "mcp-server-boilerplate"
SERVER_VERSION = "0.1.0"


class ServerSettings(BaseSettings):
    """Settings for one server process."""

    transport: Literal["stdio", "http", "sse"] = Field(
        default="stdio", validation_alias=AliasChoices("transport", "MCP_TRANSPORT")
    )
    host: str = Field(
        default="127.0.0.1", validation_alias=AliasChoices("host", "MCP_HOST")
    )
    port: int = Field(default=8000, validation_alias=AliasChoices("port", "MCP_PORT"))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Fake I/O delay of the example data source; 0 switches it off
    simulated_latency_ms: int = Field(default=100, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("transport", mode="before")
    @classmethod
    def _lowercase_transport(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def simulated_latency(self) -> float:
        """The simulated latency in seconds, ready for asyncio.sleep()."""
        return self.simulated_latency_ms / 1000
