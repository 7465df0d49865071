"""Configuration for the SEPTA Transit MCP server.

Values are read from the environment (prefix ``SEPTA_MCP_``) or a local
``.env`` file. The fetch layer itself needs none of them; they only shape
how the server builds it.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings."""

    model_config = SettingsConfigDict(
        env_prefix="SEPTA_MCP_",
        env_file=".env",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS (comma-separated list, "*" for any origin)
    cors_allowed_origins: str = "*"

    # Upstream provider
    provider_host: str = "www3.septa.org"
    fetch_timeout: float = Field(default=10.0, gt=0, description="Per-candidate timeout (seconds)")
    request_timeout: float = Field(default=30.0, gt=0, description="Whole tools/call budget (seconds)")
    user_agent: str = "septa-transit-mcp/2.0"

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
