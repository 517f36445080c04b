"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from capmesh.registry.naming import NamingConfig


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Capability Naming
    # =====================================================================
    prefix: Optional[str] = Field(
        default="mcp",
        description="Namespace token prepended to every capability name (empty disables prefixing)",
        alias="CAPMESH_PREFIX",
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_name: str = Field(
        default="capmesh",
        description="Server name announced to MCP clients during initialization",
        alias="CAPMESH_SERVER_NAME",
    )
    server_version: str = Field(
        default="1.0.0",
        description="Server version announced to MCP clients during initialization",
        alias="CAPMESH_SERVER_VERSION",
    )
    transport: Literal["stdio", "sse"] = Field(
        default="stdio",
        description="Transport used by the process entry point (stdio or sse)",
        alias="CAPMESH_TRANSPORT",
    )
    server_host: str = Field(
        default="0.0.0.0",
        description="Host address the SSE server binds to",
        alias="CAPMESH_SERVER_HOST",
    )
    server_port: int = Field(
        default=3001,
        description="Port number the SSE server binds to",
        alias="CAPMESH_SERVER_PORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="CAPMESH_LOG_LEVEL",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="CAPMESH_LOG_FORMAT",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to a file under log_file_dir",
        alias="CAPMESH_ENABLE_FILE_LOGGING",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="CAPMESH_LOG_FILE_DIR",
    )

    @field_validator("prefix")
    @classmethod
    def _blank_prefix_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def naming(self) -> NamingConfig:
        """Get the capability naming configuration."""
        return NamingConfig(prefix=self.prefix)


settings = Settings()
