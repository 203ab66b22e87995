"""
Server configuration management for chemapi-server.

Uses pydantic-settings for environment-based configuration.
Toolkit settings are managed by chemapi_core.config.CoreSettings.
"""

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_FILE = ".env.local" if os.path.exists(".env.local") else ".env"


class ServerSettings(BaseSettings):
    """Server configuration loaded from environment variables.

    Note: port and threads given on the command line take precedence.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CHEMAPI_SERVER_",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = Field(default=9080, ge=0, le=65535)
    threads: int = Field(default=2, ge=1)
    debug: bool = False
    verbose: bool = False

    # API settings
    api_version: str = "0.1.0"
    api_title: str = "chemapi"
    api_description: str = "RDKit cheminformatics primitives over HTTP"

    # Written to stdout once the app is initialized
    startup_banner: str = "Pistache RDKit API started"


@lru_cache
def get_server_settings() -> ServerSettings:
    """Get cached server settings instance."""
    return ServerSettings()
