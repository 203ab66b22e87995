"""
Shared configuration for chemapi_core module.

Uses pydantic-settings for environment-based configuration.
"""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_FILE = ".env.local" if os.path.exists(".env.local") else ".env"


class CoreSettings(BaseSettings):
    """Toolkit configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CHEMAPI_",
    )

    # Alert sets loaded into the filter catalog, in order
    filter_catalogs: list[str] = ["PAINS_A", "PAINS_B", "PAINS_C"]

    # MCS search timeout in seconds (RDKit default)
    mcs_timeout: int = 3600


@lru_cache
def get_core_settings() -> CoreSettings:
    """Get cached core settings instance."""
    return CoreSettings()
