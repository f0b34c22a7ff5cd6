"""
Configuration settings for the catalog viewer.

Uses Pydantic Settings to load environment variables for the target Oracle
connection, pool sizing and logging.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_viewer.domain.models import DataSourceConfig
from catalog_viewer.exceptions import ConfigurationError


class Settings(BaseSettings):
    # Database
    db_connection_name: str = Field("default", alias="DB_CONNECTION_NAME")
    db_url: str = Field("localhost:1521/FREEPDB1", alias="DB_URL")
    db_user: str = Field("", alias="DB_USER")
    db_password: str = Field("", alias="DB_PASSWORD", repr=False)
    db_pool_min: int = Field(1, alias="DB_POOL_MIN")
    db_pool_max: int = Field(4, alias="DB_POOL_MAX")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def data_source(self) -> DataSourceConfig:
        """
        Build the connection descriptor handed to the driver layer.

        Raises
        ------
        ConfigurationError
            If no database user is configured.
        """
        if not self.db_user:
            raise ConfigurationError("DB_USER is not set; cannot connect to the catalog")
        return DataSourceConfig(
            connection_name=self.db_connection_name,
            url=self.db_url,
            username=self.db_user,
            password=self.db_password,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
