"""
Configuration settings for the Record Inserter.

Uses Pydantic Settings to load environment variables for the MySQL connection,
logging, and the web page. The four connection variables are read as raw
strings: a missing variable resolves to an empty string and is handed to the
driver unchanged.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.models import ConnectionConfig


class Settings(BaseSettings):
    # Database
    db_host: str = Field("", alias="DB_HOST")
    db_port: int = Field(3306, alias="DB_PORT")
    db_user: str = Field("", alias="DB_USER")
    db_password: str = Field("", alias="DB_PASSWORD")
    db_name: str = Field("", alias="DB_NAME")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Web page
    web_host: str = Field("0.0.0.0", alias="WEB_HOST")
    web_port: int = Field(5000, alias="WEB_PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def connection_config(self) -> ConnectionConfig:
        """Build the connection parameters handed to the inserter."""
        return ConnectionConfig(
            host=self.db_host,
            user=self.db_user,
            password=self.db_password,
            database=self.db_name,
            port=self.db_port,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
