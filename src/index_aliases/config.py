"""Configuration for the index alias client."""

from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment."""

    base_url: str = "http://localhost:9200"
    username: str | None = None
    password: SecretStr = SecretStr("")

    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    write_timeout: float = 10.0
    pool_timeout: float = 10.0

    pretty: bool = False
    debug: bool = False

    model_config = SettingsConfigDict(env_prefix="INDEX_ALIASES_", env_file=".env")
