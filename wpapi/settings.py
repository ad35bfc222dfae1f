from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import HttpUrl, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # WordPress
    WORDPRESS_API_URL: HttpUrl
    WORDPRESS_USERNAME: str = ""
    WORDPRESS_PASSWORD: SecretStr = SecretStr("")
    WORDPRESS_STATUS: Literal["draft", "publish"] = "publish"
    WORDPRESS_TIMEOUT_SECONDS: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    WPAPI_API_KEY: str = ""

    @property
    def wordpress_api_url(self) -> str:
        return str(self.WORDPRESS_API_URL).rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Read settings from the environment once, on first use."""
    return Settings()
