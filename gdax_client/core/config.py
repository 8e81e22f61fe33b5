from functools import lru_cache
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_API_URL = "https://api.gdax.com"
SANDBOX_API_URL = "https://api-public.sandbox.gdax.com"

API_URLS: dict[str, str] = {
    "production": PRODUCTION_API_URL,
    "sandbox": SANDBOX_API_URL,
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GDAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_pool_limits(self) -> "Settings":
        if self.max_connections < 1:
            raise ValueError("GDAX_MAX_CONNECTIONS must be at least 1")
        if self.max_keepalive_connections > self.max_connections:
            raise ValueError("GDAX_MAX_KEEPALIVE_CONNECTIONS cannot exceed GDAX_MAX_CONNECTIONS")
        return self

    api_env: Literal["production", "sandbox"] = "production"
    api_url: str = ""
    log_level: str = "INFO"

    # No timeout by default; callers wanting a deadline wrap send_request themselves.
    request_timeout_seconds: float | None = None
    max_connections: int = 10
    max_keepalive_connections: int = 5

    trade_history_retry_attempts: int = 3
    trade_history_retry_backoff_seconds: float = 1.0
    trade_history_retry_backoff_max_seconds: float = 8.0
    trade_history_page_limit: int | None = None

    @property
    def resolved_api_url(self) -> str:
        explicit = self.api_url.strip()
        if explicit:
            return explicit.rstrip("/")
        return API_URLS[self.api_env]


@lru_cache
def get_settings() -> Settings:
    return Settings()
