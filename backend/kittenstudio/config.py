"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    kittenstudio_env: str = "development"
    kittenstudio_log_level: str = "info"

    # CORS allow-list; origins outside it get no permissive headers
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Validation boundary
    max_body_bytes: int = 30_000

    # Remote validator client
    validator_url: str = "http://localhost:8787"
    client_timeout_s: float = 5.0

    # Base URL used when building share links
    share_base_url: str = "http://localhost:5173/"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
