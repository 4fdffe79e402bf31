"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    placehold_env: str = "development"
    placehold_log_level: str = "info"

    # Sent as Access-Control-Allow-Origin on every response.
    cors_allow_origin: str = "*"

    # Rendering defaults
    default_background: str = "#dddddd"
    max_text_length: int = 120
    max_lines: int = 2

    # Cache-Control max-age for rendered images, in seconds.
    cache_max_age: int = 31536000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
