"""Runtime settings read from the environment and an optional .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Number of layouts kept by LayoutService; 0 disables caching
    layout_cache_size: int = 128

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    model_config = {
        "env_prefix": "CONFIGURATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
