"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    blobmorph_env: str = "development"
    blobmorph_log_level: str = "info"

    # Generation defaults
    default_complexity: int = 8
    default_contrast: float = 20.0
    frame_count: int = 20
    seed: int | None = None

    # Output
    precision: int | None = 2
    fill: str = "#3498db"
    animation_duration: str = "4s"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
