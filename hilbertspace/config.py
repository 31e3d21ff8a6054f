"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hilbertspace_log_level: str = "info"

    # Curve built by hilbertspace.main.create_space
    hilbertspace_default_curve: str = "hilbert"
    hilbertspace_default_order: int = 256
    hilbertspace_vertical_compatible: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def get_settings() -> Settings:
    return settings
