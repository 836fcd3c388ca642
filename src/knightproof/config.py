"""Centralized application configuration.

All settings are read from environment variables (or a .env.knights file).
Every field has a default, so the API and CLI start with no configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env.knights", env_file_encoding="utf-8",
    )

    # Random scenario generation
    scenario_max_attempts: int = 100
    scenario_seed: int | None = None

    # Logging
    log_level: str = "INFO"
