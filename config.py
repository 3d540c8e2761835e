"""
config.py — Application Settings
=================================
Read from the environment (prefix GRAPH_TUTOR_) or a local .env file.

    GRAPH_TUTOR_PORT=8080 GRAPH_TUTOR_LOG_FORMAT=json python main.py
"""

import secrets

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="GRAPH_TUTOR_", env_file=".env", extra="ignore")

    # Server
    HOST:  str  = "127.0.0.1"
    PORT:  int  = 5000
    DEBUG: bool = False

    # Flask session signing; a random key means sessions die with the process
    SECRET_KEY: str = Field(default_factory=lambda: secrets.token_hex(32))

    # Logging
    LOG_LEVEL:  str = "INFO"
    LOG_FORMAT: str = "console"     # "console" or "json"

    # Playback
    DEFAULT_SPEED: str = "medium"


settings = Settings()
