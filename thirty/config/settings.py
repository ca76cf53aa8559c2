"""
Thirty - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

_SECRET_KEYS = ("THIRTY_DEBUG", "THIRTY_LOG_LEVEL", "THIRTY_DICE_SEED", "THIRTY_SHOW_RULES")


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Game
    dice_seed: int | None = None
    show_rules: bool = True

    model_config = {
        "env_prefix": "THIRTY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
