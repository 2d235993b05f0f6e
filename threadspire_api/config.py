# threadspire_api/config.py

"""
Configuration for the Threadspire HTTP API.

All tunables are read from environment variables (or a local ``.env`` file)
through pydantic-settings, with defaults suitable for local development.

Typical usage
=============

    from threadspire_api.config import get_config

    cfg = get_config()
    engine = create_engine(cfg.DATABASE_URL)

Tests can swap the whole object with ``set_config``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-for-production"


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration registry, validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "threadspire-api"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    VERSION: str = "0.1.0"

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False
    API_PREFIX: str = "/api"
    ENABLE_DOCS: bool = True
    CORS_ORIGINS: str = "*"

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./threadspire.db"

    # --- Security ---
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def api_root(self) -> str:
        """
        Normalized router prefix: "" or "/something" without a trailing slash.
        """
        root = self.API_PREFIX.strip().rstrip("/")
        if root and not root.startswith("/"):
            root = "/" + root
        return root

    @property
    def cors_origins(self) -> List[str]:
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]


# Singleton configuration instance
_CONFIG: Optional[Settings] = None


def get_config() -> Settings:
    """
    Return the global Settings instance, creating it from environment
    variables on first use.
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = Settings()
    return _CONFIG


def set_config(config: Settings) -> None:
    """
    Replace the global Settings instance.

    Mainly useful for tests, where you may want to override configuration
    without touching environment variables.
    """
    global _CONFIG
    _CONFIG = config


__all__ = ["AppEnv", "Settings", "DEFAULT_JWT_SECRET", "get_config", "set_config"]
