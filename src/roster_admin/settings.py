"""
roster_admin.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (admin password, JWT secret).
- Offer a cached settings instance for the composition root and the dev server.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Strict env-driven configuration (prefix `ROSTER_`)
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="ROSTER_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "roster-admin"
    log_level: str = "INFO"

    # Directory backend selected at startup.
    backend: Literal["http", "local"] = "local"
    api_base_url: str = "http://localhost:8080"
    request_timeout_seconds: float = 10.0

    # Session persistence: one named slot in a small JSON file.
    session_file: str = "./.roster_session.json"
    session_slot: str = "authToken"

    notification_timeout_seconds: float = 5.0

    # Local persistent store
    database_url: str = "sqlite+aiosqlite:///./roster.db"
    seed_on_init: bool = True
    simulated_latency_ms: int = 0

    # Accepted admin credential for the reference verifier.
    admin_username: str = "admin"
    admin_password: str = Field(default="password", repr=False)

    # Token issuing (local store and dev server)
    jwt_alg: str = "HS256"
    jwt_issuer: str = "roster-admin"
    jwt_audience: str = "roster-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)
    token_ttl_minutes: int = 8 * 60

    # Dev stub backend
    api_host: str = "0.0.0.0"
    api_port: int = 8080


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each dependency lookup.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` explicitly instead of going through the cache.
