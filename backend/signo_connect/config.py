"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: in-memory storage works with no DB
    - OTP bypass/fixed codes are settings so production can switch them off
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://signo:signo@db:5432/signo"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_auto_create: bool = False

    # Storage
    storage_backend: Literal["memory", "database"] = "memory"
    seed_demo_data: bool = True

    # OTP
    otp_ttl_minutes: int = 15
    otp_bypass_code: str | None = "123456"
    otp_fixed_code: str | None = "123456"

    # Admin
    admin_api_key: str | None = None

    # Frappe (signodrive.com)
    frappe_base_url: str = "https://internal.signodrive.com"
    frappe_api_token: str = ""
    frappe_x_key: str = ""
    frappe_timeout_seconds: int = 30
    frappe_max_retries: int = 2
    frappe_base_delay_ms: int = 500

    # Navigation estimates
    fuel_pump_radius_km: float = 25.0
    toll_corridor_km: float = 50.0
    average_speed_kmph: float = 60.0
    fuel_mileage_kmpl: float = 5.0
    fuel_price_per_liter: float = 100.0

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
