# src/cashpoint/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and a .env file with validation.

Files that USE this module:
- cashpoint.app (loads settings for terminal startup and logging)
- cashpoint.adapters.custodian.http_custodian (custodian URL, API key, HTTP timeout)

Files that this module USES:
- cashpoint.shared.validators (validation functions for settings)
- cashpoint.domain.models (Denomination, to check configured face values)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import List, Optional, Tuple  # Type hints

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from cashpoint.domain.models import Denomination
from cashpoint.shared.validators import (
    parse_stock_spec,  # Parse "face:count" stock definitions
    validate_api_key,  # Validate API key format
    validate_currency_code,  # Validate three-letter currency codes
)


class Settings(BaseSettings):
    """Terminal settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Terminal ---
    currency: str = Field(default="PLN", alias="ATM_CURRENCY")
    starting_stock: str = Field(default="500:5,200:5,100:5", alias="ATM_STARTING_STOCK")

    # --- Custodian API ---
    custodian_url: str = Field(default="", alias="CUSTODIAN_URL")
    custodian_api_key: str = Field(default="", alias="CUSTODIAN_API_KEY")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="CASHPOINT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def starting_packs(self) -> List[Tuple[int, int]]:
        """Starting stock as (face value, count) pairs."""
        return parse_stock_spec(self.starting_stock)

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency code."""
        v = v.strip().upper()
        if not validate_currency_code(v):
            raise ValueError("ATM_CURRENCY must be a three-letter currency code")
        return v

    @field_validator("starting_stock")
    @classmethod
    def validate_starting_stock(cls, v: str) -> str:
        """Validate stock format and face values."""
        known = {d.value for d in Denomination}
        for face, _count in parse_stock_spec(v):
            if face not in known:
                raise ValueError(f"Unknown denomination in ATM_STARTING_STOCK: {face}")
        return v

    @field_validator("custodian_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format (empty means no key)."""
        if v and not validate_api_key(v):
            raise ValueError("Invalid API key format")
        return v

    @field_validator("custodian_url")
    @classmethod
    def validate_custodian_url(cls, v: str) -> str:
        """Strip trailing slash so endpoint paths can be appended."""
        v = v.strip().rstrip("/")
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("CUSTODIAN_URL must start with http:// or https://")
        return v


# Global settings instance
settings = Settings()
