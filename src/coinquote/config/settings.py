# src/coinquote/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a .env file) with validation.

Files that USE this module:
- coinquote.app (loads settings for logging and the client)
- coinquote.adapters.providers.coinmarketcap (endpoint, default currency, asset symbol)
- coinquote.adapters.http.transport (HTTP timeout and worker count)

Files that this module USES:
- coinquote.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from coinquote.shared.validators import (
    validate_base_url,  # Validate service endpoint format
    validate_currency_symbol,  # Validate ticker/currency code format
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # --- Exchange service ---
    # Ticker endpoint for a single asset (328 = Monero on CoinMarketCap)
    base_url: str = Field(
        default="https://api.coinmarketcap.com/v2/ticker/328/", alias="COINQUOTE_BASE_URL"
    )
    # Currency the service always quotes, in addition to the requested one
    default_currency: str = Field(default="USD", alias="COINQUOTE_DEFAULT_CURRENCY")
    # Crypto asset served by base_url
    asset_symbol: str = Field(default="XMR", alias="COINQUOTE_ASSET_SYMBOL")
    
    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    http_max_workers: int = Field(default=4, alias="HTTP_MAX_WORKERS", ge=1, le=32)
    
    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_stdout: bool = Field(default=True, alias="COINQUOTE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate service endpoint format."""
        if not validate_base_url(v):
            raise ValueError("COINQUOTE_BASE_URL must be an http(s) URL")
        return v
    
    @field_validator("default_currency", "asset_symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Validate and upper-case currency symbols."""
        if not validate_currency_symbol(v):
            raise ValueError(f"Invalid currency symbol: {v!r}")
        return v.strip().upper()
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v


# Global settings instance
settings = Settings()
