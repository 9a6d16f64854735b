# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, API__RPC_URL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "eth-parser"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/eth_parser.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Configuration for the Ethereum JSON-RPC gateway (HTTP)."""

    model_config = SettingsConfigDict(extra="ignore")

    rpc_url: str = Field(
        default="https://cloudflare-eth.com",
        description="Ethereum JSON-RPC endpoint.",
    )
    timeout_seconds: float = Field(
        default=2.0,
        ge=0.1,
        le=60.0,
        description="HTTP request timeout in seconds (per call).",
    )
    max_retries: int = Field(
        default=1,
        ge=1,
        le=10,
        description="Attempts per RPC call before the failure is reported to the caller.",
    )


class SyncSettings(BaseSettings):
    """Configuration for the block synchronization loop."""

    model_config = SettingsConfigDict(extra="ignore")

    poll_seconds: float = Field(
        default=12.0,
        gt=0.0,
        le=600.0,
        description="Sleep between passes when the last pass succeeded (≈ Ethereum block time).",
    )
    retry_seconds: float = Field(
        default=1.0,
        gt=0.0,
        le=600.0,
        description="Sleep before retrying after a failed pass.",
    )

    @model_validator(mode="after")
    def _retry_not_slower_than_poll(self) -> SyncSettings:
        if self.retry_seconds > self.poll_seconds:
            raise ValueError("retry_seconds must not exceed poll_seconds")
        return self


class WatcherSettings(BaseSettings):
    """Configuration for the transaction watcher driven by main."""

    model_config = SettingsConfigDict(extra="ignore")

    # Raw string from env so pydantic-settings does not try to JSON-decode it (list[str] would trigger json.loads).
    addresses_raw: str = Field(
        default="",
        description="Addresses to subscribe and watch, comma-separated. Env: WATCHER__ADDRESSES.",
        validation_alias="addresses",
    )
    poll_seconds: float = Field(
        default=2.0,
        ge=0.1,
        le=60.0,
        description="Interval in seconds between transaction list checks.",
    )

    @computed_field
    @property
    def addresses(self) -> list[str]:
        """Parse comma-separated addresses_raw into list of stripped strings."""
        if not self.addresses_raw or not self.addresses_raw.strip():
            return []
        return [s.strip() for s in self.addresses_raw.split(",") if s.strip()]


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, SYNC__POLL_SECONDS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    sync: SyncSettings = Field(default_factory=SyncSettings)
    watcher: WatcherSettings = Field(default_factory=WatcherSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(api={"timeout_seconds": 5})
        - from_env(sync={"poll_seconds": 6, "retry_seconds": 0.5})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from eth_parser.config import get_settings

        settings = get_settings()
        timeout = settings.api.timeout_seconds
        poll = settings.sync.poll_seconds
    """
    return Settings()
