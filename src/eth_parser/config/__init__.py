"""Configuration subpackage."""

from eth_parser.config.config import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
    Settings,
    SyncSettings,
    WatcherSettings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "LoggingSettings",
    "Settings",
    "SyncSettings",
    "WatcherSettings",
    "get_settings",
]
