"""Logging setup (structlog over stdlib handlers, optional Logfire)."""

from eth_parser.logging.config import configure_logging

__all__ = ["configure_logging"]
