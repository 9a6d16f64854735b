"""Dependency injection."""

from eth_parser.DI.container import Container

__all__ = ["Container"]
