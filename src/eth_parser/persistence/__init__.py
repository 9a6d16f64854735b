"""Persistence layer (repositories, etc.)."""

from eth_parser.persistence.repositories import (
    InMemoryTransactionRepository,
    ITransactionRepository,
)

__all__ = [
    "ITransactionRepository",
    "InMemoryTransactionRepository",
]
