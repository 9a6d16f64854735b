"""In-memory repository implementations."""

from eth_parser.persistence.repositories.in_memory.transaction_repository import (
    InMemoryTransactionRepository,
)

__all__ = [
    "InMemoryTransactionRepository",
]
