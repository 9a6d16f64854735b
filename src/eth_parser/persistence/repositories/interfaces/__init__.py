# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/, sql/, etc."""

from eth_parser.persistence.repositories.interfaces.transaction_repository import (
    ITransactionRepository,
)

__all__ = [
    "ITransactionRepository",
]
