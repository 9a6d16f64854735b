# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from eth_parser.persistence.repositories.interfaces import ITransactionRepository
from eth_parser.persistence.repositories.in_memory import InMemoryTransactionRepository

__all__ = [
    "ITransactionRepository",
    "InMemoryTransactionRepository",
]
