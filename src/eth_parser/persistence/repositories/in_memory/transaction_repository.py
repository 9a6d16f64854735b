# -*- coding: utf-8 -*-
"""In-memory subscription/transaction repository (keyed by normalized address)."""

from __future__ import annotations

from eth_parser.models.transaction import TransactionRecord
from eth_parser.persistence.repositories.interfaces.transaction_repository import (
    ITransactionRepository,
)
from eth_parser.utils.rw_lock import AsyncReadWriteLock
from eth_parser.utils.validation import normalize_address


class InMemoryTransactionRepository(ITransactionRepository):
    """In-memory implementation of ITransactionRepository.

    The address map is guarded by a reader-writer lock: reads share it, subscribe and
    append take it exclusively. The watermark is a plain int outside that lock since
    only the sync engine writes it.
    """

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._watermark = 0
        self._lock = AsyncReadWriteLock()
        self._store: dict[str, list[TransactionRecord]] = {}

    async def get_watermark(self) -> int:
        """Return the current watermark."""
        return self._watermark

    async def set_watermark(self, block: int) -> None:
        """Overwrite the watermark (caller keeps it non-decreasing)."""
        self._watermark = block

    async def subscribe(self, address: str) -> None:
        """Create an empty log for address unless it already has one."""
        k = normalize_address(address)
        async with self._lock.write():
            self._store.setdefault(k, [])

    async def is_subscribed(self, address: str) -> bool:
        """Return True if address has a log."""
        k = normalize_address(address)
        async with self._lock.read():
            return k in self._store

    async def list_subscribed(self) -> frozenset[str]:
        """Return a frozen copy of the subscribed addresses."""
        async with self._lock.read():
            return frozenset(self._store)

    async def append_transaction(self, address: str, record: TransactionRecord) -> None:
        """Append record to the address log (auto-subscribes)."""
        k = normalize_address(address)
        async with self._lock.write():
            self._store.setdefault(k, []).append(record)

    async def get_transactions(self, address: str) -> list[TransactionRecord]:
        """Return a copy of the address log, or [] if unknown."""
        k = normalize_address(address)
        async with self._lock.read():
            return list(self._store.get(k, ()))
