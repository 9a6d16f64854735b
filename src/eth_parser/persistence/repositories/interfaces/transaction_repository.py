"""Abstract interface for subscription and transaction storage (in-memory, DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eth_parser.models.transaction import TransactionRecord


class ITransactionRepository(ABC):
    """Interface for the subscription set, per-address transaction logs and the sync watermark.

    Addresses are normalized (stripped, lowercased) by implementations, so callers
    may pass any case variant.
    """

    @abstractmethod
    async def get_watermark(self) -> int:
        """Return the highest fully processed block number (0 = never synced)."""
        ...

    @abstractmethod
    async def set_watermark(self, block: int) -> None:
        """Set the watermark to block.

        Monotonicity is NOT enforced here; the sync engine only ever moves it forward.
        """
        ...

    @abstractmethod
    async def subscribe(self, address: str) -> None:
        """Ensure address is subscribed with an (initially empty) log. Idempotent."""
        ...

    @abstractmethod
    async def is_subscribed(self, address: str) -> bool:
        """Return True if address has been subscribed."""
        ...

    @abstractmethod
    async def list_subscribed(self) -> frozenset[str]:
        """Return a snapshot of subscribed addresses (later subscribes are not visible in it)."""
        ...

    @abstractmethod
    async def append_transaction(self, address: str, record: TransactionRecord) -> None:
        """Append record to address's log, subscribing the address first if needed.

        No deduplication by hash: each call appends exactly one entry.
        """
        ...

    @abstractmethod
    async def get_transactions(self, address: str) -> list[TransactionRecord]:
        """Return a snapshot of address's log in append order (empty if never subscribed)."""
        ...
