"""Abstract interface for the chain data source consumed by the sync engine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eth_parser.models.transaction import TransactionRecord


class IChainDataSource(ABC):
    """Supplies the current chain height and per-block transaction lists.

    Implementations raise ChainDataError (or a subclass) on any network,
    timeout or parse failure; they never return partial blocks.
    """

    @abstractmethod
    async def get_current_height(self) -> int:
        """Return the most recent block number known to the chain."""
        ...

    @abstractmethod
    async def get_block_transactions(self, block_number: int) -> list[TransactionRecord]:
        """Return all transactions of block_number in block order ([] for an empty block)."""
        ...
