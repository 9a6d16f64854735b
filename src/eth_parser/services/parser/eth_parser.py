"""Query facade: current block, subscribe, list transactions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from eth_parser.services.parser.transaction_dto import TransactionDTO
from eth_parser.utils.validation import mask_address, normalize_address

if TYPE_CHECKING:
    from eth_parser.persistence.repositories.interfaces.transaction_repository import (
        ITransactionRepository,
    )


class EthParser:
    """Public interface used by notification services.

    None of the methods raise on upstream (RPC) problems: an outage only shows as a
    stalled current block and no new transactions.
    """

    def __init__(
        self,
        repository: ITransactionRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            repository: Store shared with BlockSyncEngine (injected).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._repo = repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def get_current_block(self) -> int:
        """Return the last fully parsed block (0 before the first sync)."""
        return await self._repo.get_watermark()

    async def subscribe(self, address: str) -> bool:
        """Start observing address (case-insensitive, idempotent). Always returns True."""
        key = normalize_address(address)
        await self._repo.subscribe(key)
        self._logger.info("parser_subscribed", address_masked=mask_address(key))
        return True

    async def get_transactions(self, address: str) -> list[TransactionDTO]:
        """Return inbound and outbound transactions of address seen since it was subscribed.

        Returns [] for an address that was never subscribed.
        """
        records = await self._repo.get_transactions(normalize_address(address))
        return [TransactionDTO.from_record(r) for r in records]
