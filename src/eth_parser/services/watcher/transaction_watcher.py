"""Transaction watcher: polls the parser for subscribed addresses and logs new transactions."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from eth_parser.services.parser.transaction_dto import TransactionDTO
from eth_parser.utils.validation import is_hex_address, mask_address, normalize_address

if TYPE_CHECKING:
    from eth_parser.config import Settings
    from eth_parser.services.parser.eth_parser import EthParser


class TransactionWatcher:
    """Reports transactions that appeared since the previous poll, per address.

    This is how a notification service is expected to use the parser: poll
    get_transactions() and diff against the length seen last time (logs only grow).
    """

    def __init__(
        self,
        parser: EthParser,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the watcher.

        Args:
            parser: Query facade (injected).
            settings: Application settings (uses settings.watcher).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._parser = parser
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._seen_counts: dict[str, int] = {}

    async def check_once(self, address: str) -> list[TransactionDTO]:
        """Return transactions of address added since the previous check (all on first check)."""
        key = normalize_address(address)
        transactions = await self._parser.get_transactions(key)
        previous = self._seen_counts.get(key, 0)
        self._seen_counts[key] = len(transactions)
        new = transactions[previous:]
        for index, tx in enumerate(new, start=previous + 1):
            self._logger.info(
                "watcher_new_transaction",
                address_masked=mask_address(key),
                transaction_number=index,
                transaction_hash=tx.hash,
                transaction_from=tx.from_address,
                transaction_to=tx.to_address,
                transaction_value=tx.value,
                transaction_gas_price=tx.gas_price,
            )
        return new

    async def watch(
        self,
        addresses: list[str],
        shutdown_event: asyncio.Event,
        *,
        poll_seconds: float | None = None,
    ) -> None:
        """Subscribe every address, then check them every poll_seconds until shutdown_event is set.

        Args:
            addresses: 0x addresses (42 chars) to watch.
            shutdown_event: When set, return after the current check.
            poll_seconds: Polling interval; default from settings.watcher.poll_seconds.
        """
        for address in addresses:
            if not is_hex_address(address):
                raise ValueError(f"not a valid 0x address (42 chars): {address!r}")

        poll_seconds = poll_seconds if poll_seconds is not None else self._settings.watcher.poll_seconds
        if poll_seconds <= 0:
            poll_seconds = 1.0

        for address in addresses:
            await self._parser.subscribe(address)
            self._seen_counts.setdefault(normalize_address(address), 0)

        self._logger.info(
            "watcher_started",
            watcher_addresses_count=len(addresses),
            watcher_poll_seconds=poll_seconds,
        )
        while not shutdown_event.is_set():
            for address in addresses:
                await self.check_once(address)
            try:
                await asyncio.wait_for(shutdown_event.wait(), timeout=poll_seconds)
            except TimeoutError:
                continue
        self._logger.info("watcher_stopped", current_block=await self._parser.get_current_block())
