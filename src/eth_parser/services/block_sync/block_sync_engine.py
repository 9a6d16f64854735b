"""Block sync engine: walks new blocks, filters their transactions by subscription, advances the watermark.

One pass:
  1. Ask the chain for its height.
  2. Work out the block range from the watermark (first sync starts at the current
     height; there is no backfill).
  3. Snapshot the subscribed addresses once for the whole pass.
  4. Fetch blocks one by one in ascending order; append matching transactions,
     then move the watermark to that block. A failed fetch ends the pass, so the
     watermark never moves past a block that was not stored.

run() repeats passes forever, sleeping poll_seconds after a clean pass and
retry_seconds after a failed one.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from eth_parser.exceptions import ChainDataError
from eth_parser.models.transaction import TransactionRecord
from eth_parser.utils.validation import mask_address, normalize_address

if TYPE_CHECKING:
    from eth_parser.clients.chain_data_source import IChainDataSource
    from eth_parser.config import Settings
    from eth_parser.persistence.repositories.interfaces.transaction_repository import (
        ITransactionRepository,
    )


@dataclass(frozen=True)
class SyncPassResult:
    """Outcome of one sync pass."""

    success: bool
    chain_height: int | None = None
    """Height reported by the chain; None if discovery failed."""
    start_block: int | None = None
    """First block fetched in this pass; None if nothing was due."""
    blocks_processed: int = 0
    transactions_matched: int = 0
    """Number of append calls (a self-transfer to a subscribed address counts twice)."""
    failed_block: int | None = None
    watermark: int | None = None
    """Watermark after the pass; None if the pass crashed before reading it."""
    error: str | None = None


class BlockSyncEngine:
    """Polls the chain data source and ingests matching transactions into the repository."""

    def __init__(
        self,
        chain_source: IChainDataSource,
        repository: ITransactionRepository,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            chain_source: Chain height and block transactions (injected).
            repository: Subscription/transaction store shared with the query facade.
            settings: Application settings (uses settings.sync).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._chain = chain_source
        self._repo = repository
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._last_result: SyncPassResult | None = None

    @property
    def last_result(self) -> SyncPassResult | None:
        """Result of the most recent pass run by run(), if any."""
        return self._last_result

    async def run_pass(self) -> SyncPassResult:
        """Run one discover/process iteration (no sleep).

        Upstream failures are returned as a failed result; anything else propagates.
        """
        try:
            height = await self._chain.get_current_height()
        except ChainDataError as e:
            self._logger.warning(
                "block_sync_height_failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return SyncPassResult(
                success=False,
                watermark=await self._repo.get_watermark(),
                error=str(e),
            )

        watermark = await self._repo.get_watermark()
        if watermark == height:
            return SyncPassResult(success=True, chain_height=height, watermark=watermark)
        if height < watermark:
            # Load-balanced gateways can briefly answer from a node that lags behind.
            self._logger.debug(
                "block_sync_chain_behind_watermark",
                chain_height=height,
                watermark=watermark,
            )
            return SyncPassResult(success=True, chain_height=height, watermark=watermark)

        # Watermark 0 means never synced: start at the current head, skip history.
        start = height if watermark == 0 else watermark + 1
        subscribed = await self._repo.list_subscribed()

        blocks_processed = 0
        matched = 0
        for block_number in range(start, height + 1):
            try:
                records = await self._chain.get_block_transactions(block_number)
            except ChainDataError as e:
                self._logger.warning(
                    "block_sync_block_fetch_failed",
                    block_number=block_number,
                    chain_height=height,
                    watermark=watermark,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                return SyncPassResult(
                    success=False,
                    chain_height=height,
                    start_block=start,
                    blocks_processed=blocks_processed,
                    transactions_matched=matched,
                    failed_block=block_number,
                    watermark=watermark,
                    error=str(e),
                )
            matched += await self._ingest_block(block_number, records, subscribed)
            await self._repo.set_watermark(block_number)
            watermark = block_number
            blocks_processed += 1

        self._logger.info(
            "block_sync_pass_completed",
            chain_height=height,
            start_block=start,
            blocks_processed=blocks_processed,
            transactions_matched=matched,
            subscribed_count=len(subscribed),
        )
        return SyncPassResult(
            success=True,
            chain_height=height,
            start_block=start,
            blocks_processed=blocks_processed,
            transactions_matched=matched,
            watermark=watermark,
        )

    async def _ingest_block(
        self,
        block_number: int,
        records: Iterable[TransactionRecord],
        subscribed: frozenset[str],
    ) -> int:
        """Append each record under its sender and/or recipient if subscribed. Returns append count."""
        appended = 0
        if not subscribed:
            return appended
        for record in records:
            # Sender and recipient are checked independently: a self-transfer is stored twice.
            for role, address in (
                ("from", normalize_address(record.from_address)),
                ("to", normalize_address(record.to_address)),
            ):
                if address and address in subscribed:
                    await self._repo.append_transaction(address, record)
                    appended += 1
                    self._logger.debug(
                        "block_sync_transaction_matched",
                        block_number=block_number,
                        address_masked=mask_address(address),
                        role=role,
                        transaction_hash=record.hash,
                    )
        return appended

    def sleep_seconds_for(self, result: SyncPassResult) -> float:
        """Fast retry after a failed pass, steady poll interval otherwise."""
        sync = self._settings.sync
        return sync.poll_seconds if result.success else sync.retry_seconds

    async def run(self, shutdown_event: asyncio.Event | None = None) -> None:
        """Run passes until shutdown_event is set (forever if None) or the task is cancelled.

        A fault escaping a pass is logged and handled as a failed pass; it never
        stops the loop.
        """
        sync = self._settings.sync
        self._logger.info(
            "block_sync_started",
            poll_seconds=sync.poll_seconds,
            retry_seconds=sync.retry_seconds,
        )
        try:
            while shutdown_event is None or not shutdown_event.is_set():
                try:
                    result = await self.run_pass()
                except Exception as e:
                    self._logger.exception(
                        "block_sync_pass_crashed",
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                    result = SyncPassResult(success=False, error=str(e))
                self._last_result = result
                if await self._sleep(self.sleep_seconds_for(result), shutdown_event):
                    break
        except asyncio.CancelledError:
            self._logger.info("block_sync_stopped", stop_reason="cancelled")
            raise
        self._logger.info("block_sync_stopped", stop_reason="shutdown_event")

    async def _sleep(self, seconds: float, shutdown_event: asyncio.Event | None) -> bool:
        """Sleep for seconds; return True if shutdown_event was set meanwhile."""
        if shutdown_event is None:
            await asyncio.sleep(seconds)
            return False
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=seconds)
        except TimeoutError:
            return False
        return True
