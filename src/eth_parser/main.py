# -*- coding: utf-8 -*-
"""
Entry point for the Ethereum transaction parser.

Orchestrates: logging, settings, container, block sync engine (background task),
transaction watcher for WATCHER__ADDRESSES, shutdown (SIGINT or CancelledError).

Run with: python -m eth_parser.main

Notebook usage:
    from eth_parser.main import run
    await run()  # Interrupt kernel to stop; system will shut down on CancelledError.
"""
from __future__ import annotations

import asyncio
import signal
import structlog
from typing import Any

from eth_parser.DI import Container
from eth_parser.config import get_settings
from eth_parser.exceptions import MissingRequiredConfigError
from eth_parser.logging.config import configure_logging
from eth_parser.utils import mask_address


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


async def _cancel(task: asyncio.Task[Any]) -> None:
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    addresses = settings.watcher.addresses
    if not addresses:
        logger.error(
            "main_missing_addresses",
            message="WATCHER__ADDRESSES is not set",
        )
        raise MissingRequiredConfigError("WATCHER__ADDRESSES")

    container = Container()
    http_client = container.http_client()
    engine = container.block_sync_engine()
    watcher = container.transaction_watcher()
    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)

    logger.info(
        "main_started",
        rpc_url=settings.api.rpc_url,
        addresses=[mask_address(a) for a in addresses],
        sync_poll_seconds=settings.sync.poll_seconds,
        watcher_poll_seconds=settings.watcher.poll_seconds,
    )

    sync_task = asyncio.create_task(engine.run(shutdown_event))
    try:
        await watcher.watch(addresses, shutdown_event)
    except asyncio.CancelledError:
        logger.info("main_shutdown_cancelled")
        raise
    finally:
        await _cancel(sync_task)
        await http_client.aclose()
        logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
