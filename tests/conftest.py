# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit and integration tests."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from eth_parser.models.transaction import TransactionRecord
from eth_parser.persistence.repositories.in_memory.transaction_repository import (
    InMemoryTransactionRepository,
)


@pytest.fixture
def address() -> str:
    """Default subscribed address (checksummed case, as users paste it)."""
    return "0x95222290DD7278Aa3Ddd389Cc1E1d165CC4BAfe5"


@pytest.fixture
def other_address() -> str:
    """A second address, lowercase."""
    return "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"


@pytest.fixture
def stranger_address() -> str:
    """An address nobody subscribes to."""
    return "0x00000000000000000000000000000000deadbeef"


@pytest.fixture
def transaction_factory() -> Callable[..., TransactionRecord]:
    """Build TransactionRecord with unique hashes and easy overrides."""
    counter = iter(range(1, 1_000_000))

    def _build(**overrides: Any) -> TransactionRecord:
        n = next(counter)
        fields: dict[str, Any] = {
            "hash": f"0x{n:064x}",
            "from_address": None,
            "to_address": None,
            "block_number": "0x64",
            "value": "0xde0b6b3a7640000",
            "gas": "0x5208",
            "gas_price": "0x3b9aca00",
            "nonce": hex(n),
            "transaction_index": "0x0",
            "type": "0x2",
            "chain_id": "0x1",
        }
        fields.update(overrides)
        return TransactionRecord(**fields)

    return _build


@pytest.fixture
def tx_repo() -> InMemoryTransactionRepository:
    """Fresh in-memory transaction repository per test."""
    return InMemoryTransactionRepository()


@pytest.fixture
def settings_factory() -> Callable[..., Any]:
    """Minimal settings object with the sections services read."""

    def _build(
        *,
        poll_seconds: float = 0.05,
        retry_seconds: float = 0.01,
        watcher_poll_seconds: float = 0.01,
        rpc_url: str = "https://rpc.example/",
        timeout_seconds: float = 2.0,
        max_retries: int = 1,
    ) -> Any:
        return SimpleNamespace(
            sync=SimpleNamespace(poll_seconds=poll_seconds, retry_seconds=retry_seconds),
            watcher=SimpleNamespace(poll_seconds=watcher_poll_seconds),
            api=SimpleNamespace(
                rpc_url=rpc_url,
                timeout_seconds=timeout_seconds,
                max_retries=max_retries,
            ),
        )

    return _build
