# -*- coding: utf-8 -*-
"""Unit tests for the EthParser query facade."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from eth_parser.models.transaction import TransactionRecord
from eth_parser.persistence.repositories.in_memory.transaction_repository import (
    InMemoryTransactionRepository,
)
from eth_parser.services.parser.eth_parser import EthParser
from eth_parser.services.parser.transaction_dto import TransactionDTO


def _parser(repo: InMemoryTransactionRepository) -> EthParser:
    return EthParser(repository=repo)


async def test_get_current_block_is_zero_before_first_sync(
    tx_repo: InMemoryTransactionRepository,
) -> None:
    assert await _parser(tx_repo).get_current_block() == 0


async def test_get_current_block_returns_watermark(tx_repo: InMemoryTransactionRepository) -> None:
    await tx_repo.set_watermark(19_000_000)

    assert await _parser(tx_repo).get_current_block() == 19_000_000


async def test_subscribe_always_returns_true_and_is_idempotent(
    tx_repo: InMemoryTransactionRepository,
    address: str,
) -> None:
    parser = _parser(tx_repo)

    assert await parser.subscribe(address) is True
    assert await parser.subscribe(address.lower()) is True

    assert await tx_repo.list_subscribed() == frozenset({address.lower()})
    assert await parser.get_transactions(address) == []


async def test_get_transactions_is_case_insensitive(
    tx_repo: InMemoryTransactionRepository,
    transaction_factory: Callable[..., TransactionRecord],
    address: str,
) -> None:
    parser = _parser(tx_repo)
    await parser.subscribe(address)
    await tx_repo.append_transaction(address, transaction_factory(to_address=address.lower()))

    upper = await parser.get_transactions(address)
    lower = await parser.get_transactions(address.lower())

    assert len(upper) == 1
    assert upper == lower


async def test_get_transactions_for_unknown_address_is_empty(
    tx_repo: InMemoryTransactionRepository,
    stranger_address: str,
) -> None:
    assert await _parser(tx_repo).get_transactions(stranger_address) == []


async def test_get_transactions_projects_records_in_order(
    tx_repo: InMemoryTransactionRepository,
    transaction_factory: Callable[..., TransactionRecord],
    address: str,
) -> None:
    parser = _parser(tx_repo)
    records = [transaction_factory(block_number=hex(b)) for b in (10, 11, 12)]
    for r in records:
        await tx_repo.append_transaction(address, r)

    result = await parser.get_transactions(address)

    assert all(isinstance(t, TransactionDTO) for t in result)
    assert [t.hash for t in result] == [r.hash for r in records]
    assert [t.block_number for t in result] == ["0xa", "0xb", "0xc"]


async def test_concurrent_subscribes_and_reads(
    tx_repo: InMemoryTransactionRepository,
) -> None:
    parser = _parser(tx_repo)
    addresses = [f"0x{i:040X}" for i in range(1, 21)]

    results = await asyncio.gather(
        *(parser.subscribe(a) for a in addresses),
        *(parser.get_transactions(a) for a in addresses),
    )

    assert results[: len(addresses)] == [True] * len(addresses)
    assert await tx_repo.list_subscribed() == frozenset(a.lower() for a in addresses)
