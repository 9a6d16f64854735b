# -*- coding: utf-8 -*-
"""Unit tests for EthRpcClient."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from eth_parser.clients.rpc_client.rpc_client import EthRpcClient
from eth_parser.exceptions import ChainDataError, ChainHttpError, RpcResponseError


def _client(http: Any, settings: Any) -> EthRpcClient:
    return EthRpcClient(http_client=http, settings=settings)


def _http(*responses: Any) -> Any:
    """HTTP double whose post() returns (or raises) the given responses in order."""
    return SimpleNamespace(post=AsyncMock(side_effect=list(responses)))


def _tx(**overrides: Any) -> dict[str, Any]:
    tx: dict[str, Any] = {
        "blockHash": "0xblock",
        "blockNumber": "0x10",
        "from": "0x95222290dd7278aa3ddd389cc1e1d165cc4bafe5",
        "to": "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706",
        "gas": "0x5208",
        "gasPrice": "0x3b9aca00",
        "hash": "0xabc",
        "input": "0x",
        "nonce": "0x1",
        "transactionIndex": "0x0",
        "value": "0x1",
        "type": "0x2",
        "accessList": [{"address": "0xcontract", "storageKeys": ["0x01"]}],
        "chainId": "0x1",
        "v": "0x1",
        "r": "0xr",
        "s": "0xs",
    }
    tx.update(overrides)
    return tx


async def test_get_current_height_parses_hex_result(settings_factory: Callable[..., Any]) -> None:
    http = _http({"jsonrpc": "2.0", "id": 1, "result": "0x121eac0"})
    client = _client(http, settings_factory(rpc_url="https://rpc.example/"))

    height = await client.get_current_height()

    assert height == 19_000_000
    url = http.post.await_args.args[0]
    payload = http.post.await_args.kwargs["json"]
    assert url == "https://rpc.example"
    assert payload["method"] == "eth_blockNumber"
    assert payload["params"] == []
    assert payload["jsonrpc"] == "2.0"


async def test_request_ids_increase(settings_factory: Callable[..., Any]) -> None:
    http = _http(
        {"jsonrpc": "2.0", "id": 1, "result": "0x1"},
        {"jsonrpc": "2.0", "id": 2, "result": "0x2"},
    )
    client = _client(http, settings_factory())

    await client.get_current_height()
    await client.get_current_height()

    ids = [c.kwargs["json"]["id"] for c in http.post.await_args_list]
    assert ids == [1, 2]


async def test_get_current_height_rejects_non_hex_result(
    settings_factory: Callable[..., Any],
) -> None:
    client = _client(_http({"jsonrpc": "2.0", "id": 1, "result": "12345"}), settings_factory())

    with pytest.raises(RpcResponseError) as exc_info:
        await client.get_current_height()

    assert exc_info.value.rpc_method == "eth_blockNumber"


async def test_rpc_error_object_raises_with_code(settings_factory: Callable[..., Any]) -> None:
    client = _client(
        _http({"jsonrpc": "2.0", "id": 1, "error": {"code": -32005, "message": "limit exceeded"}}),
        settings_factory(),
    )

    with pytest.raises(RpcResponseError) as exc_info:
        await client.get_current_height()

    assert exc_info.value.rpc_error_code == -32005
    assert "limit exceeded" in str(exc_info.value)


async def test_non_dict_response_raises(settings_factory: Callable[..., Any]) -> None:
    client = _client(_http(["not", "an", "object"]), settings_factory())

    with pytest.raises(RpcResponseError):
        await client.get_current_height()


async def test_missing_result_raises(settings_factory: Callable[..., Any]) -> None:
    client = _client(_http({"jsonrpc": "2.0", "id": 1}), settings_factory())

    with pytest.raises(RpcResponseError):
        await client.get_current_height()


async def test_http_failure_propagates_as_chain_data_error(
    settings_factory: Callable[..., Any],
) -> None:
    client = _client(_http(ChainHttpError("POST failed", url="https://rpc.example")), settings_factory())

    with pytest.raises(ChainDataError):
        await client.get_current_height()


async def test_get_block_transactions_requests_full_objects(
    settings_factory: Callable[..., Any],
) -> None:
    http = _http({"jsonrpc": "2.0", "id": 1, "result": {"number": "0x10", "transactions": [_tx()]}})
    client = _client(http, settings_factory())

    records = await client.get_block_transactions(16)

    payload = http.post.await_args.kwargs["json"]
    assert payload["method"] == "eth_getBlockByNumber"
    assert payload["params"] == ["0x10", True]
    assert len(records) == 1
    record = records[0]
    assert record.hash == "0xabc"
    assert record.from_address == "0x95222290dd7278aa3ddd389cc1e1d165cc4bafe5"
    assert record.to_address == "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"
    assert record.gas_price == "0x3b9aca00"
    assert record.access_list[0].address == "0xcontract"
    assert record.access_list[0].storage_keys == ("0x01",)


async def test_get_block_transactions_keeps_block_order(
    settings_factory: Callable[..., Any],
) -> None:
    txs = [_tx(hash="0x1", transactionIndex="0x0"), _tx(hash="0x2", transactionIndex="0x1")]
    client = _client(
        _http({"jsonrpc": "2.0", "id": 1, "result": {"transactions": txs}}),
        settings_factory(),
    )

    records = await client.get_block_transactions(16)

    assert [r.hash for r in records] == ["0x1", "0x2"]


async def test_get_block_transactions_returns_empty_list_for_empty_block(
    settings_factory: Callable[..., Any],
) -> None:
    client = _client(
        _http({"jsonrpc": "2.0", "id": 1, "result": {"number": "0x10", "transactions": []}}),
        settings_factory(),
    )

    assert await client.get_block_transactions(16) == []


async def test_get_block_transactions_treats_null_block_as_failure(
    settings_factory: Callable[..., Any],
) -> None:
    client = _client(_http({"jsonrpc": "2.0", "id": 1, "result": None}), settings_factory())

    with pytest.raises(RpcResponseError):
        await client.get_block_transactions(99_999_999)


async def test_get_block_transactions_rejects_hash_only_entries(
    settings_factory: Callable[..., Any],
) -> None:
    client = _client(
        _http({"jsonrpc": "2.0", "id": 1, "result": {"transactions": ["0xhash1"]}}),
        settings_factory(),
    )

    with pytest.raises(RpcResponseError):
        await client.get_block_transactions(16)


async def test_get_block_transactions_rejects_transaction_without_hash(
    settings_factory: Callable[..., Any],
) -> None:
    tx = _tx()
    del tx["hash"]
    client = _client(
        _http({"jsonrpc": "2.0", "id": 1, "result": {"transactions": [tx]}}),
        settings_factory(),
    )

    with pytest.raises(RpcResponseError):
        await client.get_block_transactions(16)
