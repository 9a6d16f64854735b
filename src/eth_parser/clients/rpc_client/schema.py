"""Schema for Ethereum JSON-RPC responses (eth_blockNumber, eth_getBlockByNumber)."""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict


class RpcErrorSchema(TypedDict):
    """JSON-RPC error object."""

    code: int
    message: str
    data: NotRequired[Any]


class RpcResponseSchema(TypedDict):
    """JSON-RPC 2.0 response envelope."""

    jsonrpc: str
    id: int
    result: NotRequired[Any]
    error: NotRequired[RpcErrorSchema]


class AccessListItemSchema(TypedDict):
    """EIP-2930 access list item."""

    address: str
    storageKeys: list[str]


class TransactionSchema(TypedDict, total=False):
    """Transaction object of eth_getBlockByNumber(block, true)."""

    blockHash: str
    blockNumber: str
    # "from" is a keyword; read it with tx.get("from")
    to: str | None
    gas: str
    gasPrice: str
    maxPriorityFeePerGas: str
    maxFeePerGas: str
    maxFeePerBlobGas: str
    hash: str
    input: str
    nonce: str
    transactionIndex: str
    value: str
    type: str
    accessList: list[AccessListItemSchema]
    chainId: str
    v: str
    r: str
    s: str
    blobVersionedHashes: list[str]


class BlockSchema(TypedDict, total=False):
    """Block object (only the fields the client reads)."""

    number: str
    hash: str
    transactions: list[TransactionSchema]
