"""Ethereum JSON-RPC client."""

from eth_parser.clients.rpc_client.rpc_client import EthRpcClient
from eth_parser.clients.rpc_client.schema import (
    BlockSchema,
    RpcResponseSchema,
    TransactionSchema,
)

__all__ = [
    "BlockSchema",
    "EthRpcClient",
    "RpcResponseSchema",
    "TransactionSchema",
]
