"""HTTP and chain data clients."""

from eth_parser.clients.chain_data_source import IChainDataSource
from eth_parser.clients.http import AsyncHttpClient
from eth_parser.clients.rpc_client import EthRpcClient

__all__ = [
    "AsyncHttpClient",
    "EthRpcClient",
    "IChainDataSource",
]
