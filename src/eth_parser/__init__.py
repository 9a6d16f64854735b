"""Ethereum transaction parser: block sync engine, subscription store and query facade."""

from eth_parser.clients import AsyncHttpClient, EthRpcClient, IChainDataSource
from eth_parser.config import get_settings
from eth_parser.DI import Container
from eth_parser.persistence import InMemoryTransactionRepository, ITransactionRepository
from eth_parser.services import BlockSyncEngine, EthParser, TransactionDTO

__version__ = "0.1.0"
__all__ = [
    "AsyncHttpClient",
    "BlockSyncEngine",
    "Container",
    "EthParser",
    "EthRpcClient",
    "IChainDataSource",
    "InMemoryTransactionRepository",
    "ITransactionRepository",
    "TransactionDTO",
    "get_settings",
]
