# -*- coding: utf-8 -*-
"""Application services."""

from eth_parser.services.block_sync import BlockSyncEngine, SyncPassResult
from eth_parser.services.parser import EthParser, TransactionDTO
from eth_parser.services.watcher import TransactionWatcher

__all__ = [
    "BlockSyncEngine",
    "EthParser",
    "SyncPassResult",
    "TransactionDTO",
    "TransactionWatcher",
]
