"""Block synchronization services."""

from eth_parser.services.block_sync.block_sync_engine import BlockSyncEngine, SyncPassResult

__all__ = [
    "BlockSyncEngine",
    "SyncPassResult",
]
