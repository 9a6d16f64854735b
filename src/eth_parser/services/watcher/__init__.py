"""Transaction watcher service."""

from eth_parser.services.watcher.transaction_watcher import TransactionWatcher

__all__ = [
    "TransactionWatcher",
]
