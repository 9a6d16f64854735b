# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from eth_parser.clients.http import AsyncHttpClient
from eth_parser.clients.rpc_client import EthRpcClient
from eth_parser.config import get_settings
from eth_parser.persistence.repositories.in_memory import InMemoryTransactionRepository
from eth_parser.services.block_sync import BlockSyncEngine
from eth_parser.services.parser import EthParser
from eth_parser.services.watcher import TransactionWatcher


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP/RPC clients, the shared store, engine and facade.

    The repository is a Singleton provider: engine and parser receive the same instance.
    """

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    rpc_client = providers.Singleton(
        EthRpcClient,
        http_client=http_client,
        settings=config,
    )

    transaction_repository = providers.Singleton(InMemoryTransactionRepository)

    block_sync_engine = providers.Singleton(
        BlockSyncEngine,
        chain_source=rpc_client,
        repository=transaction_repository,
        settings=config,
    )

    eth_parser = providers.Singleton(
        EthParser,
        repository=transaction_repository,
    )

    transaction_watcher = providers.Singleton(
        TransactionWatcher,
        parser=eth_parser,
        settings=config,
    )
