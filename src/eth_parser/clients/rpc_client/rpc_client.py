"""Ethereum JSON-RPC client: chain height and block transactions for the sync engine."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog

from eth_parser.clients.chain_data_source import IChainDataSource
from eth_parser.clients.rpc_client.schema import BlockSchema
from eth_parser.exceptions import RpcResponseError
from eth_parser.models.transaction import TransactionRecord
from eth_parser.utils.hex_quantity import parse_hex_quantity, to_hex_quantity

if TYPE_CHECKING:
    from eth_parser.clients.http import AsyncHttpClient
    from eth_parser.config import Settings


class EthRpcClient(IChainDataSource):
    """Client for Ethereum JSON-RPC (eth_blockNumber, eth_getBlockByNumber)."""

    def __init__(
        self,
        http_client: AsyncHttpClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the RPC client.

        Args:
            http_client: HTTP client for POST requests (JSON-RPC).
            settings: Configuration (uses settings.api.rpc_url).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._ids = itertools.count(1)

    def _rpc_url(self) -> str:
        return self._settings.api.rpc_url.rstrip("/")

    async def call(self, method: str, params: list[Any]) -> Any:
        """Perform one JSON-RPC call and return its "result" member.

        Args:
            method: RPC method name (e.g. "eth_blockNumber").
            params: Positional params.

        Returns:
            The raw result (may be None, e.g. for an unknown block).

        Raises:
            ChainHttpError: If the HTTP request fails after retries.
            RpcResponseError: If the response is not a JSON-RPC object or carries an error.
        """
        url = self._rpc_url()
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        response = await self._http.post(url, json=payload)
        if not isinstance(response, dict):
            raise RpcResponseError(
                f"Unexpected RPC response type: {type(response).__name__}",
                url=url,
                rpc_method=method,
            )
        resp_dict = cast(dict[str, Any], response)
        if "error" in resp_dict and resp_dict["error"] is not None:
            err = resp_dict["error"]
            code: int | None = None
            if isinstance(err, dict):
                err_d = cast(dict[str, Any], err)
                msg = str(err_d.get("message", err_d))
                raw_code = err_d.get("code")
                code = raw_code if isinstance(raw_code, int) else None
            else:
                msg = str(err)
            raise RpcResponseError(
                f"RPC error in {method}: {msg}",
                url=url,
                rpc_method=method,
                rpc_error_code=code,
            )
        if "result" not in resp_dict:
            raise RpcResponseError(
                f"RPC response for {method} has no result",
                url=url,
                rpc_method=method,
            )
        return resp_dict["result"]

    async def get_current_height(self) -> int:
        """Return the latest block number (eth_blockNumber).

        Raises:
            ChainDataError: On transport failure or a non-hex result.
        """
        raw = await self.call("eth_blockNumber", [])
        try:
            return parse_hex_quantity(raw)
        except ValueError as e:
            raise RpcResponseError(
                f"Failed to parse eth_blockNumber result: {raw!r}",
                url=self._rpc_url(),
                rpc_method="eth_blockNumber",
            ) from e

    async def get_block_transactions(self, block_number: int) -> list[TransactionRecord]:
        """Return the full transaction objects of a block (eth_getBlockByNumber, true).

        A null result (block not yet available on this node) is a failure, not an
        empty block, so the caller retries instead of skipping it.

        Raises:
            ChainDataError: On transport failure or a malformed block.
        """
        block_hex = to_hex_quantity(block_number)
        self._logger.debug(
            "rpc_get_block",
            block_number=block_number,
            block_hex=block_hex,
        )
        raw = await self.call("eth_getBlockByNumber", [block_hex, True])
        if not isinstance(raw, dict):
            raise RpcResponseError(
                f"Block {block_number} not available (result={raw!r})",
                url=self._rpc_url(),
                rpc_method="eth_getBlockByNumber",
            )
        block = cast(BlockSchema, raw)
        transactions = block.get("transactions") or []
        if not isinstance(transactions, list):
            raise RpcResponseError(
                f"Block {block_number} has malformed transactions field",
                url=self._rpc_url(),
                rpc_method="eth_getBlockByNumber",
            )
        records: list[TransactionRecord] = []
        for tx in transactions:
            if not isinstance(tx, dict):
                # Hash-only entries mean the node ignored the full-objects flag.
                raise RpcResponseError(
                    f"Block {block_number} returned non-object transaction entries",
                    url=self._rpc_url(),
                    rpc_method="eth_getBlockByNumber",
                )
            try:
                records.append(TransactionRecord.from_response(cast(dict[str, Any], tx)))
            except ValueError as e:
                raise RpcResponseError(
                    f"Block {block_number} contains an invalid transaction: {e}",
                    url=self._rpc_url(),
                    rpc_method="eth_getBlockByNumber",
                ) from e
        return records
