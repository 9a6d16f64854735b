"""Custom exceptions for the Ethereum gateway and parser."""

from __future__ import annotations


class EthParserError(Exception):
    """Base exception for eth-parser errors."""

    pass


class MissingRequiredConfigError(EthParserError):
    """Raised when a required configuration value is missing."""

    pass


class ChainDataError(EthParserError):
    """Raised when the chain data source cannot deliver a height or a block."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class ChainHttpError(ChainDataError):
    """Raised when the HTTP call to the RPC endpoint fails after retries (network, timeout, 5xx)."""


class RpcResponseError(ChainDataError):
    """Raised when the RPC response is malformed or carries a JSON-RPC error object."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        rpc_method: str | None = None,
        rpc_error_code: int | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.rpc_method = rpc_method
        self.rpc_error_code = rpc_error_code
