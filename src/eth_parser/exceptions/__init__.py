"""Exceptions subpackage."""

from eth_parser.exceptions.exceptions import (
    ChainDataError,
    ChainHttpError,
    EthParserError,
    MissingRequiredConfigError,
    RpcResponseError,
)

__all__ = [
    "ChainDataError",
    "ChainHttpError",
    "EthParserError",
    "MissingRequiredConfigError",
    "RpcResponseError",
]
