# -*- coding: utf-8 -*-
"""Utility modules."""

from eth_parser.utils.hex_quantity import parse_hex_quantity, to_hex_quantity
from eth_parser.utils.rw_lock import AsyncReadWriteLock
from eth_parser.utils.validation import (
    is_hex_address,
    mask_address,
    normalize_address,
)

__all__ = [
    "AsyncReadWriteLock",
    "is_hex_address",
    "mask_address",
    "normalize_address",
    "parse_hex_quantity",
    "to_hex_quantity",
]
