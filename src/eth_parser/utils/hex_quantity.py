"""Helpers for JSON-RPC hex-encoded quantities (e.g. "0x1b4")."""

from __future__ import annotations

from typing import Any


def to_hex_quantity(value: int) -> str:
    """Encode a non-negative int as a JSON-RPC quantity ("0x0", "0x1b4")."""
    if value < 0:
        raise ValueError(f"quantity must be non-negative: {value}")
    return hex(value)


def parse_hex_quantity(raw: Any) -> int:
    """Decode a JSON-RPC quantity string into an int.

    Raises:
        ValueError: If raw is not a "0x"-prefixed hex string.
    """
    if not isinstance(raw, str) or not raw.startswith("0x") or len(raw) < 3:
        raise ValueError(f"invalid hex quantity: {raw!r}")
    return int(raw[2:], 16)
