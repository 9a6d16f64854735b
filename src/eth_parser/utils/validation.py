"""Validation and normalization helpers for addresses."""

from __future__ import annotations

from typing import Any


def normalize_address(addr: str | None) -> str:
    """Return the address key used for lookups: stripped and lowercased.

    Addresses are case-insensitive (EIP-55 checksums only change letter case),
    so "0xABC..." and "0xabc..." map to the same key. None becomes "".
    """
    return (addr or "").strip().lower()


def is_hex_address(addr: Any) -> bool:
    """Return True if addr is a valid 0x address (42 chars)."""
    if not isinstance(addr, str):
        return False
    s = addr.strip()
    if len(s) != 42:
        return False
    if not s.startswith("0x"):
        return False
    try:
        int(s[2:], 16)
        return True
    except ValueError:
        return False


def mask_address(addr: str | None) -> str:
    """Return a masked address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"
