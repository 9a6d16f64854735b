# -*- coding: utf-8 -*-
"""TransactionRecord: internal model of one transaction as returned by eth_getBlockByNumber.

Values are kept as the hex strings the node returns (quantities are not decoded) so the
record is a faithful copy of the upstream object. Records are immutable once built.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class AccessListEntry:
    """One EIP-2930 access list item."""

    address: str
    storage_keys: tuple[str, ...] = ()

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> AccessListEntry:
        keys = response.get("storageKeys") or []
        return cls(
            address=str(response.get("address") or ""),
            storage_keys=tuple(str(k) for k in keys),
        )


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """Full transaction object (JSON-RPC wire shape, snake_case).

    from_address/to_address carry the RPC "from"/"to" fields; to_address is None
    for contract creation.
    """

    hash: str
    from_address: str | None = None
    to_address: str | None = None
    block_hash: str | None = None
    block_number: str | None = None
    gas: str | None = None
    gas_price: str | None = None
    max_priority_fee_per_gas: str | None = None
    max_fee_per_gas: str | None = None
    max_fee_per_blob_gas: str | None = None
    input: str | None = None
    nonce: str | None = None
    transaction_index: str | None = None
    value: str | None = None
    type: str | None = None
    access_list: tuple[AccessListEntry, ...] = field(default_factory=tuple)
    chain_id: str | None = None
    v: str | None = None
    r: str | None = None
    s: str | None = None
    blob_versioned_hashes: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Snake_case dict (nested access list entries become dicts)."""
        return asdict(self)

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> TransactionRecord:
        """Build from a raw transaction object (camelCase) of eth_getBlockByNumber(..., true).

        Raises:
            ValueError: If the object has no hash.
        """
        tx_hash = response.get("hash")
        if not isinstance(tx_hash, str) or not tx_hash:
            raise ValueError("transaction object has no hash")
        access_list = response.get("accessList") or []
        blob_hashes = response.get("blobVersionedHashes") or []
        return cls(
            hash=tx_hash,
            from_address=response.get("from"),
            to_address=response.get("to"),
            block_hash=response.get("blockHash"),
            block_number=response.get("blockNumber"),
            gas=response.get("gas"),
            gas_price=response.get("gasPrice"),
            max_priority_fee_per_gas=response.get("maxPriorityFeePerGas"),
            max_fee_per_gas=response.get("maxFeePerGas"),
            max_fee_per_blob_gas=response.get("maxFeePerBlobGas"),
            input=response.get("input"),
            nonce=response.get("nonce"),
            transaction_index=response.get("transactionIndex"),
            value=response.get("value"),
            type=response.get("type"),
            access_list=tuple(
                AccessListEntry.from_response(entry)
                for entry in access_list
                if isinstance(entry, dict)
            ),
            chain_id=response.get("chainId"),
            v=response.get("v"),
            r=response.get("r"),
            s=response.get("s"),
            blob_versioned_hashes=tuple(str(h) for h in blob_hashes),
        )
