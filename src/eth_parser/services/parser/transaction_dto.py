"""Public transaction DTO returned by the parser facade.

A reduced projection of TransactionRecord: no access list, no signature (v, r, s)
and no fee-market or blob fields. Internal storage can change without changing
what callers see.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from eth_parser.models.transaction import TransactionRecord

# snake_case field -> JSON-RPC camelCase name
_JSON_NAMES: dict[str, str] = {
    "block_hash": "blockHash",
    "block_number": "blockNumber",
    "from_address": "from",
    "gas": "gas",
    "gas_price": "gasPrice",
    "hash": "hash",
    "input": "input",
    "nonce": "nonce",
    "to_address": "to",
    "transaction_index": "transactionIndex",
    "value": "value",
    "type": "type",
    "chain_id": "chainId",
}


@dataclass(frozen=True, slots=True)
class TransactionDTO:
    """Transaction as exposed by EthParser.get_transactions()."""

    hash: str
    block_hash: str | None = None
    block_number: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    gas: str | None = None
    gas_price: str | None = None
    input: str | None = None
    nonce: str | None = None
    transaction_index: str | None = None
    value: str | None = None
    type: str | None = None
    chain_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Snake_case dict."""
        return asdict(self)

    def to_json_dict(self) -> dict[str, Any]:
        """Dict keyed by the JSON-RPC field names ("from", "gasPrice", ...)."""
        return {_JSON_NAMES[k]: v for k, v in asdict(self).items()}

    @classmethod
    def from_record(cls, record: TransactionRecord) -> TransactionDTO:
        """Project an internal record onto the public fields."""
        return cls(
            hash=record.hash,
            block_hash=record.block_hash,
            block_number=record.block_number,
            from_address=record.from_address,
            to_address=record.to_address,
            gas=record.gas,
            gas_price=record.gas_price,
            input=record.input,
            nonce=record.nonce,
            transaction_index=record.transaction_index,
            value=record.value,
            type=record.type,
            chain_id=record.chain_id,
        )
