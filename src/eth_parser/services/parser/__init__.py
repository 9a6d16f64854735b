"""Parser facade and public DTOs."""

from eth_parser.services.parser.eth_parser import EthParser
from eth_parser.services.parser.transaction_dto import TransactionDTO

__all__ = [
    "EthParser",
    "TransactionDTO",
]
