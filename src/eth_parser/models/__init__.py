# -*- coding: utf-8 -*-
"""Domain models."""

from eth_parser.models.transaction import AccessListEntry, TransactionRecord

__all__ = [
    "AccessListEntry",
    "TransactionRecord",
]
