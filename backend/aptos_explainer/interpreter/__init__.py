"""Pure interpretation pipeline for raw Aptos transactions."""

from .transaction_parser import parse_aptos_transaction

__all__ = ["parse_aptos_transaction"]
