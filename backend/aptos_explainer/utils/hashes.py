"""Helpers for validating and normalizing Aptos transaction hashes."""

from __future__ import annotations

import re

HASH_PATTERN = re.compile(r"^0x[a-f0-9]{64}$")


def normalize_tx_hash(value: str) -> str:
    """Validate a transaction hash and normalize it to 0x-prefixed lowercase hex."""
    if value is None:
        raise ValueError("Transaction hash cannot be null")
    tx_hash = value.strip().lower()
    if not tx_hash.startswith("0x"):
        tx_hash = f"0x{tx_hash}"
    if not HASH_PATTERN.fullmatch(tx_hash):
        raise ValueError("Invalid transaction hash format")
    return tx_hash


__all__ = ["normalize_tx_hash"]
