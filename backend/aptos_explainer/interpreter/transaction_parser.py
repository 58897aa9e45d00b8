"""Turn a raw Aptos transaction record into a TransactionExplanation."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Mapping

from aptos_explainer.interpreter.balances import parse_balance_changes
from aptos_explainer.interpreter.extractors import (
    determine_transaction_type,
    parse_account_changes,
    parse_function_calls,
    parse_token_transfers,
)
from aptos_explainer.interpreter.narrative import generate_educational_content, generate_summary
from aptos_explainer.models import TransactionExplanation
from aptos_explainer.utils.formatting import to_int
from aptos_explainer.utils.lookups import NATIVE_DECIMALS

LOGGER = logging.getLogger(__name__)


def _gas_fee(gas_used: int, gas_unit_price: int) -> float:
    """Fee in APT: gas units times octas per unit, over 10^8 octas per APT."""
    return float(Decimal(gas_used) * Decimal(gas_unit_price) / Decimal(10**NATIVE_DECIMALS))


def _section_size(value: Any) -> int:
    return len(value) if isinstance(value, list) else 0


def _timestamp_ms(value: Any) -> int | None:
    seconds = to_int(value, default=None)
    return seconds * 1000 if seconds is not None else None


def parse_aptos_transaction(raw: Mapping[str, Any]) -> TransactionExplanation:
    """Interpret a raw transaction.

    Absent ``payload``, ``events`` or ``changes`` sections produce empty
    results. Only a non-mapping input is rejected.
    """
    if not isinstance(raw, Mapping):
        raise TypeError(f"Expected a transaction record, got {type(raw).__name__}")

    success = bool(raw.get("success"))
    gas_used = to_int(raw.get("gas_used"))
    gas_unit_price = to_int(raw.get("gas_unit_price"))
    sender = raw.get("sender")
    tx_hash = raw.get("hash")

    LOGGER.debug(
        "Parsing Aptos transaction %s (success=%s, events=%d, changes=%d)",
        tx_hash,
        success,
        _section_size(raw.get("events")),
        _section_size(raw.get("changes")),
    )

    account_changes = parse_account_changes(raw)
    function_calls = parse_function_calls(raw)
    token_transfers = parse_token_transfers(raw)
    transaction_type = determine_transaction_type(function_calls)
    summary = generate_summary(transaction_type, function_calls, token_transfers)
    balance_changes = parse_balance_changes(raw)
    educational_content = generate_educational_content(
        transaction_type, function_calls, token_transfers, balance_changes
    )

    error = None
    if not success:
        error = json.dumps(raw.get("vm_status"), separators=(",", ":"), ensure_ascii=False)

    return TransactionExplanation(
        hash=str(tx_hash) if tx_hash is not None else None,
        success=success,
        summary=summary,
        timestamp=_timestamp_ms(raw.get("timestamp")),
        gas_used=gas_used,
        gas_unit_price=gas_unit_price,
        gas_fee=_gas_fee(gas_used, gas_unit_price),
        version=to_int(raw.get("version")),
        block_height=to_int(raw.get("block_height"), default=None),
        sender=str(sender) if sender is not None else None,
        account_changes=account_changes,
        function_calls=function_calls,
        token_transfers=token_transfers,
        transaction_type=transaction_type,
        error=error,
        balance_changes=balance_changes,
        educational_content=educational_content,
    )


__all__ = ["parse_aptos_transaction"]
