"""Extract structured facts from the sections of a raw Aptos transaction."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from aptos_explainer.models import AccountChange, FunctionCall, TokenTransfer, TransactionType
from aptos_explainer.utils.formatting import scale_amount, to_decimal, to_int
from aptos_explainer.utils.lookups import get_token_info, resolve_protocol, token_type_for_event

LOGGER = logging.getLogger(__name__)

ACCOUNT_WRITE_TYPES = ("write_resource", "write_table_item")

LEGACY_WITHDRAW_MARKER = "::coin::CoinWithdrawn"
LEGACY_DEPOSIT_MARKER = "::coin::CoinDeposited"
FUNGIBLE_ASSET_MARKERS = ("::Transfer", "::Deposit")

MULTISIG_PAYLOAD = "multisig_payload"

FUNCTION_PHRASES: Dict[str, str] = {
    "transfer": "Transfer tokens via {protocol}",
    "swap": "Token swap on {protocol}",
    "stake": "Stake tokens via {protocol}",
    "unstake": "Unstake tokens via {protocol}",
    "mint": "Mint new tokens via {protocol}",
    "burn": "Burn tokens via {protocol}",
    "deposit": "Deposit liquidity to {protocol}",
    "withdraw": "Withdraw liquidity from {protocol}",
}


def _records(value: Any) -> List[Mapping[str, Any]]:
    """Return the mapping entries of an optional list section."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def iter_events(raw: Mapping[str, Any]) -> Iterator[Tuple[str, Mapping[str, Any]]]:
    """Yield ``(event_type, data)`` for each well-formed event in emission order."""
    for event in _records(raw.get("events")):
        event_type = event.get("type")
        if not isinstance(event_type, str):
            continue
        data = event.get("data")
        yield event_type, data if isinstance(data, Mapping) else {}


def is_legacy_coin_event(event_type: str) -> bool:
    return LEGACY_WITHDRAW_MARKER in event_type or LEGACY_DEPOSIT_MARKER in event_type


def is_fungible_asset_event(event_type: str) -> bool:
    return any(marker in event_type for marker in FUNGIBLE_ASSET_MARKERS)


def legacy_token_type(event_type: str) -> str:
    """Rebuild the coin type from the first three segments of the event type."""
    return "::".join(event_type.split("::")[:3])


def parse_account_changes(raw: Mapping[str, Any]) -> List[AccountChange]:
    """Describe every resource or table-item write in ``changes``."""
    changes: List[AccountChange] = []

    for change in _records(raw.get("changes")):
        if change.get("type") not in ACCOUNT_WRITE_TYPES:
            continue
        address = change.get("address") or "unknown"
        changes.append(
            AccountChange(
                account=str(address),
                change_type="modified",
                balance=0,
                sequence_number=to_int(change.get("sequence_number"), default=None),
                description=f"Account {address} was modified",
            )
        )

    return changes


def _entry_payloads(payload: Any) -> Iterable[Mapping[str, Any]]:
    """Yield the entry-function payloads carried by a transaction payload.

    A plain entry payload yields itself. A multisig payload yields the wrapped
    transaction payload. Script or batched payloads are not modeled, so at most
    one entry function is produced per transaction today.
    """
    if not isinstance(payload, Mapping):
        return
    if payload.get("type") == MULTISIG_PAYLOAD:
        inner = payload.get("transaction_payload")
        if isinstance(inner, Mapping):
            yield inner
        return
    yield payload


def describe_function(module: str, function: str) -> str:
    protocol = resolve_protocol(module)
    template = FUNCTION_PHRASES.get(function)
    if template is None:
        return f"{function} operation on {protocol}"
    return template.format(protocol=protocol)


def parse_function_calls(raw: Mapping[str, Any]) -> List[FunctionCall]:
    """Split the payload's ``address::module::function`` identifier into a call record."""
    calls: List[FunctionCall] = []

    for payload in _entry_payloads(raw.get("payload")):
        identifier = payload.get("function")
        if not identifier or not isinstance(identifier, str):
            continue

        segments = identifier.split("::")
        if len(segments) < 3:
            LOGGER.warning("Skipping malformed function identifier: %s", identifier)
            continue

        module = f"{segments[0]}::{segments[1]}"
        function = segments[2]
        arguments = payload.get("arguments")
        type_arguments = payload.get("type_arguments")

        calls.append(
            FunctionCall(
                module=module,
                function=function,
                arguments=list(arguments) if isinstance(arguments, list) else [],
                type_arguments=[str(arg) for arg in type_arguments] if isinstance(type_arguments, list) else [],
                description=describe_function(module, function),
                protocol=resolve_protocol(module),
            )
        )

    return calls


def determine_transaction_type(function_calls: List[FunctionCall]) -> TransactionType:
    """Classify the transaction; the first matching rule wins."""

    def any_call(predicate) -> bool:
        return any(predicate(call.module, call.function) for call in function_calls)

    if any_call(lambda module, fn: "swap" in fn or "liquidswap" in module or "pancake" in module):
        return TransactionType.SWAP
    if any_call(lambda module, fn: "transfer" in fn):
        return TransactionType.TRANSFER
    if any_call(lambda module, fn: "stake" in fn or "delegate" in fn):
        return TransactionType.STAKE
    if any_call(lambda module, fn: "token" in module or "mint" in fn):
        return TransactionType.NFT
    if any_call(lambda module, fn: "liquidity" in module or "deposit" in fn or "withdraw" in fn):
        return TransactionType.DEFI
    return TransactionType.UNKNOWN


def _build_transfer(event_type: str, data: Mapping[str, Any], token_type: str, sender_key: str) -> TokenTransfer | None:
    raw_amount = to_decimal(data.get("amount"))
    if raw_amount is None:
        LOGGER.warning("Skipping %s event with non-numeric amount: %r", event_type, data.get("amount"))
        return None

    token = get_token_info(token_type)
    return TokenTransfer(
        from_address=str(data.get(sender_key) or "unknown"),
        to_address=str(data.get("receiver") or "unknown"),
        amount=scale_amount(raw_amount, token.decimals),
        token_type=token_type,
        token_name=token.name,
        token_symbol=token.symbol,
        decimals=token.decimals,
        description=f"{token.symbol} transfer",
    )


def parse_token_transfers(raw: Mapping[str, Any]) -> List[TokenTransfer]:
    """Collect legacy coin and fungible-asset transfers from the event list."""
    transfers: List[TokenTransfer] = []

    for event_type, data in iter_events(raw):
        if is_legacy_coin_event(event_type):
            transfer = _build_transfer(event_type, data, legacy_token_type(event_type), "sender")
        elif is_fungible_asset_event(event_type):
            transfer = _build_transfer(event_type, data, token_type_for_event(event_type), "from")
        else:
            continue

        if transfer is not None:
            transfers.append(transfer)

    return transfers


__all__ = [
    "iter_events",
    "is_legacy_coin_event",
    "is_fungible_asset_event",
    "legacy_token_type",
    "parse_account_changes",
    "parse_function_calls",
    "determine_transaction_type",
    "parse_token_transfers",
]
