"""Net per-account balance deltas across the coin events of one transaction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from aptos_explainer.interpreter.extractors import (
    LEGACY_DEPOSIT_MARKER,
    LEGACY_WITHDRAW_MARKER,
    is_fungible_asset_event,
    iter_events,
    legacy_token_type,
)
from aptos_explainer.models import BalanceChange
from aptos_explainer.utils.formatting import calculate_usd_value, scale_amount, to_decimal
from aptos_explainer.utils.lookups import NATIVE_DECIMALS, token_type_for_event

LOGGER = logging.getLogger(__name__)


@dataclass
class _Ledger:
    """Running totals for one account: ``pre`` sums debits, ``post`` sums credits."""

    token_type: str
    pre: Decimal = Decimal(0)
    post: Decimal = Decimal(0)


class _BalanceBook:
    def __init__(self) -> None:
        self._ledgers: Dict[str, _Ledger] = {}

    def _ledger(self, account: str, token_type: str) -> _Ledger:
        # The first event touching an account fixes its token type.
        if account not in self._ledgers:
            self._ledgers[account] = _Ledger(token_type=token_type)
        return self._ledgers[account]

    def debit(self, account: str, token_type: str, amount: Decimal) -> None:
        self._ledger(account, token_type).pre += amount

    def credit(self, account: str, token_type: str, amount: Decimal) -> None:
        self._ledger(account, token_type).post += amount

    def changes(self) -> List[BalanceChange]:
        results: List[BalanceChange] = []
        for account, ledger in self._ledgers.items():
            delta = ledger.post - ledger.pre
            if delta == 0:
                continue
            change = scale_amount(delta, NATIVE_DECIMALS)
            results.append(
                BalanceChange(
                    account=account,
                    pre_balance=scale_amount(ledger.pre, NATIVE_DECIMALS),
                    post_balance=scale_amount(ledger.post, NATIVE_DECIMALS),
                    change=change,
                    change_type="increase" if change > 0 else "decrease",
                    usd_value=calculate_usd_value(ledger.token_type, abs(change)),
                    token_type=ledger.token_type,
                )
            )
        return results


def _amount(event_type: str, data: Mapping[str, Any]) -> Optional[Decimal]:
    amount = to_decimal(data.get("amount"))
    if amount is None:
        LOGGER.warning("Ignoring %s event with non-numeric amount: %r", event_type, data.get("amount"))
    return amount


def parse_balance_changes(raw: Mapping[str, Any]) -> List[BalanceChange]:
    """Return at most one net balance change per account, in first-seen order.

    Debits and credits are accumulated independently, so repeated withdrawals
    from the same account add up. Amounts are kept in minor units until the end
    and scaled with the native 8-decimal divisor. Accounts whose credits equal
    their debits are omitted.
    """
    book = _BalanceBook()

    for event_type, data in iter_events(raw):
        if LEGACY_WITHDRAW_MARKER in event_type:
            amount = _amount(event_type, data)
            if amount is not None:
                book.debit(str(data.get("sender") or "unknown"), legacy_token_type(event_type), amount)
        elif LEGACY_DEPOSIT_MARKER in event_type:
            amount = _amount(event_type, data)
            if amount is not None:
                book.credit(str(data.get("receiver") or "unknown"), legacy_token_type(event_type), amount)
        elif is_fungible_asset_event(event_type):
            amount = _amount(event_type, data)
            if amount is None:
                continue
            token_type = token_type_for_event(event_type)
            if data.get("from"):
                book.debit(str(data["from"]), token_type, amount)
            if data.get("receiver"):
                book.credit(str(data["receiver"]), token_type, amount)

    return book.changes()


__all__ = ["parse_balance_changes"]
