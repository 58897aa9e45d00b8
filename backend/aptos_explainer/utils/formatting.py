"""Numeric coercion and USD display helpers."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from aptos_explainer.utils.lookups import get_token_price


def to_decimal(value: Any) -> Optional[Decimal]:
    """Parse an on-chain numeric field (usually a u64 string) into a Decimal.

    Returns ``None`` when the value is missing, boolean, or not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def to_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    number = to_decimal(value)
    if number is None:
        return default
    return int(number)


def scale_amount(raw_amount: Decimal, decimals: int) -> float:
    """Convert minor units to whole token units."""
    return float(raw_amount / (Decimal(10) ** decimals))


def format_usd_value(value: float) -> str:
    """Render a USD amount using the display precision tiers."""
    if value < 0.01:
        return "< $0.01"
    if value < 1:
        return f"${value:.3f}"
    if value < 1000:
        return f"${value:.2f}"
    return f"${value / 1000:.2f}K"


def calculate_usd_amount(token_type: str, amount: float) -> float:
    return amount * get_token_price(token_type)


def calculate_usd_value(token_type: str, amount: float) -> str:
    """Price ``amount`` of ``token_type`` and format it for display."""
    return format_usd_value(calculate_usd_amount(token_type, amount))


__all__ = [
    "to_decimal",
    "to_int",
    "scale_amount",
    "format_usd_value",
    "calculate_usd_amount",
    "calculate_usd_value",
]
