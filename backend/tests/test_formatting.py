from decimal import Decimal

import pytest

from aptos_explainer.models import TokenInfo
from aptos_explainer.utils.formatting import (
    calculate_usd_value,
    format_usd_value,
    scale_amount,
    to_decimal,
    to_int,
)
from aptos_explainer.utils.hashes import normalize_tx_hash
from aptos_explainer.utils.lookups import (
    NATIVE_COIN_TYPE,
    POPULAR_TOKENS,
    get_protocol_name,
    get_token_info,
    get_token_price,
    resolve_protocol,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.004, "< $0.01"),
        (0.0, "< $0.01"),
        (0.5, "$0.500"),
        (50, "$50.00"),
        (999.994, "$999.99"),
        (5000, "$5.00K"),
        (1234567, "$1234.57K"),
    ],
)
def test_usd_display_tiers(value, expected):
    assert format_usd_value(value) == expected


def test_calculate_usd_value_uses_price_table():
    assert calculate_usd_value(NATIVE_COIN_TYPE, 2) == "$30.00"
    assert calculate_usd_value("0xdead::coin::X", 1_000_000) == "< $0.01"


def test_unknown_token_fallback():
    assert get_token_info("0xdead::coin::X") == TokenInfo(name="Unknown Token", symbol="UNK", decimals=8)
    assert get_token_price("0xdead::coin::X") == 0.0


def test_protocol_lookup():
    assert get_protocol_name("0x1::coin") == "Aptos Coin"
    assert get_protocol_name("0xdead") == "Unknown Protocol"
    assert resolve_protocol("0x1::delegation_pool") == "Delegation Pool"
    assert resolve_protocol("0x1::code") == "Unknown Protocol"


def test_lookup_tables_are_read_only():
    with pytest.raises(TypeError):
        POPULAR_TOKENS["0xdead::coin::X"] = TokenInfo(name="X", symbol="X")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("100", Decimal(100)),
        (42, Decimal(42)),
        (" 7 ", Decimal(7)),
        ("1.5", Decimal("1.5")),
        ("abc", None),
        ("NaN", None),
        ("Infinity", None),
        (None, None),
        (True, None),
        ({"amount": 1}, None),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


def test_to_int_defaults():
    assert to_int("12") == 12
    assert to_int("x") == 0
    assert to_int(None, default=None) is None


def test_scale_amount():
    assert scale_amount(Decimal(150000000), 8) == pytest.approx(1.5)
    assert scale_amount(Decimal(1500000), 6) == pytest.approx(1.5)


def test_normalize_tx_hash():
    raw = "0X" + "AB" * 32
    assert normalize_tx_hash(raw) == "0x" + "ab" * 32
    assert normalize_tx_hash("  " + "cd" * 32 + " ") == "0x" + "cd" * 32


@pytest.mark.parametrize("value", [None, "", "0x1234", "0x" + "g" * 64, "0x" + "a" * 65])
def test_normalize_tx_hash_rejects_invalid(value):
    with pytest.raises(ValueError):
        normalize_tx_hash(value)
