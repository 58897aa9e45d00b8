"""Static protocol, token and price tables used to annotate transactions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from aptos_explainer.models import TokenInfo

NATIVE_COIN_TYPE = "0x1::aptos_coin::AptosCoin"
NATIVE_DECIMALS = 8

UNKNOWN_PROTOCOL = "Unknown Protocol"
UNKNOWN_TOKEN = TokenInfo(name="Unknown Token", symbol="UNK", decimals=NATIVE_DECIMALS)

LIQUIDSWAP = "0x190d44266241744264b964a37b8f09863167a12d3e70cda39376cfb4e3561e12"
ARIES_MARKETS = "0x48271d39d0b05bd6efca2278f22277d6fcc375504f9839fd73f74ace240861af"
PANCAKESWAP = "0x881ac202b1f1e6ad4efcff7a1d0579411533f2502417a19211cfc49751ddb5f4"
RKGEN = "0xebebfeea655b30ae5d63e932dda7755b53dad71a32bbe7a8ec616a907f491611"

USDC_COIN_TYPE = "0x5e156f1207d0ebfa19a9eeff00d62a282278fb8719f4fab3a586a0a2c0fffbea::coin::T"
USDT_COIN_TYPE = "0x6f986d146e4a90b828d8c12c14b6f4e003fdff11a8eec6ce2c7e0b3a6add9f96::coin::T"
CAKE_COIN_TYPE = f"{PANCAKESWAP}::pancake_coin::PancakeCoin"
LIQUIDSWAP_LP_TYPE = f"{LIQUIDSWAP}::liquidity_pool::LiquidityPool"
RKGEN_TOKEN_TYPE = "rKGEN Token"

PROTOCOL_MAPPINGS: Mapping[str, str] = MappingProxyType({
    # DEXs
    "0x1::coin": "Aptos Coin",
    LIQUIDSWAP: "Liquidswap",
    ARIES_MARKETS: "Aries Markets",
    PANCAKESWAP: "PancakeSwap",
    f"{LIQUIDSWAP}::liquidity_pool": "Liquidswap Pool",
    # Framework
    "0x1::aptos_account": "Aptos Account",
    "0x1::aptos_coin": "Aptos Coin",
    # NFTs
    "0x3::token": "Aptos Token",
    "0x4::collection": "Aptos Collection",
    # Staking
    "0x1::delegation_pool": "Delegation Pool",
    "0x1::stake": "Stake",
    # Custom tokens
    "rKGEN": "rKGEN Token",
    RKGEN: "rKGEN Protocol",
})

POPULAR_TOKENS: Mapping[str, TokenInfo] = MappingProxyType({
    NATIVE_COIN_TYPE: TokenInfo(name="Aptos", symbol="APT", decimals=8),
    USDC_COIN_TYPE: TokenInfo(name="USD Coin", symbol="USDC", decimals=6),
    USDT_COIN_TYPE: TokenInfo(name="Tether USD", symbol="USDT", decimals=6),
    CAKE_COIN_TYPE: TokenInfo(name="PancakeSwap Token", symbol="CAKE", decimals=8),
    LIQUIDSWAP_LP_TYPE: TokenInfo(name="Liquidswap LP", symbol="LP", decimals=8),
    RKGEN_TOKEN_TYPE: TokenInfo(name="rKGEN Token", symbol="rKGEN", decimals=8),
})

# Demo prices; no market data feed is consulted.
TOKEN_PRICES_USD: Mapping[str, float] = MappingProxyType({
    NATIVE_COIN_TYPE: 15.00,
    USDC_COIN_TYPE: 1.00,
    USDT_COIN_TYPE: 1.00,
    CAKE_COIN_TYPE: 2.50,
    RKGEN_TOKEN_TYPE: 0.05,
})

# Fungible-asset event type fragments that identify a non-native token.
CUSTOM_TOKEN_MARKERS: Mapping[str, str] = MappingProxyType({
    "rKGEN::Transfer": RKGEN_TOKEN_TYPE,
})


def get_protocol_name(key: str) -> str:
    """Return the protocol registered under an address or address::module key."""
    return PROTOCOL_MAPPINGS.get(key, UNKNOWN_PROTOCOL)


def resolve_protocol(module: str) -> str:
    """Look up a module first by its full ``address::module`` key, then by address."""
    name = get_protocol_name(module)
    if name == UNKNOWN_PROTOCOL and "::" in module:
        name = get_protocol_name(module.split("::", 1)[0])
    return name


def get_token_info(token_type: str) -> TokenInfo:
    """Return token metadata, falling back to the unknown-token sentinel."""
    return POPULAR_TOKENS.get(token_type, UNKNOWN_TOKEN)


def get_token_price(token_type: str) -> float:
    return TOKEN_PRICES_USD.get(token_type, 0.0)


def token_type_for_event(event_type: str) -> str:
    """Token type carried by a fungible-asset event, native coin unless marked."""
    for marker, token_type in CUSTOM_TOKEN_MARKERS.items():
        if marker in event_type:
            return token_type
    return NATIVE_COIN_TYPE


__all__ = [
    "NATIVE_COIN_TYPE",
    "NATIVE_DECIMALS",
    "UNKNOWN_PROTOCOL",
    "UNKNOWN_TOKEN",
    "PROTOCOL_MAPPINGS",
    "POPULAR_TOKENS",
    "TOKEN_PRICES_USD",
    "CUSTOM_TOKEN_MARKERS",
    "get_protocol_name",
    "resolve_protocol",
    "get_token_info",
    "get_token_price",
    "token_type_for_event",
]
