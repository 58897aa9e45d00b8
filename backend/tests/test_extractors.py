import pytest

from aptos_explainer.interpreter.extractors import (
    determine_transaction_type,
    parse_function_calls,
    parse_token_transfers,
)
from aptos_explainer.models import FunctionCall, TransactionType
from aptos_explainer.utils.lookups import LIQUIDSWAP, NATIVE_COIN_TYPE, RKGEN, USDC_COIN_TYPE

ALICE = "0x" + "a" * 64
BOB = "0x" + "b" * 64


def _call(module, function):
    return FunctionCall(module=module, function=function, description="test")


@pytest.mark.parametrize(
    "module, function, expected",
    [
        ("0xabc::router", "swap_exact_input", TransactionType.SWAP),
        (f"{LIQUIDSWAP}::liquidswap_router", "add", TransactionType.SWAP),
        ("0xabc::pancake_router", "route", TransactionType.SWAP),
        ("0x1::aptos_account", "transfer_coins", TransactionType.TRANSFER),
        ("0x3::token", "nft_transfer", TransactionType.TRANSFER),
        ("0x1::delegation_pool", "add_stake", TransactionType.STAKE),
        ("0x1::stake", "unstake", TransactionType.STAKE),
        ("0xabc::voter", "delegate_votes", TransactionType.STAKE),
        ("0x3::token", "create_collection", TransactionType.NFT),
        ("0xabc::collectible", "mint_item", TransactionType.NFT),
        ("0xabc::liquidity_pool", "add", TransactionType.DEFI),
        ("0xabc::vault", "deposit_all", TransactionType.DEFI),
        ("0xabc::vault", "withdraw", TransactionType.DEFI),
        ("0x1::code", "publish_package_txn", TransactionType.UNKNOWN),
    ],
)
def test_transaction_type_rules(module, function, expected):
    assert determine_transaction_type([_call(module, function)]) is expected


def test_transaction_type_matching_is_case_sensitive():
    assert determine_transaction_type([_call("0xabc::Router", "Swap")]) is TransactionType.UNKNOWN


def test_transaction_type_without_calls_is_unknown():
    assert determine_transaction_type([]) is TransactionType.UNKNOWN


def test_function_call_resolves_protocol_by_address():
    raw = {
        "payload": {
            "function": f"{LIQUIDSWAP}::scripts_v2::swap",
            "type_arguments": [NATIVE_COIN_TYPE, USDC_COIN_TYPE],
            "arguments": ["100", "95"],
        }
    }

    [call] = parse_function_calls(raw)

    assert call.module == f"{LIQUIDSWAP}::scripts_v2"
    assert call.function == "swap"
    assert call.protocol == "Liquidswap"
    assert call.description == "Token swap on Liquidswap"
    assert call.type_arguments == [NATIVE_COIN_TYPE, USDC_COIN_TYPE]


def test_function_call_prefers_module_key():
    [call] = parse_function_calls({"payload": {"function": f"{LIQUIDSWAP}::liquidity_pool::deposit"}})

    assert call.protocol == "Liquidswap Pool"
    assert call.description == "Deposit liquidity to Liquidswap Pool"
    assert call.arguments == []
    assert call.type_arguments == []


def test_function_call_with_unknown_protocol():
    [call] = parse_function_calls({"payload": {"function": "0xdead::game::play"}})

    assert call.protocol == "Unknown Protocol"
    assert call.description == "play operation on Unknown Protocol"


def test_multisig_payload_is_unwrapped():
    raw = {
        "payload": {
            "type": "multisig_payload",
            "multisig_address": ALICE,
            "transaction_payload": {"function": "0x1::stake::unstake", "arguments": ["10"]},
        }
    }

    [call] = parse_function_calls(raw)

    assert call.module == "0x1::stake"
    assert call.description == "Unstake tokens via Stake"


@pytest.mark.parametrize(
    "payload",
    [None, {}, {"function": None}, {"function": "0x1::coin"}, "0x1::coin::transfer"],
)
def test_function_calls_absent_or_malformed(payload):
    assert parse_function_calls({"payload": payload}) == []


def test_legacy_coin_transfer_uses_token_decimals():
    raw = {
        "events": [
            {
                "type": f"{USDC_COIN_TYPE}::coin::CoinDeposited",
                "data": {"amount": "1500000", "receiver": BOB},
            }
        ]
    }

    [transfer] = parse_token_transfers(raw)

    assert transfer.token_type == USDC_COIN_TYPE
    assert transfer.token_symbol == "USDC"
    assert transfer.decimals == 6
    assert transfer.amount == pytest.approx(1.5)
    assert transfer.from_address == "unknown"
    assert transfer.to_address == BOB
    assert transfer.description == "USDC transfer"


def test_legacy_coin_transfer_with_unknown_token():
    raw = {"events": [{"type": "0x1::coin::CoinWithdrawn", "data": {"amount": "100000000", "sender": ALICE}}]}

    [transfer] = parse_token_transfers(raw)

    assert transfer.token_type == "0x1::coin::CoinWithdrawn"
    assert transfer.token_name == "Unknown Token"
    assert transfer.token_symbol == "UNK"
    assert transfer.decimals == 8
    assert transfer.amount == pytest.approx(1.0)
    assert transfer.from_address == ALICE


def test_fungible_asset_events_default_to_native_coin():
    raw = {
        "events": [
            {"type": "0x1::fungible_asset::Deposit", "data": {"amount": "250000000", "receiver": BOB}},
            {"type": f"{RKGEN}::rKGEN::Transfer", "data": {"amount": "500000000", "from": ALICE, "receiver": BOB}},
        ]
    }

    native, custom = parse_token_transfers(raw)

    assert native.token_type == NATIVE_COIN_TYPE
    assert native.token_symbol == "APT"
    assert native.amount == pytest.approx(2.5)
    assert custom.token_type == "rKGEN Token"
    assert custom.token_symbol == "rKGEN"
    assert custom.amount == pytest.approx(5.0)
    assert custom.from_address == ALICE
    assert custom.to_address == BOB


def test_unrelated_and_malformed_events_are_skipped():
    raw = {
        "events": [
            {"type": "0x1::transaction_fee::FeeStatement", "data": {"total_charge_gas_units": "7"}},
            {"type": "0x1::coin::CoinDeposited", "data": {"amount": "lots", "receiver": BOB}},
            {"type": "0x1::fungible_asset::Deposit", "data": {}},
            {"data": {"amount": "1"}},
            "garbage",
        ]
    }

    assert parse_token_transfers(raw) == []
