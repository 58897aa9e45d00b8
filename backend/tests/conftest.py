import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the backend package is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from aptos_explainer.main import app  # noqa: E402  pylint: disable=wrong-import-position


@pytest.fixture()
def client():
    return TestClient(app)


SENDER = "0x" + "a" * 64
RECEIVER = "0x" + "b" * 64


@pytest.fixture()
def transfer_transaction():
    return {
        "hash": "0x" + "1" * 64,
        "success": True,
        "gas_used": "1000",
        "gas_unit_price": "100",
        "version": "123456789",
        "block_height": "4242",
        "timestamp": "1700000000",
        "sender": SENDER,
        "payload": {
            "type": "entry_function_payload",
            "function": "0x1::aptos_account::transfer_coins",
            "type_arguments": ["0x1::aptos_coin::AptosCoin"],
            "arguments": [RECEIVER, "250000000"],
        },
        "changes": [
            {"type": "write_resource", "address": SENDER},
            {"type": "write_table_item", "address": RECEIVER, "sequence_number": "7"},
            {"type": "delete_resource", "address": RECEIVER},
        ],
        "events": [
            {
                "type": "0x1::coin::CoinWithdrawn",
                "data": {"amount": "250000000", "sender": SENDER},
            },
            {
                "type": "0x1::coin::CoinDeposited",
                "data": {"amount": "250000000", "receiver": RECEIVER},
            },
        ],
    }
