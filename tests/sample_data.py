"""
Sample flashblock documents shared by the test modules.
"""

import copy
import json

BLOCK_HASH = "0x6c3b1f4a8e0b2d2f0c8a1d5f7e9b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b"
TX_1 = "0x1f0e2d3c4b5a69788796a5b4c3d2e1f00f1e2d3c4b5a69788796a5b4c3d2e1f0"
TX_2 = "0x2a2b2c2d2e2f303132333435363738393a3b3c3d3e3f40414243444546474849"

FULL_DOCUMENT = {
    "diff": {
        "blob_gas_used": "0x0",
        "block_hash": BLOCK_HASH,
        "gas_used": "0x2dc6c0",
        "logs_bloom": "0x" + "00" * 256,
        "receipts_root": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "state_root": "0xd7f8974fb5ac78d9ac099b9ad5018bedc2ce0a72dad1827a1709da30580f0544",
        "transactions": [TX_1, TX_2],
        "withdrawals": [],
        "withdrawals_root": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
    },
    "index": 3,
    "metadata": {
        "block_number": 27182818,
        "new_account_balances": {
            "0x4200000000000000000000000000000000000019": "0x1bc16d674ec80000",
            "0xdeaddeaddeaddeaddeaddeaddeaddeaddead0001": "0x0",
        },
        "receipts": {
            TX_1: {
                "Eip1559": {
                    "cumulativeGasUsed": "0xb411",
                    "logs": [
                        {
                            "address": "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",
                            "data": "0x00000000000000000000000000000000000000000000000000000000000f4240",
                            "topics": [
                                "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef",
                                "0x000000000000000000000000a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
                            ],
                        }
                    ],
                    "status": "0x1",
                }
            },
            TX_2: {
                "Legacy": {
                    "cumulativeGasUsed": "0x16e36",
                    "logs": [],
                    "status": "0x0",
                }
            },
        },
    },
}


def full_document():
    """Deep copy of FULL_DOCUMENT, safe to mutate."""
    return copy.deepcopy(FULL_DOCUMENT)


def full_document_json() -> str:
    return json.dumps(FULL_DOCUMENT)
