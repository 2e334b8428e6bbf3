"""
Console rendering for flashblock records.
"""

from typing import List

from .types import Flashblock


RULE = "═" * 63

# Receipts listed per flashblock before summarising the rest
MAX_RECEIPTS_SHOWN = 3


def truncate_hash(value: str) -> str:
    """Shorten long hex strings to first 10 + '...' + last 8 characters."""
    if len(value) <= 20:
        return value
    return value[:10] + "..." + value[-8:]


def format_flashblock(fb: Flashblock) -> str:
    """Render one flashblock as a multi-line summary."""
    diff = fb.diff
    metadata = fb.metadata

    lines: List[str] = [
        RULE,
        f"FLASHBLOCK #{fb.index} | Block: {metadata.block_number} | Hash: {truncate_hash(diff.block_hash)}",
        RULE,
        f"  Gas Used:       {diff.gas_used}",
        f"  Blob Gas Used:  {diff.blob_gas_used}",
        f"  State Root:     {truncate_hash(diff.state_root)}",
        f"  Receipts Root:  {truncate_hash(diff.receipts_root)}",
        "",
        f"  Transactions: {len(diff.transactions)}",
    ]
    for i, tx_hash in enumerate(diff.transactions):
        lines.append(f"    [{i}] {truncate_hash(tx_hash)}...")

    lines.append("")
    lines.append(f"  Account Balance Updates: {len(metadata.new_account_balances)}")

    lines.append("")
    lines.append(f"  Receipts: {len(metadata.receipts)}")
    for shown, (tx_hash, receipt) in enumerate(metadata.receipts.items()):
        if shown >= MAX_RECEIPTS_SHOWN:
            lines.append(f"    ... and {len(metadata.receipts) - MAX_RECEIPTS_SHOWN} more receipts")
            break
        payload = receipt.variant_payload()
        if payload is None:
            continue
        lines.append(
            f"    [{receipt.variant_label()}] {truncate_hash(tx_hash)} - "
            f"Status: {payload.status}, Logs: {len(payload.logs)}"
        )

    lines.append("")
    return "\n".join(lines)
