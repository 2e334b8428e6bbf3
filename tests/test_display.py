"""
Unit tests for console rendering.
"""

import pytest

from flashblocks.display import MAX_RECEIPTS_SHOWN, format_flashblock, truncate_hash
from flashblocks.types import BlockDiff, Flashblock, Metadata, Receipt, ReceiptData
from tests.sample_data import BLOCK_HASH, TX_1


def make_receipts(count: int):
    return {
        f"0x{i:064x}": Receipt.legacy(ReceiptData(cumulative_gas_used="0x1", status="0x1"))
        for i in range(count)
    }


class TestTruncateHash:
    """Test display truncation of hex strings."""

    def test_short_string_unchanged(self):
        assert truncate_hash("0xabc") == "0xabc"

    def test_exactly_20_unchanged(self):
        value = "0x" + "a" * 18
        assert truncate_hash(value) == value

    def test_21_characters(self):
        value = "0123456789ABCDEFGHIJK"
        result = truncate_hash(value)

        assert len(result) == 21
        assert result == "0123456789...DEFGHIJK"

    def test_full_hash(self):
        assert truncate_hash(BLOCK_HASH) == "0x6c3b1f4a...7e8f9a0b"

    def test_empty(self):
        assert truncate_hash("") == ""

    def test_truncating_twice_shortens_again(self):
        once = truncate_hash("0x" + "f" * 64)
        assert truncate_hash(once) == once[:10] + "..." + once[-8:]


class TestFormatFlashblock:
    """Test the flashblock summary layout."""

    @pytest.fixture
    def flashblock(self):
        return Flashblock(
            diff=BlockDiff(
                block_hash=BLOCK_HASH,
                gas_used="0x2dc6c0",
                blob_gas_used="0x0",
                state_root="0x" + "1" * 64,
                receipts_root="0x" + "2" * 64,
                transactions=(TX_1, "0xshort"),
            ),
            index=5,
            metadata=Metadata(
                block_number=123,
                new_account_balances={"0xa": "0x1", "0xb": "0x2"},
                receipts={
                    TX_1: Receipt.eip1559(ReceiptData(cumulative_gas_used="0x5", status="0x1")),
                },
            ),
        )

    def test_header(self, flashblock):
        output = format_flashblock(flashblock)
        assert "FLASHBLOCK #5 | Block: 123 | Hash: 0x6c3b1f4a...7e8f9a0b" in output

    def test_scalar_fields(self, flashblock):
        output = format_flashblock(flashblock)

        assert "Gas Used:       0x2dc6c0" in output
        assert "Blob Gas Used:  0x0" in output
        assert "State Root:     0x11111111...11111111" in output
        assert "Receipts Root:  0x22222222...22222222" in output

    def test_transactions_enumerated(self, flashblock):
        output = format_flashblock(flashblock)

        assert "Transactions: 2" in output
        assert f"[0] {truncate_hash(TX_1)}..." in output
        assert "[1] 0xshort..." in output

    def test_balance_update_count(self, flashblock):
        assert "Account Balance Updates: 2" in format_flashblock(flashblock)

    def test_receipt_line(self, flashblock):
        output = format_flashblock(flashblock)

        assert "Receipts: 1" in output
        assert f"[EIP-1559] {truncate_hash(TX_1)} - Status: 0x1, Logs: 0" in output

    def test_receipts_capped_with_overflow_count(self):
        fb = Flashblock(metadata=Metadata(receipts=make_receipts(7)))
        output = format_flashblock(fb)

        assert output.count("[Legacy]") == MAX_RECEIPTS_SHOWN
        assert "... and 4 more receipts" in output

    def test_exactly_three_receipts_no_overflow(self):
        fb = Flashblock(metadata=Metadata(receipts=make_receipts(3)))
        output = format_flashblock(fb)

        assert output.count("[Legacy]") == 3
        assert "more receipts" not in output

    def test_absent_receipt_skipped(self):
        fb = Flashblock(metadata=Metadata(receipts={"0x01": Receipt()}))
        output = format_flashblock(fb)

        assert "Receipts: 1" in output
        assert "[Unknown]" not in output

    def test_empty_flashblock(self):
        output = format_flashblock(Flashblock())

        assert "FLASHBLOCK #0 | Block: 0 | Hash: " in output
        assert "Transactions: 0" in output
        assert "Receipts: 0" in output
