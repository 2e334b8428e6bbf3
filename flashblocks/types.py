"""
Flashblock Data Types

Pure data structures for one flashblock update as published by the Base
flashblocks websocket. Hex-encoded fields are kept as the strings received;
nothing here interprets their numeric value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Log:
    """Event log emitted by a transaction."""
    address: str
    data: str
    topics: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'address': self.address,
            'data': self.data,
            'topics': list(self.topics),
        }


@dataclass(frozen=True)
class ReceiptData:
    """Payload shared by every receipt variant."""
    cumulative_gas_used: str
    status: str
    logs: Tuple[Log, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cumulativeGasUsed': self.cumulative_gas_used,
            'logs': [log.to_dict() for log in self.logs],
            'status': self.status,
        }


class ReceiptKind(Enum):
    """Receipt variant, valued by its display label."""
    EIP1559 = "EIP-1559"
    LEGACY = "Legacy"
    ABSENT = "Unknown"


# Wire key for each populated variant
RECEIPT_WIRE_KEYS = {
    ReceiptKind.EIP1559: 'Eip1559',
    ReceiptKind.LEGACY: 'Legacy',
}


@dataclass(frozen=True)
class Receipt:
    """
    Transaction receipt.

    On the wire a receipt is an object with optional sibling keys
    ``Eip1559`` and ``Legacy``. Here it is a single kind plus its payload,
    so a receipt carrying two variants cannot be built.
    """
    kind: ReceiptKind = ReceiptKind.ABSENT
    payload: Optional[ReceiptData] = None

    def __post_init__(self):
        if (self.kind is ReceiptKind.ABSENT) != (self.payload is None):
            raise ValueError(f"receipt kind {self.kind.name} does not match payload")

    @classmethod
    def eip1559(cls, payload: ReceiptData) -> 'Receipt':
        return cls(ReceiptKind.EIP1559, payload)

    @classmethod
    def legacy(cls, payload: ReceiptData) -> 'Receipt':
        return cls(ReceiptKind.LEGACY, payload)

    def variant_payload(self) -> Optional[ReceiptData]:
        """Payload of whichever variant is present, or None."""
        return self.payload

    def variant_label(self) -> str:
        """One of 'EIP-1559', 'Legacy' or 'Unknown'."""
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        if self.payload is None:
            return {}
        return {RECEIPT_WIRE_KEYS[self.kind]: self.payload.to_dict()}


@dataclass(frozen=True)
class BlockDiff:
    """Block fields changed by this flashblock."""
    blob_gas_used: str = ""
    block_hash: str = ""
    gas_used: str = ""
    logs_bloom: str = ""
    receipts_root: str = ""
    state_root: str = ""
    transactions: Tuple[str, ...] = ()
    withdrawals: Tuple[Any, ...] = ()  # passed through unvalidated
    withdrawals_root: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'blob_gas_used': self.blob_gas_used,
            'block_hash': self.block_hash,
            'gas_used': self.gas_used,
            'logs_bloom': self.logs_bloom,
            'receipts_root': self.receipts_root,
            'state_root': self.state_root,
            'transactions': list(self.transactions),
            'withdrawals': list(self.withdrawals),
            'withdrawals_root': self.withdrawals_root,
        }


@dataclass(frozen=True)
class Metadata:
    """Block number, balance changes and receipts for the flashblock."""
    block_number: int = 0
    new_account_balances: Dict[str, str] = field(default_factory=dict)  # address -> balance
    receipts: Dict[str, Receipt] = field(default_factory=dict)  # tx hash -> receipt

    def to_dict(self) -> Dict[str, Any]:
        return {
            'block_number': self.block_number,
            'new_account_balances': dict(self.new_account_balances),
            'receipts': {
                tx_hash: receipt.to_dict()
                for tx_hash, receipt in self.receipts.items()
            },
        }


@dataclass(frozen=True)
class Flashblock:
    """
    One flashblock update.

    Fields:
        diff: Block fields changed by this update
        index: Position of this flashblock within its block
        metadata: Block number, balances and receipts
    """
    diff: BlockDiff = field(default_factory=BlockDiff)
    index: int = 0
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def block_number(self) -> int:
        return self.metadata.block_number

    def to_dict(self) -> Dict[str, Any]:
        return {
            'diff': self.diff.to_dict(),
            'index': self.index,
            'metadata': self.metadata.to_dict(),
        }
