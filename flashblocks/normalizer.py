"""
Record Normalizer

Parses decoded flashblock bytes into a Flashblock record.

Parsing rules:
- Unknown keys are ignored at every level
- Missing keys and JSON null take the field default ("" / 0 / empty)
- A key present with the wrong JSON type rejects the whole document
- A receipt carrying both variants resolves to Eip1559
"""

import json
from typing import Any, Dict, List, Tuple

from .errors import ParseError
from .types import (
    BlockDiff,
    Flashblock,
    Log,
    Metadata,
    Receipt,
    ReceiptData,
)


class _SchemaError(Exception):
    """Structural mismatch at a document path."""


# Hex-string scalars of the diff object
DIFF_STRING_FIELDS = (
    'blob_gas_used',
    'block_hash',
    'gas_used',
    'logs_bloom',
    'receipts_root',
    'state_root',
    'withdrawals_root',
)

# block_number is a uint64 on the wire
UINT64_MAX = 2 ** 64 - 1


def normalize(canonical: bytes) -> Flashblock:
    """
    Parse one flashblock document.

    Args:
        canonical: Decoded document bytes (UTF-8 JSON)

    Returns:
        Flashblock record

    Raises:
        ParseError: Document is not JSON or does not match the schema.
            Carries the raw bytes for diagnostics.
    """
    try:
        document = json.loads(canonical)
    except RecursionError as e:
        raise ParseError(canonical, "document nested too deeply") from e
    except (UnicodeDecodeError, ValueError) as e:
        raise ParseError(canonical, f"not a JSON document ({e})") from e

    try:
        return _parse_flashblock(document)
    except _SchemaError as e:
        raise ParseError(canonical, str(e)) from e


# ============ Field Helpers ============

def _object(value: Any, path: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _SchemaError(f"{path} must be an object, got {type(value).__name__}")
    return value


def _array(value: Any, path: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _SchemaError(f"{path} must be an array, got {type(value).__name__}")
    return value


def _string(value: Any, path: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _SchemaError(f"{path} must be a string, got {type(value).__name__}")
    return value


def _integer(value: Any, path: str, unsigned: bool = False) -> int:
    if value is None:
        return 0
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise _SchemaError(f"{path} must be an integer, got {type(value).__name__}")
    if unsigned and value < 0:
        raise _SchemaError(f"{path} must be non-negative, got {value}")
    if unsigned and value > UINT64_MAX:
        raise _SchemaError(f"{path} exceeds uint64 range, got {value}")
    return value


def _string_tuple(value: Any, path: str) -> Tuple[str, ...]:
    return tuple(
        _string(item, f"{path}[{i}]")
        for i, item in enumerate(_array(value, path))
    )


# ============ Section Parsers ============

def _parse_flashblock(document: Any) -> Flashblock:
    if not isinstance(document, dict):
        raise _SchemaError(f"document must be an object, got {type(document).__name__}")

    return Flashblock(
        diff=_parse_diff(_object(document.get('diff'), 'diff')),
        index=_integer(document.get('index'), 'index'),
        metadata=_parse_metadata(_object(document.get('metadata'), 'metadata')),
    )


def _parse_diff(diff: Dict[str, Any]) -> BlockDiff:
    scalars = {
        name: _string(diff.get(name), f"diff.{name}")
        for name in DIFF_STRING_FIELDS
    }
    return BlockDiff(
        transactions=_string_tuple(diff.get('transactions'), 'diff.transactions'),
        withdrawals=tuple(_array(diff.get('withdrawals'), 'diff.withdrawals')),
        **scalars,
    )


def _parse_metadata(metadata: Dict[str, Any]) -> Metadata:
    raw_balances = _object(metadata.get('new_account_balances'), 'metadata.new_account_balances')
    balances = {
        address: _string(balance, f"metadata.new_account_balances[{address}]")
        for address, balance in raw_balances.items()
    }

    raw_receipts = _object(metadata.get('receipts'), 'metadata.receipts')
    receipts = {
        tx_hash: _parse_receipt(receipt, f"metadata.receipts[{tx_hash}]")
        for tx_hash, receipt in raw_receipts.items()
    }

    return Metadata(
        block_number=_integer(metadata.get('block_number'), 'metadata.block_number', unsigned=True),
        new_account_balances=balances,
        receipts=receipts,
    )


def _parse_receipt(value: Any, path: str) -> Receipt:
    receipt = _object(value, path)

    eip1559 = receipt.get('Eip1559')
    if eip1559 is not None:
        return Receipt.eip1559(_parse_receipt_data(eip1559, f"{path}.Eip1559"))

    legacy = receipt.get('Legacy')
    if legacy is not None:
        return Receipt.legacy(_parse_receipt_data(legacy, f"{path}.Legacy"))

    return Receipt()


def _parse_receipt_data(value: Any, path: str) -> ReceiptData:
    data = _object(value, path)
    logs = tuple(
        _parse_log(log, f"{path}.logs[{i}]")
        for i, log in enumerate(_array(data.get('logs'), f"{path}.logs"))
    )
    return ReceiptData(
        cumulative_gas_used=_string(data.get('cumulativeGasUsed'), f"{path}.cumulativeGasUsed"),
        status=_string(data.get('status'), f"{path}.status"),
        logs=logs,
    )


def _parse_log(value: Any, path: str) -> Log:
    log = _object(value, path)
    return Log(
        address=_string(log.get('address'), f"{path}.address"),
        data=_string(log.get('data'), f"{path}.data"),
        topics=_string_tuple(log.get('topics'), f"{path}.topics"),
    )
