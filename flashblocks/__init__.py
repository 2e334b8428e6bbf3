"""
Base Flashblocks Listener

Streams flashblock updates from the Base flashblocks websocket, decodes
text and brotli-compressed binary frames, and prints a summary per update.

Components:
- decode_frame: Frame payload -> canonical document bytes
- normalize: Document bytes -> Flashblock record
- format_flashblock: Flashblock -> console summary
- FlashblockListener: Websocket reader and shutdown handshake

Usage:
    from flashblocks import FlashblockListener, ListenerConfig

    listener = FlashblockListener(ListenerConfig.for_network('sepolia'))
    await listener.run()
"""

from .config import ListenerConfig, NETWORK_ENDPOINTS, resolve_endpoint
from .decoder import FrameType, decode_frame, frame_type_of, is_decodable
from .display import format_flashblock, truncate_hash
from .errors import (
    ConfigError,
    DecodeError,
    FlashblockError,
    ParseError,
    StreamConnectionError,
    UnsupportedFrameError,
)
from .listener import FlashblockListener
from .metrics import ListenerMetrics
from .normalizer import normalize
from .types import (
    BlockDiff,
    Flashblock,
    Log,
    Metadata,
    Receipt,
    ReceiptData,
    ReceiptKind,
)

__all__ = [
    # Config
    'ListenerConfig',
    'NETWORK_ENDPOINTS',
    'resolve_endpoint',
    # Pipeline
    'FrameType',
    'decode_frame',
    'frame_type_of',
    'is_decodable',
    'normalize',
    'format_flashblock',
    'truncate_hash',
    # Listener
    'FlashblockListener',
    'ListenerMetrics',
    # Types
    'BlockDiff',
    'Flashblock',
    'Log',
    'Metadata',
    'Receipt',
    'ReceiptData',
    'ReceiptKind',
    # Errors
    'ConfigError',
    'DecodeError',
    'FlashblockError',
    'ParseError',
    'StreamConnectionError',
    'UnsupportedFrameError',
]
