"""
Frame Decoder

Turns one websocket frame into the canonical bytes of a flashblock document.

- TEXT frames carry the JSON document as-is
- BINARY frames carry the same document brotli-compressed
- Anything else (control frames) carries no document and is skipped
"""

from enum import Enum
from typing import Union

import brotli

from .errors import DecodeError, UnsupportedFrameError


class FrameType(Enum):
    """Websocket frame kind."""
    TEXT = "TEXT"
    BINARY = "BINARY"
    CONTROL = "CONTROL"


def frame_type_of(message: object) -> FrameType:
    """Classify a message as delivered by the websockets library."""
    if isinstance(message, str):
        return FrameType.TEXT
    if isinstance(message, (bytes, bytearray, memoryview)):
        return FrameType.BINARY
    return FrameType.CONTROL


def is_decodable(frame_type: FrameType) -> bool:
    return frame_type in (FrameType.TEXT, FrameType.BINARY)


def decode_frame(frame_type: FrameType, raw: Union[str, bytes]) -> bytes:
    """
    Decode a frame payload into canonical bytes.

    Args:
        frame_type: Kind of the frame the payload arrived in
        raw: Frame payload (str for text frames, bytes for binary)

    Returns:
        Decompressed document bytes

    Raises:
        DecodeError: Binary payload is not a complete brotli stream
        UnsupportedFrameError: frame_type carries no document
    """
    if frame_type is FrameType.TEXT:
        if isinstance(raw, str):
            return raw.encode('utf-8')
        return bytes(raw)

    if frame_type is FrameType.BINARY:
        data = bytes(raw)
        try:
            return brotli.decompress(data)
        except brotli.error as e:
            raise DecodeError(len(data), str(e)) from e

    raise UnsupportedFrameError(f"{frame_type.name} frames carry no document")
