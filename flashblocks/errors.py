"""
Flashblocks Listener Errors

Per-frame errors (DecodeError, ParseError) are recoverable: the reader logs
them and moves on to the next frame. StreamConnectionError and ConfigError
are fatal and end the process.
"""

from typing import Optional


class FlashblockError(Exception):
    """Base class for listener errors."""


class DecodeError(FlashblockError):
    """Binary frame could not be decompressed."""

    def __init__(self, raw_length: int, reason: str = ""):
        self.raw_length = raw_length
        self.reason = reason
        message = f"failed to decode {raw_length}-byte frame"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedFrameError(FlashblockError):
    """Decode requested for a frame type that carries no document."""


class ParseError(FlashblockError):
    """Decoded bytes are not a valid flashblock document."""

    def __init__(self, raw: bytes, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"invalid flashblock document: {reason}")

    def raw_text(self, limit: Optional[int] = None) -> str:
        """Raw payload as text for log output."""
        text = self.raw.decode('utf-8', errors='replace')
        if limit is not None and len(text) > limit:
            return text[:limit] + '...'
        return text


class StreamConnectionError(FlashblockError):
    """Websocket could not be opened or dropped abnormally."""


class ConfigError(FlashblockError):
    """Invalid startup configuration."""
