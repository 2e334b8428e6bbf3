"""
Flashblocks Websocket Listener

Opens one websocket to the flashblocks feed and renders every update.

Task layout:
- Reader task: reads frames, decodes and normalizes each one in turn
- Controller (run): races the connect against a stop request, then waits
  for the reader to finish or for a stop request and performs one
  best-effort close handshake

No reconnect: a dropped connection ends the session.
"""

import asyncio
import json
import logging
import signal
from typing import Callable, Optional

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, InvalidHandshake, InvalidURI

from .config import ListenerConfig
from .decoder import FrameType, decode_frame, frame_type_of, is_decodable
from .display import format_flashblock
from .errors import DecodeError, ParseError, StreamConnectionError
from .metrics import ListenerMetrics
from .normalizer import normalize
from .types import Flashblock

logger = logging.getLogger(__name__)

# Characters of an unparsable document echoed to the log
RAW_LOG_LIMIT = 2000


def print_flashblock(fb: Flashblock) -> None:
    print(format_flashblock(fb), flush=True)


class FlashblockListener:
    """
    Single-connection flashblocks consumer.

    Args:
        config: Endpoint and connection parameters
        on_record: Called with each parsed flashblock (default: print summary)
        connector: websockets.connect compatible factory (default: websockets.connect)
    """

    def __init__(
        self,
        config: ListenerConfig,
        on_record: Optional[Callable[[Flashblock], None]] = None,
        connector: Optional[Callable] = None,
    ):
        self.config = config
        self._on_record = on_record or print_flashblock
        self._connector = connector or websockets.connect
        self._stop_event = asyncio.Event()
        self._stop_signal: Optional[int] = None

        self.metrics = ListenerMetrics()

    # =========================================================================
    # Frame handling
    # =========================================================================

    def handle_message(self, message) -> Optional[Flashblock]:
        """
        Decode, normalize and emit one frame.

        Per-frame errors are logged and swallowed so the stream keeps going.

        Returns:
            The parsed flashblock, or None if the frame was skipped or invalid
        """
        frame_type = frame_type_of(message)
        self.metrics.frames_received += 1

        if not is_decodable(frame_type):
            self.metrics.ignored_frames += 1
            logger.warning(f"Received unknown message type: {type(message).__name__}")
            return None

        if frame_type is FrameType.TEXT:
            self.metrics.text_frames += 1
            self.metrics.bytes_received += len(message.encode('utf-8'))
        else:
            self.metrics.binary_frames += 1
            self.metrics.bytes_received += len(message)

        try:
            canonical = decode_frame(frame_type, message)
        except DecodeError as e:
            self.metrics.decode_errors += 1
            logger.error(f"Error decoding Brotli: {e.reason or e}")
            logger.error(f"Raw binary message length: {e.raw_length} bytes")
            return None

        try:
            fb = normalize(canonical)
        except ParseError as e:
            self.metrics.parse_errors += 1
            logger.error(f"Error parsing flashblock JSON: {e.reason}")
            logger.error(f"Raw data: {e.raw_text(RAW_LOG_LIMIT)}")
            return None

        self.metrics.last_block_number = fb.block_number
        self._on_record(fb)
        self.metrics.records_rendered += 1
        return fb

    async def _read_loop(self, ws) -> None:
        """Reader task. Returns on a normal close, raises on a dropped stream."""
        try:
            async for message in ws:
                self.handle_message(message)
        except ConnectionClosedError as e:
            raise StreamConnectionError(f"Error reading message: {e}") from e

        logger.info("WebSocket closed normally")

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def request_stop(self, signum: Optional[int] = None) -> None:
        """Ask run() to close the stream and return. Safe to call from a signal handler."""
        if signum is not None:
            self._stop_signal = signum
        self._stop_event.set()

    async def run(self) -> None:
        """
        Connect and consume frames until the stream ends or stop is requested.

        Raises:
            StreamConnectionError: Connection could not be opened or dropped
                abnormally
        """
        stopper = asyncio.create_task(self._stop_event.wait(), name="flashblocks-stop")

        try:
            ws = await self._connect_unless_stopped(stopper)
            if ws is None:
                self._log_stop()
                return
            logger.info("Connected! Listening for flashblocks...")

            reader = asyncio.create_task(self._read_loop(ws), name="flashblocks-reader")
            done, _ = await asyncio.wait(
                {reader, stopper}, return_when=asyncio.FIRST_COMPLETED
            )

            if reader in done:
                stopper.cancel()
                reader.result()
                logger.info("Connection closed")
                return

            self._log_stop()
            await self._close(ws)
            reader.cancel()
            await asyncio.gather(reader, return_exceptions=True)

        finally:
            if not stopper.done():
                stopper.cancel()
            if self.config.log_metrics_on_exit:
                logger.info(f"Metrics: {json.dumps(self.metrics.to_dict())}")

    def _log_stop(self) -> None:
        if self._stop_signal is not None:
            name = signal.Signals(self._stop_signal).name
            logger.info(f"Received signal {name}, shutting down...")
        else:
            logger.info("Stop requested, shutting down...")

    async def _connect_unless_stopped(self, stopper: asyncio.Task):
        """
        Open the websocket, giving up if a stop arrives during the handshake.

        Returns:
            The connection, or None if stopped before it opened
        """
        connecting = asyncio.create_task(self._connect(), name="flashblocks-connect")
        await asyncio.wait({connecting, stopper}, return_when=asyncio.FIRST_COMPLETED)

        if not stopper.done():
            return connecting.result()

        # Opened in the same step as the stop: hand it back so run() closes it
        if connecting.done() and not connecting.cancelled() and connecting.exception() is None:
            return connecting.result()

        connecting.cancel()
        await asyncio.gather(connecting, return_exceptions=True)
        return None

    async def _connect(self):
        try:
            return await self._connector(
                self.config.ws_url,
                ping_interval=self.config.ping_interval,
                ping_timeout=self.config.ping_timeout,
                close_timeout=self.config.close_timeout,
                max_size=self.config.max_size,
            )
        except (OSError, InvalidURI, InvalidHandshake, asyncio.TimeoutError) as e:
            raise StreamConnectionError(f"Failed to connect to WebSocket: {e}") from e

    async def _close(self, ws) -> None:
        """One close handshake attempt, bounded by close_timeout."""
        try:
            await asyncio.wait_for(ws.close(), timeout=self.config.close_timeout)
        except (ConnectionClosed, OSError, asyncio.TimeoutError) as e:
            logger.warning(f"Error sending close message: {e}")
