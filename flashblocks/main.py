"""
Flashblocks Listener - Command Line Entry Point

Usage:
    flashblocks-listener [--network mainnet|sepolia]
    python -m flashblocks --network sepolia

Exit codes:
    0  stream closed normally, or SIGINT/SIGTERM
    1  invalid network or connection failure
"""

import argparse
import asyncio
import logging
import os
import signal
import sys
from typing import List, Optional

from .config import DEFAULT_NETWORK, ListenerConfig
from .errors import ConfigError, StreamConnectionError
from .listener import FlashblockListener

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging. Level comes from LOG_LEVEL (default INFO)."""
    level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='flashblocks-listener',
        description='Stream and print Base flashblocks',
    )
    parser.add_argument(
        '--network',
        default=DEFAULT_NETWORK,
        help="Network to connect to: mainnet or sepolia (default: mainnet)",
    )
    return parser


def install_signal_handlers(listener: FlashblockListener) -> None:
    """Route SIGINT/SIGTERM to listener.request_stop."""
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(signum, listener.request_stop, signum)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(
                signum,
                lambda s, _frame: loop.call_soon_threadsafe(listener.request_stop, s),
            )


async def run_listener(config: ListenerConfig) -> None:
    listener = FlashblockListener(config)
    install_signal_handlers(listener)
    await listener.run()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        config = ListenerConfig.for_network(args.network)
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    logger.info(f"Connecting to Base flashblocks on {config.network}: {config.ws_url}")

    try:
        asyncio.run(run_listener(config))
    except StreamConnectionError as e:
        logger.critical(str(e))
        sys.exit(1)

    sys.exit(0)


if __name__ == '__main__':
    main()
