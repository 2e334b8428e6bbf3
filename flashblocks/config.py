"""
Listener Configuration

Endpoints and connection parameters for the flashblocks listener.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError


# Websocket endpoints
MAINNET_WS_URL = "wss://mainnet.flashblocks.base.org/ws"
SEPOLIA_WS_URL = "wss://sepolia.flashblocks.base.org/ws"

NETWORK_ENDPOINTS = {
    'mainnet': MAINNET_WS_URL,
    'sepolia': SEPOLIA_WS_URL,
}

DEFAULT_NETWORK = 'mainnet'


def resolve_endpoint(network: str) -> str:
    """Websocket URL for a network name."""
    try:
        return NETWORK_ENDPOINTS[network]
    except KeyError:
        raise ConfigError(
            f"Invalid network: {network}. Use 'mainnet' or 'sepolia'"
        ) from None


@dataclass
class ListenerConfig:
    """Configuration for FlashblockListener."""

    # ========== Endpoint ==========
    network: str = DEFAULT_NETWORK
    ws_url: str = MAINNET_WS_URL

    # ========== Keepalive ==========
    # Seconds between pings (None disables keepalive)
    ping_interval: Optional[float] = 20.0

    # Seconds to wait for a pong before the connection counts as dropped
    ping_timeout: Optional[float] = 20.0

    # ========== Shutdown ==========
    # Upper bound on the close handshake after SIGINT/SIGTERM
    close_timeout: float = 5.0

    # ========== Frames ==========
    # Largest accepted frame in bytes (None = unlimited)
    max_size: Optional[int] = None

    # ========== Logging ==========
    # Log frame counters when the listener stops
    log_metrics_on_exit: bool = True

    @classmethod
    def for_network(cls, network: str) -> 'ListenerConfig':
        """Build a config for a named network, raising ConfigError if unknown."""
        return cls(network=network, ws_url=resolve_endpoint(network))
