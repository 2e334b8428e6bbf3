"""
Listener Metrics

Frame counters for one listener session.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import time


@dataclass
class ListenerMetrics:
    """Metrics for FlashblockListener."""

    # Frames
    frames_received: int = 0
    text_frames: int = 0
    binary_frames: int = 0
    ignored_frames: int = 0
    bytes_received: int = 0

    # Errors
    decode_errors: int = 0
    parse_errors: int = 0

    # Output
    records_rendered: int = 0
    last_block_number: Optional[int] = None

    # Timing
    start_time: float = field(default_factory=time.time)

    @property
    def frames_per_second(self) -> float:
        elapsed = time.time() - self.start_time
        return self.frames_received / elapsed if elapsed > 0 else 0.0

    def to_dict(self) -> Dict:
        return {
            'frames_received': self.frames_received,
            'text_frames': self.text_frames,
            'binary_frames': self.binary_frames,
            'ignored_frames': self.ignored_frames,
            'bytes_received': self.bytes_received,
            'decode_errors': self.decode_errors,
            'parse_errors': self.parse_errors,
            'records_rendered': self.records_rendered,
            'last_block_number': self.last_block_number,
            'frames_per_second': round(self.frames_per_second, 2),
        }
