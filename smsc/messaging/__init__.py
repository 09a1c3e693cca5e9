"""
Message Segmentation
====================
Segment constants, wire enums and byte counting.
"""

from .models import (
    TRANSMISSION_ENCODING,
    SEGMENT_SIZE,
    SEGMENT_HEADER_SIZE,
    MAX_SEGMENTS,
    MAX_MESSAGE_SIZE,
    Charset,
    ReplyFormat,
)
from .segmentation import count_bytes, count_segments

__all__ = [
    # Models
    "TRANSMISSION_ENCODING",
    "SEGMENT_SIZE",
    "SEGMENT_HEADER_SIZE",
    "MAX_SEGMENTS",
    "MAX_MESSAGE_SIZE",
    "Charset",
    "ReplyFormat",
    # Segmentation
    "count_bytes",
    "count_segments",
]
