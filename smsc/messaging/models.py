"""
Messaging Models
================
Segment constants and wire enums shared by the draft and the encoder.
"""

from enum import Enum, IntEnum

# Transmission charset used for byte counting
TRANSMISSION_ENCODING = "utf-8"

SEGMENT_SIZE = 160
SEGMENT_HEADER_SIZE = 7  # concatenation UDH
MAX_SEGMENTS = 5
MAX_MESSAGE_SIZE = MAX_SEGMENTS * SEGMENT_SIZE


class Charset(str, Enum):
    """Message text charsets understood by the gateway."""
    WINDOWS_1251 = "windows-1251"
    UTF8 = "utf-8"
    KOI8R = "koi8-r"


class ReplyFormat(IntEnum):
    """Gateway reply formats (``fmt``)."""
    INLINE_VERBOSE = 0
    INLINE = 1
    XML = 2
    JSON = 3
