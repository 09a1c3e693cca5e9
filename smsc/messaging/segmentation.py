"""
Message Segmentation
====================
Byte cost of a text once split into concatenated SMS segments.
"""

from .models import (
    TRANSMISSION_ENCODING,
    SEGMENT_SIZE,
    SEGMENT_HEADER_SIZE,
)


def count_bytes(text: str) -> int:
    """
    Return a rough number of bytes needed to send a text.

    A text shorter than one segment costs its encoded length. Longer texts
    are walked character by character so a multi-byte character is never
    split between segments, and a header is charged every time a segment
    is closed. The result over-counts true multipart billing on purpose.

    Args:
        text: Message content

    Returns:
        Byte count including segment headers
    """
    size = len(text.encode(TRANSMISSION_ENCODING))
    if size < SEGMENT_SIZE:
        return size

    total = 0
    segment_bytes = 0

    for char in text:
        n = len(char.encode(TRANSMISSION_ENCODING))

        if segment_bytes + n + SEGMENT_HEADER_SIZE > SEGMENT_SIZE:
            total += SEGMENT_HEADER_SIZE
            segment_bytes = 0

        total += n
        segment_bytes += n

    return total


def count_segments(text: str) -> int:
    """
    Return how many segments the text occupies under ``count_bytes`` rules.

    An empty text still needs one segment.
    """
    size = len(text.encode(TRANSMISSION_ENCODING))
    if size < SEGMENT_SIZE:
        return 1

    segments = 1
    segment_bytes = 0
    for char in text:
        n = len(char.encode(TRANSMISSION_ENCODING))
        if segment_bytes + n + SEGMENT_HEADER_SIZE > SEGMENT_SIZE:
            segments += 1
            segment_bytes = 0
        segment_bytes += n
    return segments
