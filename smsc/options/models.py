"""
Option Models
=============
Enumerated values carried by message directives.
"""

from enum import IntEnum


class Cost(IntEnum):
    """Whether the reply should carry cost information (``cost``)."""
    WITHOUT_SEND = 1
    COUNT = 2
    COUNT_AND_BALANCE = 3


class Translit(IntEnum):
    """Transliteration modes (``translit``)."""
    TRANSLIT = 1
    KLINOPIS = 2


# Validity window bounds
MAX_VALID_HOURS = 24
MAX_VALID_MINUTES = 59
