"""
Message Options
===============
Typed directives and their composition.
"""

from .models import Cost, Translit
from .directives import (
    Directive,
    CostReporting,
    AllRecipientsReport,
    FailedRecipientsReport,
    ValidityWindow,
    SenderId,
    Transliteration,
    MessageCharset,
    Combined,
    as_directive,
)
from .compose import compose, with_options

__all__ = [
    # Models
    "Cost",
    "Translit",
    # Directives
    "Directive",
    "CostReporting",
    "AllRecipientsReport",
    "FailedRecipientsReport",
    "ValidityWindow",
    "SenderId",
    "Transliteration",
    "MessageCharset",
    "Combined",
    # Composition
    "as_directive",
    "compose",
    "with_options",
]
