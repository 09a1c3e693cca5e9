"""
Directive Composition
=====================
Merge many directives into one, applied strictly in order.
"""

from typing import Any, Iterable, Optional

from smsc.messaging.models import Charset
from .models import Cost, Translit
from .directives import DIRECTIVE_TYPES, Combined


def compose(directives: Optional[Iterable[Any]]) -> Combined:
    """
    Combine an ordered sequence of directives into a single directive.

    Every item is checked up front so a bad value fails here, before any
    draft is touched.
    """
    if directives is None:
        return Combined()
    if type(directives) in DIRECTIVE_TYPES or isinstance(directives, (Cost, Translit, Charset)):
        directives = [directives]
    return Combined(tuple(directives))


def with_options(*values: Any) -> Combined:
    """Shorthand for ``compose(values)``."""
    return compose(values)

