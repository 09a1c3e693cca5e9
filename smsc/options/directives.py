"""
Message Directives
==================
Immutable units of intent applied to a message draft.

Each directive owns one draft field. Applying several directives in a row
lets the later ones overwrite what the earlier ones set.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple, TYPE_CHECKING

from smsc.exceptions import InvalidDirective, InvalidValidityWindow, UnsupportedDirective
from smsc.messaging.models import Charset
from .models import Cost, Translit, MAX_VALID_HOURS, MAX_VALID_MINUTES

if TYPE_CHECKING:
    from smsc.message import MessageDraft


class Directive(ABC):
    """Base class for every directive kind."""

    @abstractmethod
    def apply(self, draft: "MessageDraft") -> None:
        """Mutate the field this directive owns."""
        pass


@dataclass(frozen=True)
class CostReporting(Directive):
    """Ask the gateway to report cost, optionally without sending."""
    cost: Cost

    def __post_init__(self):
        object.__setattr__(self, "cost", Cost(self.cost))

    def apply(self, draft: "MessageDraft") -> None:
        draft.cost_reporting = self.cost


@dataclass(frozen=True)
class AllRecipientsReport(Directive):
    """Include the status of every phone number in the reply."""
    enabled: bool = True

    def apply(self, draft: "MessageDraft") -> None:
        draft.all_recipients_report = True if self.enabled else None


@dataclass(frozen=True)
class FailedRecipientsReport(Directive):
    """Include the status of failed phone numbers in the reply."""
    enabled: bool = True

    def apply(self, draft: "MessageDraft") -> None:
        draft.failed_recipients_report = True if self.enabled else None


@dataclass(frozen=True)
class ValidityWindow(Directive):
    """
    How long the operator keeps trying to deliver a message.

    Hours go from 0 to 24 and minutes from 0 to 59. A zero window and
    anything past 24:00 are rejected when the directive is created.
    """
    hours: int
    minutes: int

    def __post_init__(self):
        h, m = self.hours, self.minutes
        if not (_is_int(h) and _is_int(m)):
            raise InvalidValidityWindow(h, m)
        if (
            h < 0 or m < 0
            or h > MAX_VALID_HOURS or m > MAX_VALID_MINUTES
            or (h == 0 and m == 0)
            or (h == MAX_VALID_HOURS and m > 0)
        ):
            raise InvalidValidityWindow(h, m)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"

    def apply(self, draft: "MessageDraft") -> None:
        draft.validity_window = self


@dataclass(frozen=True)
class SenderId(Directive):
    """
    Set the author of the SMS.

    The name must be registered on the account settings page.
    """
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidDirective(f"empty or non-string sender id {self.name!r}")

    def apply(self, draft: "MessageDraft") -> None:
        draft.sender_id = self.name


@dataclass(frozen=True)
class Transliteration(Directive):
    """Transliterate cyrillic text before sending."""
    mode: Translit = Translit.TRANSLIT

    def __post_init__(self):
        object.__setattr__(self, "mode", Translit(self.mode))

    def apply(self, draft: "MessageDraft") -> None:
        draft.transliteration_mode = self.mode


@dataclass(frozen=True)
class MessageCharset(Directive):
    """Override the charset label sent with the text."""
    charset: Charset

    def __post_init__(self):
        object.__setattr__(self, "charset", Charset(self.charset))

    def apply(self, draft: "MessageDraft") -> None:
        draft.charset = self.charset


@dataclass(frozen=True)
class Combined(Directive):
    """An ordered bundle of directives applied as one."""
    directives: Tuple[Directive, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "directives", tuple(as_directive(d) for d in self.directives)
        )

    def apply(self, draft: "MessageDraft") -> None:
        for directive in self.directives:
            directive.apply(draft)

    def __len__(self) -> int:
        return len(self.directives)


DIRECTIVE_TYPES = (
    CostReporting,
    AllRecipientsReport,
    FailedRecipientsReport,
    ValidityWindow,
    SenderId,
    Transliteration,
    MessageCharset,
    Combined,
)


def _is_int(value: Any) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def as_directive(value: Any) -> Directive:
    """
    Turn an option value into a directive.

    Directives pass through unchanged. Bare ``Cost``, ``Translit`` and
    ``Charset`` members are wrapped in their directive. Anything else is a
    caller bug and raises ``UnsupportedDirective``.
    """
    # Exact type check keeps user subclasses of Directive out of the closed set
    if type(value) in DIRECTIVE_TYPES:
        return value
    if isinstance(value, Cost):
        return CostReporting(value)
    if isinstance(value, Translit):
        return Transliteration(value)
    if isinstance(value, Charset):
        return MessageCharset(value)
    raise UnsupportedDirective(value)
