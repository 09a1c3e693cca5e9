"""
Message Draft
=============
The record assembled for one send call, its validation and its wire form.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from smsc.exceptions import MessageTooLong, NoRecipients
from smsc.messaging.models import Charset, ReplyFormat, MAX_MESSAGE_SIZE
from smsc.messaging.segmentation import count_bytes
from smsc.options.directives import ValidityWindow
from smsc.options.models import Cost, Translit

FormData = List[Tuple[str, str]]


@dataclass
class MessageDraft:
    """
    What will be sent to the gateway and how.

    Optional fields hold ``None`` until a directive sets them; ``None`` is
    never a valid directive value, so the encoder drops those keys.
    """
    sender_login: str = ""
    sender_credential: str = ""
    text: str = ""
    recipients: List[str] = field(default_factory=list)
    reply_format: Optional[ReplyFormat] = None
    charset: Optional[Charset] = None
    cost_reporting: Optional[Cost] = None
    all_recipients_report: Optional[bool] = None
    failed_recipients_report: Optional[bool] = None
    validity_window: Optional[ValidityWindow] = None
    sender_id: Optional[str] = None
    transliteration_mode: Optional[Translit] = None

    def byte_count(self) -> int:
        return count_bytes(self.text)

    def validate(self) -> None:
        """
        Check the draft before submission.

        Raises:
            MessageTooLong: text needs more than five segments
            NoRecipients: recipient list is empty
        """
        size = self.byte_count()
        if size > MAX_MESSAGE_SIZE:
            raise MessageTooLong(size, MAX_MESSAGE_SIZE)
        if not self.recipients:
            raise NoRecipients()

    def to_form(self) -> FormData:
        """Return the URL-encodable form for a request to the gateway."""
        form: FormData = [
            ("login", self.sender_login),
            ("psw", self.sender_credential),
            ("mes", self.text),
        ]
        form.extend(("phones", phone) for phone in list(self.recipients))

        optional = (
            ("charset", self.charset),
            ("fmt", self.reply_format),
            ("cost", self.cost_reporting),
            ("op", self.all_recipients_report),
            ("err", self.failed_recipients_report),
            ("valid", self.validity_window),
            ("sender", self.sender_id),
            ("translit", self.transliteration_mode),
        )
        for key, value in optional:
            if value is not None:
                form.append((key, format_value(value)))
        return form


def format_value(value: object) -> str:
    """Render a draft field the way the gateway expects it."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Charset):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, ValidityWindow):
        return str(value)
    raise TypeError(f"cannot render {type(value).__name__} for the gateway")


def parse_form(pairs: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    """Group form pairs by key, keeping the order of repeated values."""
    values: Dict[str, List[str]] = {}
    for key, value in pairs:
        values.setdefault(key, []).append(value)
    return values
