"""
SMSC Exceptions
===============
Exception classes for message preparation, transport and gateway replies.
"""

from typing import Optional


class SMSCError(Exception):
    """Base exception for everything raised by the smsc package."""

    prefix = "smsc: "

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.prefix}{message}")


class ConfigurationError(SMSCError):
    """Raised when a client is created without login or password."""
    pass


class MessageValidationError(SMSCError):
    """Raised when a draft fails validation before submission."""
    pass


class MessageTooLong(MessageValidationError):
    """Raised when the text needs more bytes than five segments hold."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"too long text to send ({size} > {limit} bytes)")


class NoRecipients(MessageValidationError):
    """Raised when the recipient list is empty."""

    def __init__(self):
        super().__init__("empty phones list")


class UnsupportedDirective(SMSCError, TypeError):
    """Raised when an unknown object is passed where a directive is expected."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"unsupported directive {type(value).__name__}")


class InvalidDirective(SMSCError, ValueError):
    """Raised when a directive is created with an unusable value."""
    pass


class InvalidValidityWindow(InvalidDirective):
    """Raised when a validity window is outside 00:01..24:00."""

    def __init__(self, hours: object, minutes: object):
        self.hours = hours
        self.minutes = minutes
        super().__init__(f"invalid period for valid ({hours!r}:{minutes!r})")


class TransportError(SMSCError):
    """Raised when the request could not be delivered or read back."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TransportTimeout(TransportError):
    """Raised specifically on timeouts."""
    pass


class ResponseDecodeError(TransportError):
    """Raised when the reply body is not a JSON object."""
    pass


class GatewayError(SMSCError):
    """
    Raised when the gateway answers with an error envelope.

    The parsed reply is kept on ``reply`` so callers can read the code and
    the id of a partially accepted send.
    """

    prefix = ""

    def __init__(self, reply):
        self.reply = reply
        super().__init__(str(reply))

    @property
    def code(self) -> int:
        return self.reply.code

    @property
    def description(self) -> str:
        return self.reply.description

    @property
    def id(self) -> Optional[int]:
        return self.reply.id
