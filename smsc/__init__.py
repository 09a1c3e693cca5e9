"""
SMSC Client Library
===================
Message preparation and reply parsing for the SMSC bulk SMS gateway.
"""

__version__ = "0.1.0"

# Messaging
from smsc.messaging import (
    count_bytes,
    count_segments,
    Charset,
    ReplyFormat,
    MAX_MESSAGE_SIZE,
)

# Options
from smsc.options import (
    Cost,
    Translit,
    Directive,
    CostReporting,
    AllRecipientsReport,
    FailedRecipientsReport,
    ValidityWindow,
    SenderId,
    Transliteration,
    MessageCharset,
    Combined,
    compose,
    with_options,
)

# Draft
from smsc.message import MessageDraft, parse_form

# Replies
from smsc.response import (
    SendResult,
    PhoneStatus,
    GatewayErrorReply,
    parse_response,
)

# Exceptions
from smsc.exceptions import (
    SMSCError,
    ConfigurationError,
    MessageValidationError,
    MessageTooLong,
    NoRecipients,
    UnsupportedDirective,
    InvalidDirective,
    InvalidValidityWindow,
    TransportError,
    TransportTimeout,
    ResponseDecodeError,
    GatewayError,
)

# Client
from smsc.config import ClientConfig, DEFAULT_URL
from smsc.http import Transport, HttpxTransport
from smsc.password import hash_password
from smsc.client import Client

__all__ = [
    # Messaging
    "count_bytes",
    "count_segments",
    "Charset",
    "ReplyFormat",
    "MAX_MESSAGE_SIZE",
    # Options
    "Cost",
    "Translit",
    "Directive",
    "CostReporting",
    "AllRecipientsReport",
    "FailedRecipientsReport",
    "ValidityWindow",
    "SenderId",
    "Transliteration",
    "MessageCharset",
    "Combined",
    "compose",
    "with_options",
    # Draft
    "MessageDraft",
    "parse_form",
    # Replies
    "SendResult",
    "PhoneStatus",
    "GatewayErrorReply",
    "parse_response",
    # Exceptions
    "SMSCError",
    "ConfigurationError",
    "MessageValidationError",
    "MessageTooLong",
    "NoRecipients",
    "UnsupportedDirective",
    "InvalidDirective",
    "InvalidValidityWindow",
    "TransportError",
    "TransportTimeout",
    "ResponseDecodeError",
    "GatewayError",
    # Client
    "ClientConfig",
    "DEFAULT_URL",
    "Transport",
    "HttpxTransport",
    "hash_password",
    "Client",
]
