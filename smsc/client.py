"""
Gateway Client
==============
Builds a draft per call, validates and encodes it, submits it through the
transport and turns the reply into a result or a ``GatewayError``.

Usage:
    from smsc import Client, ClientConfig, Cost, ValidityWindow

    client = Client(ClientConfig(login="me", password="secret"))
    result = client.send(
        "Hello",
        ["+71234567890"],
        Cost.COUNT_AND_BALANCE,
        ValidityWindow(2, 30),
    )
"""

from typing import Any, Iterable, Optional

import structlog

from smsc.config import ClientConfig, DEFAULT_URL
from smsc.exceptions import ConfigurationError, GatewayError
from smsc.http import HttpxTransport, Transport
from smsc.message import MessageDraft
from smsc.messaging.models import Charset, ReplyFormat
from smsc.options.compose import compose
from smsc.password import hash_password
from smsc.response import GatewayErrorReply, SendResult, parse_response

logger = structlog.get_logger(__name__)


class Client:
    """Client for the send endpoint of the gateway."""

    def __init__(self, config: ClientConfig, transport: Optional[Transport] = None):
        if not config.login:
            raise ConfigurationError("empty login or password")
        if not config.password and not config.password_md5:
            raise ConfigurationError("empty login or password")

        self.url = config.url or DEFAULT_URL
        self.login = config.login
        self._credential = config.password_md5 or hash_password(config.password)
        # Fails here on an unsupported client-level option
        self._defaults = compose(config.options)
        self._transport = transport or HttpxTransport(timeout=config.timeout)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def prepare(self, text: str, phones: Iterable[str], *options: Any) -> MessageDraft:
        """Return a draft with client defaults and per-call options applied."""
        per_call = compose(options)
        # a bare string is one phone number, not a sequence of characters
        if isinstance(phones, str):
            phones = [phones]
        draft = MessageDraft(
            sender_login=self.login,
            sender_credential=self._credential,
            text=text,
            recipients=list(phones),
            reply_format=ReplyFormat.JSON,
            charset=Charset.UTF8,
        )
        self._defaults.apply(draft)
        per_call.apply(draft)
        return draft

    def send(self, text: str, phones: Iterable[str], *options: Any) -> SendResult:
        """
        Send a text to one or more phone numbers.

        Raises:
            UnsupportedDirective: an option is not a known directive
            MessageTooLong, NoRecipients: draft failed validation
            TransportError: request or reply could not be exchanged
            GatewayError: gateway answered with an error envelope
        """
        draft = self.prepare(text, phones, *options)
        draft.validate()

        logger.debug(
            "Sending message",
            recipients=len(draft.recipients),
            size=draft.byte_count(),
        )
        body = self._transport.post_form(self.url, draft.to_form())
        reply = parse_response(body)

        if isinstance(reply, GatewayErrorReply):
            logger.warning(
                "Gateway rejected message",
                error_code=reply.code,
                error=reply.description,
                message_id=reply.id,
            )
            raise GatewayError(reply)

        logger.info("Message accepted", message_id=reply.id, count=reply.count)
        return reply
