"""
Gateway Replies
===============
Parsing of the JSON reply into either a send result or an error reply.

Both shapes come back without a shared tag, so the body is decoded once
and the presence of ``error_code``/``error`` decides which one it is.
"""

import json
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from smsc.exceptions import ResponseDecodeError


class PhoneStatus(BaseModel):
    """Delivery details of one recipient."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    phone: str
    mccmnc: str = ""
    cost: str = ""
    status: Optional[str] = None
    error: Optional[str] = None


class SendResult(BaseModel):
    """Success envelope."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: int = 0
    count: int = Field(0, alias="cnt")
    cost: Optional[str] = None
    balance: Optional[str] = None
    phones: Optional[List[PhoneStatus]] = None

    def __str__(self) -> str:
        return f"OK - {self.count} SMS, ID - {self.id}"


class GatewayErrorReply(BaseModel):
    """Failure envelope; ``id`` is set when part of a send was accepted."""
    model_config = ConfigDict(populate_by_name=True)

    code: int = Field(alias="error_code")
    description: str = Field("", alias="error")
    id: Optional[int] = None

    def __str__(self) -> str:
        s = f"ERROR = {self.code} ({self.description})"
        if self.id is not None:
            s += f", ID - {self.id}"
        return s


Reply = Union[SendResult, GatewayErrorReply]


def _error_code(data: dict) -> object:
    code = data.get("error_code")
    # "0" and 0 mean the same code
    if isinstance(code, str) and code.strip().lstrip("-").isdigit():
        code = int(code)
    return code


def _is_error(data: dict) -> bool:
    return _error_code(data) not in (None, 0, "") or bool(data.get("error"))


def parse_response(body: Union[bytes, str]) -> Reply:
    """
    Decode a gateway reply.

    Returns:
        GatewayErrorReply when an error code or description is present,
        SendResult otherwise

    Raises:
        ResponseDecodeError: body is not a JSON object of either shape
    """
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise ResponseDecodeError(f"malformed reply: {e}")

    if not isinstance(data, dict):
        raise ResponseDecodeError(f"unexpected reply of type {type(data).__name__}")

    try:
        if _is_error(data):
            code = _error_code(data)
            data["error_code"] = 0 if code in (None, "") else code
            return GatewayErrorReply.model_validate(data)
        return SendResult.model_validate(data)
    except ValidationError as e:
        raise ResponseDecodeError(f"unexpected reply shape: {e.error_count()} errors")
