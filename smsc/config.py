"""
Client Configuration
====================
Credentials, endpoint and client-level default directives.
"""

import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

DEFAULT_URL = "https://smsc.ru/sys/send.php"


@dataclass
class ClientConfig:
    """Configuration for a gateway client."""
    login: str = ""
    password: str = ""
    password_md5: str = ""
    url: str = DEFAULT_URL
    timeout: float = 10.0
    # Applied to every message before per-call directives
    options: List[Any] = field(default_factory=list)

    @classmethod
    def from_env(cls, options: Optional[List[Any]] = None) -> "ClientConfig":
        """Build a config from ``SMSC_*`` environment variables."""
        return cls(
            login=os.environ.get("SMSC_LOGIN", ""),
            password=os.environ.get("SMSC_PASSWORD", ""),
            password_md5=os.environ.get("SMSC_PASSWORD_MD5", ""),
            url=os.environ.get("SMSC_URL", "") or DEFAULT_URL,
            timeout=float(os.environ.get("SMSC_TIMEOUT", "10.0")),
            options=list(options or []),
        )
