"""
Credential Preparation
======================
The gateway accepts an MD5 hex digest of the password instead of the
plain password.
"""

import hashlib


def hash_password(password: str) -> str:
    """Return the lowercase MD5 hex digest of a password."""
    if not password:
        raise ValueError("Password cannot be empty")
    return hashlib.md5(password.encode("utf-8")).hexdigest()
