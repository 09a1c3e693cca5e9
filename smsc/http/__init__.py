from .client import Transport, HttpxTransport

__all__ = [
    "Transport",
    "HttpxTransport",
]
