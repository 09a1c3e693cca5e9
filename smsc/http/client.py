import httpx
import structlog
from typing import List, Optional, Protocol, Tuple

from smsc.exceptions import TransportError, TransportTimeout

logger = structlog.get_logger(__name__)


class Transport(Protocol):
    """Anything that can submit a form and hand back the raw reply body."""

    def post_form(self, url: str, data: List[Tuple[str, str]]) -> bytes:
        ...


class HttpxTransport:
    """
    Synchronous form transport backed by ``httpx.Client``.

    A single attempt is made per call. Network failures and non-2xx
    statuses are mapped to ``TransportError``.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": "smsc-client"},
        )

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _map_exception(self, exc: Exception) -> TransportError:
        """Map httpx exceptions to transport errors."""
        if isinstance(exc, httpx.TimeoutException):
            return TransportTimeout("request timed out")
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            return TransportError(f"HTTP {status} error", status_code=status)
        return TransportError(f"request failed: {exc}")

    def post_form(self, url: str, data: List[Tuple[str, str]]) -> bytes:
        try:
            response = self.client.post(url, data=_form_dict(data))
            response.raise_for_status()
            return response.content
        except httpx.HTTPError as e:
            logger.error("Gateway request failed", url=url, error=str(e))
            raise self._map_exception(e)


def _form_dict(data: List[Tuple[str, str]]) -> dict:
    # httpx sends list values as repeated keys
    form: dict = {}
    for key, value in data:
        form.setdefault(key, []).append(value)
    return form
