"""Request transport used by the chain client."""

import urllib.request
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)


class Transport(Protocol):
    """Anything that can GET a path relative to the node's RPC root.

    Raises on any transport-level problem (unreachable host, non-success
    status, timeout).
    """

    def get(self, path: str) -> bytes:
        ...


class HttpTransport:
    """Plain HTTP GET against a node RPC root. No retries, no pooling."""

    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str) -> bytes:
        url = self.url_for(path)
        req = urllib.request.Request(url)
        req.add_header("Accept", "application/json")

        # HTTPError (non-2xx) and URLError propagate to the caller
        with urllib.request.urlopen(req, timeout=self.timeout) as resp:
            body: bytes = resp.read()

        logger.debug("RPC response", url=url, size=len(body))
        return body
