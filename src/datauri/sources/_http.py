"""HttpxFetcher: HTTP GET through httpx."""

from __future__ import annotations

import logging

from datauri.errors import TransportUnavailableError
from datauri.sources._source import FetchResponse

try:
    import httpx
except ImportError:  # pragma: no cover
    httpx = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpxFetcher:
    """Fetch remote resources with an ``httpx.Client``.

    A client can be injected (for example one built on ``httpx.MockTransport``);
    otherwise one is created per fetcher with the given timeout.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        follow_redirects: bool = True,
    ) -> None:
        """Initialize the fetcher, failing when httpx is not installed."""
        if httpx is None:
            msg = "Fetching remote data requires httpx; install datauri[http]."
            raise TransportUnavailableError(msg)
        if client is None:
            client = httpx.Client(timeout=timeout, follow_redirects=follow_redirects)
        self._client = client

    def __enter__(self) -> HttpxFetcher:
        """Return the fetcher for use as a context manager."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Close the underlying client."""
        self.close()

    def close(self) -> None:
        """Close the underlying client and its connection pool."""
        self._client.close()

    @property
    def client(self) -> httpx.Client:
        """Return the underlying httpx client."""
        return self._client

    def get(self, url: str) -> FetchResponse:
        """Issue a GET and buffer the whole response body.

        Transport failures are raised as ``ConnectionError``.
        """
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            msg = f"GET {url} failed: {exc}"
            raise ConnectionError(msg) from exc
        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return FetchResponse(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("content-type"),
        )
