"""Tests for HttpxFetcher."""

import httpx
import pytest

import datauri.sources._http as http_module
from datauri import Data, TransportUnavailableError
from datauri.sources import FetchResponse, Fetcher, HttpxFetcher


def _client(handler: object) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))  # type: ignore[arg-type]


def test_satisfies_protocol() -> None:
    assert isinstance(HttpxFetcher(_client(lambda request: httpx.Response(200))), Fetcher)


def test_default_client_is_created() -> None:
    fetcher = HttpxFetcher(timeout=1.5)
    assert isinstance(fetcher.client, httpx.Client)
    assert fetcher.client.timeout.read == 1.5
    assert fetcher.client.follow_redirects is True


def test_get_buffers_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        return httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png"})

    response = HttpxFetcher(_client(handler)).get("https://example.org/a.png")
    assert response == FetchResponse(status_code=200, content=b"\x89PNG", content_type="image/png")


def test_get_without_content_type() -> None:
    response = HttpxFetcher(_client(lambda request: httpx.Response(404))).get("https://example.org/missing")
    assert response.status_code == 404
    assert response.content == b""
    assert response.content_type is None


def test_transport_error_becomes_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        msg = "timed out"
        raise httpx.ReadTimeout(msg, request=request)

    with pytest.raises(ConnectionError, match="timed out") as exc_info:
        HttpxFetcher(_client(handler)).get("https://example.org/slow")
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


def test_missing_httpx_raises_transport_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(http_module, "httpx", None)
    with pytest.raises(TransportUnavailableError, match="httpx"):
        HttpxFetcher()


def test_build_from_url_without_httpx(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(http_module, "httpx", None)
    with pytest.raises(TransportUnavailableError):
        Data.build_from_url("https://example.org/a.png")


def test_context_manager_closes_client() -> None:
    with HttpxFetcher(_client(lambda request: httpx.Response(200))) as fetcher:
        assert fetcher.client.is_closed is False
        fetcher.get("https://example.org/")
    assert fetcher.client.is_closed is True
