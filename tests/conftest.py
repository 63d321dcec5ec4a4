"""
Pytest configuration and fixtures for LINE Pay SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from linepay_online import LinePayClient


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None
    callback: Optional[Callable[[], Awaitable[httpx.Response]]] = None


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> str:
        return urlsplit(self.url).query

    @property
    def body(self) -> str:
        return (self.content or b"").decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.body)


class _LocalHTTPXMock:
    """Minimal pytest-httpx style mock that also records outgoing requests."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def add_callback(
        self,
        callback: Callable[[], Awaitable[httpx.Response]],
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, callback=callback)
        )

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """`httpx_mock` fixture patching ``httpx.AsyncClient.request``."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, params=None, headers=None, content=None, **kwargs):
        mock.requests.append(
            RecordedRequest(method=method.upper(), url=str(url), headers=dict(headers or {}), content=content)
        )
        match = mock._pop_match(method, str(url))
        if match.exception is not None:
            raise match.exception
        if match.callback is not None:
            return await match.callback()
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    return mock


TRANSACTION_ID = "2023120112345678901"

# Mock response data
MOCK_RESPONSES = {
    "request": {
        "returnCode": "0000",
        "returnMessage": "Success.",
        "info": {
            "paymentUrl": {
                "web": "https://sandbox-web-pay.line.me/web/payment/wait?transactionReserveId=abc",
                "app": "line://pay/payment/abc",
            },
            "transactionId": 2023120112345678901,
            "paymentAccessToken": "187568751124",
        },
    },
    "confirm": {
        "returnCode": "0000",
        "returnMessage": "Success.",
        "info": {
            "orderId": "ORDER_20231201_001",
            "transactionId": 2023120112345678901,
            "payInfo": [{"method": "BALANCE", "amount": 100}],
            "packages": [
                {
                    "id": "PKG_1",
                    "amount": 100,
                    "userFeeAmount": 0,
                    "products": [{"name": "Test Product", "quantity": 1, "price": 100}],
                }
            ],
        },
    },
    "refund": {
        "returnCode": "0000",
        "returnMessage": "Success.",
        "info": {
            "refundTransactionId": 2023120112345679999,
            "refundDate": "2023-12-01T10:00:00Z",
        },
    },
    "details": {
        "returnCode": "0000",
        "returnMessage": "Success.",
        "info": [
            {
                "transactionId": 2023120112345678901,
                "orderId": "ORDER_20231201_001",
                "currency": "TWD",
                "amount": 100,
                "payStatus": "CAPTURE",
            }
        ],
    },
    "check": {
        "returnCode": "0000",
        "returnMessage": "Success.",
        "info": {"shipping": {"methodId": "SHIP_1", "feeAmount": 0}},
    },
    "ok": {
        "returnCode": "0000",
        "returnMessage": "Success.",
    },
}


@pytest.fixture
def channel_id() -> str:
    """Test channel ID."""
    return "1234567890"


@pytest.fixture
def channel_secret() -> str:
    """Test channel secret."""
    return "testsecret"


@pytest.fixture
def base_url() -> str:
    """Sandbox base URL."""
    return "https://sandbox-api-pay.line.me"


@pytest.fixture
def transaction_id() -> str:
    return TRANSACTION_ID


@pytest.fixture
async def client(channel_id: str, channel_secret: str) -> LinePayClient:
    """Create a sandbox test client."""
    client = LinePayClient(channel_id=channel_id, channel_secret=channel_secret, env="sandbox")
    yield client
    await client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


@pytest.fixture
def package() -> dict:
    return {
        "id": "PKG_1",
        "amount": 100,
        "name": "Test Package",
        "products": [{"name": "Test Product", "quantity": 1, "price": 100}],
    }


@pytest.fixture
def payment_body(package) -> dict:
    return {
        "amount": 100,
        "currency": "TWD",
        "orderId": "ORDER_20231201_001",
        "packages": [package],
        "redirectUrls": {
            "confirmUrl": "https://example.com/confirm",
            "cancelUrl": "https://example.com/cancel",
        },
    }
