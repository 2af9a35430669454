# tests/conftest.py
from typing import Callable, Dict, Optional

import httpx
import pytest

ALL_SECURITY_HEADERS = {
    "Strict-Transport-Security": "max-age=63072000; includeSubDomains",
    "Content-Security-Policy": "default-src 'self'",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), geolocation=()",
}


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def site(https: Optional[Dict] = None, http: Optional[Dict] = None):
    """
    Builds a MockTransport handler for one host.
    `https`/`http` are dicts with status and headers; None means the scheme is unreachable.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        endpoint = https if request.url.scheme == "https" else http
        if endpoint is None:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(endpoint.get("status", 200), headers=endpoint.get("headers", {}))
    return handler


@pytest.fixture
def hardened_site():
    return site(
        https={"status": 200, "headers": ALL_SECURITY_HEADERS},
        http={"status": 301, "headers": {"Location": "https://example.com/"}},
    )


@pytest.fixture
def plain_http_site():
    return site(https=None, http={"status": 200})
