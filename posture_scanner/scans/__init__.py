# posture_scanner/scans/__init__.py
import asyncio
from typing import Optional, Tuple

import httpx

from ..config import get_settings


async def _open_response(client: httpx.AsyncClient, url: str, follow_redirects: bool) -> Tuple[int, httpx.Headers, httpx.URL]:
    # status line and headers only, the body is never read
    async with client.stream("GET", url, follow_redirects=follow_redirects) as resp:
        return resp.status_code, resp.headers, resp.url


async def fetch_response_head(
    client: httpx.AsyncClient, url: str, follow_redirects: bool, timeout: Optional[float] = None
) -> Tuple[int, httpx.Headers, httpx.URL]:
    """
    GET url and return (status, headers, final url) within one overall deadline.
    httpx timeouts apply per read, so a slow server is cut off here instead.
    Raises asyncio.TimeoutError when the deadline passes.
    """
    if timeout is None:
        timeout = get_settings().probe_timeout
    return await asyncio.wait_for(_open_response(client, url, follow_redirects), timeout)
