# posture_scanner/scans/http_redirect.py
SCAN_NAME = "HTTP to HTTPS Redirect"

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..models import ScanTarget
from . import fetch_response_head

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = frozenset({301, 302, 307, 308})


@dataclass(frozen=True)
class HttpRedirectResult:
    redirects_to_https: bool
    status_code: Optional[int] = None
    location: Optional[str] = None


def is_https_redirect(status_code: int, location: Optional[str]) -> bool:
    # only the scheme of Location matters, not where it points
    return status_code in REDIRECT_STATUSES and (location or "").lower().startswith("https://")


async def run(target: ScanTarget, client: httpx.AsyncClient, timeout: Optional[float] = None) -> HttpRedirectResult:
    """Inspects the first hop of http://host/ only."""
    try:
        status_code, headers, _ = await fetch_response_head(
            client, target.http_url, follow_redirects=False, timeout=timeout
        )
    except asyncio.TimeoutError:
        logger.info("HTTP redirect probe for %s hit its deadline", target.http_url)
        return HttpRedirectResult(redirects_to_https=False)
    except Exception as e:
        logger.info("HTTP redirect probe failed for %s: %r", target.http_url, e)
        return HttpRedirectResult(redirects_to_https=False)

    location = headers.get("location")
    return HttpRedirectResult(
        redirects_to_https=is_https_redirect(status_code, location),
        status_code=status_code,
        location=location,
    )
