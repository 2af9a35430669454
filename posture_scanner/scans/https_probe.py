# posture_scanner/scans/https_probe.py
SCAN_NAME = "HTTPS Availability"

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..models import ScanTarget
from . import fetch_response_head

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpsProbeResult:
    enabled: bool
    status_code: Optional[int] = None
    headers: Optional[httpx.Headers] = None


def is_success_status(status_code: int) -> bool:
    # anything the server answered below 400 counts, including the end of a redirect chain
    return 200 <= status_code < 400


async def run(target: ScanTarget, client: httpx.AsyncClient, timeout: Optional[float] = None) -> HttpsProbeResult:
    """
    GET https://host/ following redirects.
    Network failures (DNS, TLS, refused connection, timeout) degrade to enabled=False.
    """
    try:
        status_code, headers, final_url = await fetch_response_head(
            client, target.https_url, follow_redirects=True, timeout=timeout
        )
    except asyncio.TimeoutError:
        logger.info("HTTPS probe for %s hit its deadline", target.https_url)
        return HttpsProbeResult(enabled=False)
    except Exception as e:
        logger.info("HTTPS probe failed for %s: %r", target.https_url, e)
        return HttpsProbeResult(enabled=False)

    logger.debug("HTTPS probe %s -> %s (final url %s)", target.https_url, status_code, final_url)
    return HttpsProbeResult(enabled=is_success_status(status_code), status_code=status_code, headers=headers)
