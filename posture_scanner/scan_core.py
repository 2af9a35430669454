# posture_scanner/scan_core.py
import asyncio
import logging
from typing import List, Optional, Tuple

import httpx

from .config import get_settings
from .evaluator import evaluate_findings
from .headers import extract_security_headers
from .models import Finding, Priority, ProbeSignals, ScanResult, ScanTarget
from .normalizer import normalize_target
from .scans import http_redirect, https_probe
from .scoring import compute_score, select_priorities

logger = logging.getLogger(__name__)

PROBES = (https_probe, http_redirect)


def available_scans() -> List[str]:
    return [p.SCAN_NAME for p in PROBES]


def build_client() -> httpx.AsyncClient:
    settings = get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.probe_timeout),
        verify=settings.verify_tls,
        headers={"User-Agent": settings.user_agent},
    )


async def run_probes(
    target: ScanTarget, client: httpx.AsyncClient, timeout: Optional[float] = None
) -> Tuple[https_probe.HttpsProbeResult, http_redirect.HttpRedirectResult]:
    # independent probes, each under its own deadline, joined before evaluation
    if timeout is None:
        timeout = get_settings().probe_timeout
    https_result, redirect_result = await asyncio.gather(
        https_probe.run(target, client, timeout=timeout),
        http_redirect.run(target, client, timeout=timeout),
    )
    return https_result, redirect_result


def collect_signals(
    https_result: https_probe.HttpsProbeResult, redirect_result: http_redirect.HttpRedirectResult
) -> ProbeSignals:
    return ProbeSignals(
        https_enabled=https_result.enabled,
        http_redirects_to_https=redirect_result.redirects_to_https,
        headers=extract_security_headers(https_result.headers),
    )


def compose_result(
    target: ScanTarget,
    signals: ProbeSignals,
    score: int,
    findings: List[Finding],
    priorities: List[Priority],
) -> ScanResult:
    return ScanResult(
        host=target.host,
        https_enabled=signals.https_enabled,
        http_redirects_to_https=signals.http_redirects_to_https,
        headers=signals.headers,
        score=score,
        findings=findings,
        priorities=priorities,
    )


async def scan_async(url: str, client: Optional[httpx.AsyncClient] = None) -> ScanResult:
    """
    Full posture check of one host.

    Raises InvalidUrl when the input cannot be normalized. Network failures never
    raise; they show up as failing findings in the result.
    """
    target = normalize_target(url)
    logger.info("Scanning %s", target.host)

    if client is None:
        async with build_client() as own_client:
            https_result, redirect_result = await run_probes(target, own_client)
    else:
        https_result, redirect_result = await run_probes(target, client)

    signals = collect_signals(https_result, redirect_result)
    findings = evaluate_findings(signals)
    score = compute_score(findings, signals.https_enabled, signals.http_redirects_to_https)
    priorities = select_priorities(findings, get_settings().max_priorities)

    logger.info(
        "Scan of %s done: score=%d https=%s redirect=%s",
        target.host, score, signals.https_enabled, signals.http_redirects_to_https,
    )
    return compose_result(target, signals, score, findings, priorities)


def scan(url: str) -> ScanResult:
    return asyncio.run(scan_async(url))
