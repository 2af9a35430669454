# posture_scanner/evaluator.py
from dataclasses import dataclass
from typing import List, Optional

from .models import Finding, ProbeSignals


@dataclass(frozen=True)
class Check:
    key: str
    pass_message: str
    fail_message: str
    advice: Optional[str]


TRANSPORT_CHECKS = [
    Check(
        "httpsEnabled",
        "HTTPS is enabled",
        "HTTPS does not respond correctly",
        "Install a valid TLS certificate and serve the site over HTTPS.",
    ),
    Check(
        "httpRedirectsToHttps",
        "HTTP redirects to HTTPS",
        "HTTP does not redirect to HTTPS",
        "Configure a 301/308 redirect from http:// to https://.",
    ),
]

# paired with the SecurityHeaders field each one reads
HEADER_CHECKS = [
    ("hsts", Check(
        "hsts",
        "HSTS present",
        "HSTS missing",
        "Add Strict-Transport-Security: max-age=15552000; includeSubDomains; preload.",
    )),
    ("csp", Check(
        "csp",
        "CSP present",
        "CSP missing",
        "Start with: Content-Security-Policy: default-src 'self'; upgrade-insecure-requests;",
    )),
    ("x_frame_options", Check(
        "x-frame-options",
        "X-Frame-Options present",
        "X-Frame-Options missing",
        "Use X-Frame-Options: DENY (or SAMEORIGIN) to prevent clickjacking.",
    )),
    ("x_content_type_options", Check(
        "x-content-type-options",
        "X-Content-Type-Options present",
        "X-Content-Type-Options missing",
        "Use X-Content-Type-Options: nosniff to block MIME sniffing.",
    )),
    ("referrer_policy", Check(
        "referrer-policy",
        "Referrer-Policy present",
        "Referrer-Policy missing",
        "Use Referrer-Policy: strict-origin-when-cross-origin.",
    )),
    ("permissions_policy", Check(
        "permissions-policy",
        "Permissions-Policy present",
        "Permissions-Policy missing",
        "Add Permissions-Policy to restrict browser APIs (e.g. camera=(), geolocation=()).",
    )),
]

FINDING_KEYS = [c.key for c in TRANSPORT_CHECKS] + [c.key for _, c in HEADER_CHECKS]
HEADER_KEYS = frozenset(c.key for _, c in HEADER_CHECKS)


def header_present(value: Optional[str]) -> bool:
    # an empty header counts as missing
    return bool(value)


def make_finding(check: Check, ok: bool) -> Finding:
    return Finding(
        key=check.key,
        ok=ok,
        message=check.pass_message if ok else check.fail_message,
        advice=None if ok else check.advice,
    )


def evaluate_findings(signals: ProbeSignals) -> List[Finding]:
    """Eight findings, always in FINDING_KEYS order."""
    https_check, redirect_check = TRANSPORT_CHECKS
    findings = [
        make_finding(https_check, signals.https_enabled),
        make_finding(redirect_check, signals.http_redirects_to_https),
    ]
    for field, check in HEADER_CHECKS:
        findings.append(make_finding(check, header_present(getattr(signals.headers, field))))
    return findings
