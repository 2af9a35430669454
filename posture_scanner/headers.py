# posture_scanner/headers.py
from typing import Mapping, Optional

import httpx

from .models import SecurityHeaders

# response header name -> SecurityHeaders field
SECURITY_HEADERS = {
    "strict-transport-security": "hsts",
    "content-security-policy": "csp",
    "x-frame-options": "x_frame_options",
    "x-content-type-options": "x_content_type_options",
    "referrer-policy": "referrer_policy",
    "permissions-policy": "permissions_policy",
}


def extract_security_headers(headers: Optional[Mapping[str, str]]) -> SecurityHeaders:
    """
    Reads the six security headers from an HTTPS response.
    No response means every header is absent. Values are passed through untouched.
    """
    if headers is None:
        return SecurityHeaders()
    if not isinstance(headers, httpx.Headers):
        headers = httpx.Headers(headers)
    return SecurityHeaders(**{field: headers.get(name) for name, field in SECURITY_HEADERS.items()})
