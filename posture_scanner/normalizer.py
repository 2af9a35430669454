# posture_scanner/normalizer.py
import re
from urllib.parse import urlsplit

import idna

from .errors import InvalidUrl
from .models import ScanTarget

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_DEFAULT_PORTS = {"http": 80, "https": 443}
_FORBIDDEN_HOST_CHARS = set(" \t\r\n<>\"{}|\\^`%[]")


def _canonical_host(raw: str) -> str:
    """
    Returns host[:port] the way a browser URL parser reports it:
    lowercased, IDN labels punycoded, default port for the scheme dropped.
    """
    try:
        parts = urlsplit(raw)
        port = parts.port
    except ValueError as e:
        raise InvalidUrl(f"Invalid URL: {raw!r} ({e})") from e

    hostname = parts.hostname
    if not hostname:
        raise InvalidUrl(f"Invalid URL: {raw!r} has no host")

    is_ipv6 = ":" in hostname
    if not is_ipv6:
        if any(ch in _FORBIDDEN_HOST_CHARS for ch in hostname):
            raise InvalidUrl(f"Invalid URL: {raw!r} has an invalid host")
        if not hostname.isascii():
            try:
                # UTS46 non-transitional, as browsers do: faß.de -> xn--fa-hia.de
                hostname = idna.encode(hostname, uts46=True).decode("ascii")
            except UnicodeError as e:
                raise InvalidUrl(f"Invalid URL: {raw!r} has an invalid host") from e

    host = f"[{hostname}]" if is_ipv6 else hostname
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme.lower()):
        host = f"{host}:{port}"
    return host


def normalize_target(raw: str) -> ScanTarget:
    """
    Turns free-form user input into a ScanTarget.

    Missing schemes default to https://. Any path, query or fragment in the
    input is dropped; both probe URLs always point at the root of the host.
    """
    url = (raw or "").strip()
    if not _SCHEME_RE.match(url):
        url = "https://" + url
    host = _canonical_host(url)
    return ScanTarget(host=host, https_url=f"https://{host}/", http_url=f"http://{host}/")
