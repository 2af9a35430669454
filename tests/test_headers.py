# tests/test_headers.py
import httpx

from posture_scanner.headers import extract_security_headers
from posture_scanner.models import SecurityHeaders

from .conftest import ALL_SECURITY_HEADERS


def test_no_response_means_all_absent():
    assert extract_security_headers(None) == SecurityHeaders()


def test_lookup_is_case_insensitive():
    raw = {k.upper(): v for k, v in ALL_SECURITY_HEADERS.items()}
    h = extract_security_headers(raw)
    assert h.hsts == "max-age=63072000; includeSubDomains"
    assert h.csp == "default-src 'self'"
    assert h.x_frame_options == "DENY"
    assert h.x_content_type_options == "nosniff"
    assert h.referrer_policy == "strict-origin-when-cross-origin"
    assert h.permissions_policy == "camera=(), geolocation=()"


def test_missing_headers_are_none_and_values_untouched():
    h = extract_security_headers(httpx.Headers({"x-frame-options": "ALLOW-FROM https://a.example/", "Server": "nginx"}))
    assert h.x_frame_options == "ALLOW-FROM https://a.example/"
    assert h.hsts is None
    assert h.permissions_policy is None


def test_headers_serialize_with_wire_names():
    dumped = extract_security_headers({"Referrer-Policy": "no-referrer"}).model_dump(by_alias=True)
    assert dumped == {
        "hsts": None,
        "csp": None,
        "xFrameOptions": None,
        "xContentTypeOptions": None,
        "referrerPolicy": "no-referrer",
        "permissionsPolicy": None,
    }
