# tests/test_normalizer.py
import pytest
from pydantic import ValidationError

from posture_scanner.errors import InvalidUrl
from posture_scanner.normalizer import normalize_target


def test_bare_host_defaults_to_https():
    t = normalize_target("example.com")
    assert t.host == "example.com"
    assert t.https_url == "https://example.com/"
    assert t.http_url == "http://example.com/"


def test_whitespace_scheme_case_and_path_are_normalized():
    t = normalize_target("  HTTP://Example.COM/shop/cart?id=1#top \n")
    assert t.host == "example.com"
    assert t.https_url == "https://example.com/"
    assert t.http_url == "http://example.com/"


def test_explicit_port_is_kept():
    t = normalize_target("example.com:8443/login")
    assert t.host == "example.com:8443"
    assert t.https_url == "https://example.com:8443/"
    assert t.http_url == "http://example.com:8443/"


def test_default_port_for_scheme_is_dropped():
    assert normalize_target("https://example.com:443/").host == "example.com"
    assert normalize_target("http://example.com:80").host == "example.com"
    assert normalize_target("http://example.com:443").host == "example.com:443"


def test_userinfo_is_not_part_of_host():
    assert normalize_target("https://user:pw@example.com/").host == "example.com"


def test_ipv6_host_keeps_brackets():
    t = normalize_target("[::1]:8080")
    assert t.host == "[::1]:8080"
    assert t.https_url == "https://[::1]:8080/"


def test_idn_host_is_punycoded():
    assert normalize_target("bücher.example").host == "xn--bcher-kva.example"


def test_idn_uses_browser_rules_for_sharp_s():
    assert normalize_target("https://faß.de/").host == "xn--fa-hia.de"


def test_target_is_immutable():
    t = normalize_target("example.com")
    with pytest.raises(ValidationError):
        t.host = "evil.com"


@pytest.mark.parametrize("raw", ["", "   ", "https://", "http://", "example.com:99999", "example.com:abc", "exa mple.com"])
def test_unparseable_input_raises_invalid_url(raw):
    with pytest.raises(InvalidUrl) as exc:
        normalize_target(raw)
    assert exc.value.message
