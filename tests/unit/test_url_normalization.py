# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from httpping.errors import InvalidURL
from httpping.http.url import normalize_url, resolve_location, strip_query_and_fragment


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("example.com", "https://example.com"),
        ("  example.com/path?q=1  ", "https://example.com/path?q=1"),
        ("localhost:8080", "https://localhost:8080"),
        ("http://example.com", "http://example.com"),
        ("HTTPS://Example.com/a", "HTTPS://Example.com/a"),
    ],
)
def test_normalize_url_prepends_https_once(raw, expected):
    assert normalize_url(raw) == expected


@pytest.mark.parametrize("raw", ["example.com", "apple.co.uk/store", "http://x.test:81/a#b"])
def test_normalize_url_is_idempotent(raw):
    once = normalize_url(raw)
    assert normalize_url(once) == once
    assert once.lower().count("://") == 1


@pytest.mark.parametrize(
    "raw",
    [
        "ftp://example.com",
        "file:///etc/passwd",
        "ws://example.com/socket",
        "",
        "   ",
        "exa mple.com",
        "https://",
        "example.com:notaport",
        "mailto:user@example.com",
    ],
)
def test_normalize_url_rejects_invalid_input(raw):
    with pytest.raises(InvalidURL):
        normalize_url(raw)


def test_invalid_url_is_a_value_error_with_reason():
    with pytest.raises(ValueError) as excinfo:
        normalize_url("ftp://example.com")
    assert "unsupported scheme" in excinfo.value.reason


def test_resolve_location_handles_relative_and_absolute_targets():
    assert resolve_location("https://a.test/x/y", "/z") == "https://a.test/z"
    assert resolve_location("https://a.test/x/y", "w") == "https://a.test/x/w"
    assert resolve_location("https://a.test/x", "http://b.test/") == "http://b.test/"


def test_strip_query_and_fragment():
    assert strip_query_and_fragment("https://a.test/p?q=1#frag") == "https://a.test/p"
    assert strip_query_and_fragment(None) == "unknown"


def test_host_port_input_is_not_mistaken_for_a_scheme():
    assert normalize_url("localhost:8080/health") == "https://localhost:8080/health"
    with pytest.raises(InvalidURL) as excinfo:
        normalize_url("mailto:user@example.com")
    assert "unsupported scheme" in excinfo.value.reason
