# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL normalization and display helpers."""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit, urlunsplit

import httpx

from ..errors import InvalidURL

DEFAULT_SCHEME = "https"
SUPPORTED_SCHEMES = frozenset({"http", "https"})

_SCHEME_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:(?P<rest>.*)$", re.DOTALL)


def has_scheme(value: str) -> bool:
    """True for `scheme:...` input; `host:port[/path]` is not a scheme."""
    match = _SCHEME_PREFIX_RE.match(value)
    if not match:
        return False
    rest = match.group("rest")
    if rest.startswith("//"):
        return True
    port = rest.split("/", 1)[0]
    return not (port and port.isdigit())


def normalize_url(raw: str) -> str:
    """
    Turn user input into an absolute http(s) URL.

    Input without a `scheme://` prefix is assumed to be a host (and optional
    path), so `https://` is prepended. The returned string is the validated
    candidate itself, which makes the function idempotent on its own output.
    """
    text = str(raw or "").strip()
    if not text:
        raise InvalidURL(raw, "empty input")
    if any(ch.isspace() for ch in text):
        raise InvalidURL(raw, "contains whitespace")

    candidate = text if has_scheme(text) else f"{DEFAULT_SCHEME}://{text}"

    try:
        parsed = httpx.URL(candidate)
        port = urlsplit(candidate).port
    except (httpx.InvalidURL, ValueError) as exc:
        raise InvalidURL(raw, str(exc)) from exc

    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise InvalidURL(raw, f"unsupported scheme {parsed.scheme!r}")
    if not parsed.host:
        raise InvalidURL(raw, "missing host")
    if port is not None and not 0 < port < 65536:
        raise InvalidURL(raw, f"invalid port {port}")
    return candidate


def resolve_location(base_url: str, location: str) -> str:
    """Resolve a redirect `Location` against the URL that returned it."""
    return urljoin(base_url, location.strip())


def strip_query_and_fragment(url: str | None) -> str:
    """Drop `?query` and `#fragment` for display."""
    if not url:
        return "unknown"
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


__all__ = [
    "DEFAULT_SCHEME",
    "SUPPORTED_SCHEMES",
    "has_scheme",
    "normalize_url",
    "resolve_location",
    "strip_query_and_fragment",
]
