# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import header_value, normalize_headers
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .redirects import DEFAULT_MAX_REDIRECTS, RedirectState, is_redirect
from .url import normalize_url, strip_query_and_fragment

__all__ = [
    "DEFAULT_MAX_REDIRECTS",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "RedirectState",
    "StubHttpClient",
    "create_default_http_client",
    "header_value",
    "is_redirect",
    "normalize_headers",
    "normalize_url",
    "strip_query_and_fragment",
]
