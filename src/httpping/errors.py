# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from collections.abc import Iterator
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    TOO_MANY_REDIRECTS = "TOO_MANY_REDIRECTS"
    INVALID_URL = "INVALID_URL"
    HTTP_STATUS = "HTTP_STATUS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class InvalidURL(ValueError):
    """Raised when input cannot be normalized into an absolute http(s) URL."""

    def __init__(self, raw: str, reason: str):
        super().__init__(f"Invalid URL {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "getaddrinfo failed",
    "no address associated",
)


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps the socket/ssl error that caused a ConnectError, so the cause
    chain is inspected before falling back to the message text.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT
    if isinstance(exc, httpx.TooManyRedirects):
        return ErrorCategory.TOO_MANY_REDIRECTS
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol, InvalidURL)):
        return ErrorCategory.INVALID_URL

    for link in _exception_chain(exc):
        if isinstance(link, (ssl.SSLError, ssl.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(link, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR
        if isinstance(link, (TimeoutError, socket.timeout)):
            return ErrorCategory.TIMEOUT

    message = str(exc).lower()
    if "certificate" in message or "ssl" in message or "tls" in message:
        return ErrorCategory.SSL_ERROR
    if any(marker in message for marker in _DNS_MARKERS):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR
    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Request timed out",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Could not connect to server",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.TOO_MANY_REDIRECTS: "Too many redirects",
        ErrorCategory.INVALID_URL: "Invalid URL",
        ErrorCategory.HTTP_STATUS: "Unsuccessful HTTP status",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")


__all__ = ["ErrorCategory", "InvalidURL", "categorize_exception", "error_category_to_reason"]
