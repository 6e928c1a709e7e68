# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Probe executor.

A probe is a small state machine: a HEAD attempt, and a GET attempt only when
the server rejects HEAD for the resource. Every attempt has its own timeout
window and its own RedirectState, and follows redirects hop by hop.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, error_category_to_reason
from .http.client import HttpClient
from .http.models import HttpRequest, HttpResponse
from .http.redirects import RedirectState, is_redirect
from .http.url import SUPPORTED_SCHEMES
from .models.probe import ProbeResult

logger = logging.getLogger(__name__)

LIGHTWEIGHT_METHOD = "HEAD"
FALLBACK_METHOD = "GET"
METHOD_REJECTED_STATUSES = frozenset({405, 501})


@dataclass
class _Attempt:
    method: str
    redirects: RedirectState
    response: HttpResponse | None = None
    last_url: str | None = None
    elapsed_ms: float | None = None
    failure: ErrorCategory | None = None
    failure_detail: str | None = None

    @property
    def method_rejected(self) -> bool:
        return (
            self.failure is None
            and self.method == LIGHTWEIGHT_METHOD
            and self.response is not None
            and self.response.status_code in METHOD_REJECTED_STATUSES
        )


class ProbeExecutor:
    """Issue the HTTP request(s) for one reachability check."""

    def __init__(
        self,
        http_client: HttpClient,
        settings: ProbeSettings | None = None,
        *,
        clock: Callable[[], float] = time.perf_counter,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self.http_client = http_client
        self.settings = settings or load_probe_settings()
        self._clock = clock
        self._monotonic = monotonic

    def probe(self, url: str, bytes: int | None = None, timeout: float | None = None) -> ProbeResult:
        byte_cap = bytes if bytes is not None else self.settings.max_body_bytes
        budget = timeout if timeout is not None else self.settings.timeout

        attempt = self._attempt(url, LIGHTWEIGHT_METHOD, 0, budget)
        if attempt.method_rejected:
            logger.debug(
                "%s rejected with %s for %s; falling back to %s",
                LIGHTWEIGHT_METHOD,
                attempt.response.status_code if attempt.response else None,
                url,
                FALLBACK_METHOD,
            )
            attempt = self._attempt(url, FALLBACK_METHOD, byte_cap, budget)
        return self._to_result(attempt)

    def _attempt(self, url: str, method: str, byte_cap: int, timeout: float) -> _Attempt:
        attempt = _Attempt(method=method, redirects=RedirectState(method, self.settings.max_redirects))
        headers: dict[str, str] = {}
        if byte_cap > 0:
            headers["Range"] = f"bytes=0-{byte_cap - 1}"

        started = self._clock()
        deadline = self._monotonic() + timeout
        request = HttpRequest(url=url, method=method, headers=headers, deadline=deadline, max_body_bytes=byte_cap)

        while True:
            remaining = deadline - self._monotonic()
            if remaining <= 0:
                attempt.failure = ErrorCategory.TIMEOUT
                attempt.failure_detail = f"no final response within {timeout:g}s"
                return attempt

            request = replace(request, timeout=remaining)
            response = self.http_client.request(request)
            if self._monotonic() > deadline:
                attempt.failure = ErrorCategory.TIMEOUT
                attempt.failure_detail = f"no final response within {timeout:g}s"
                return attempt
            if not response.ok:
                attempt.failure = response.meta.get("error_category") or ErrorCategory.UNKNOWN_ERROR
                attempt.failure_detail = response.error_message
                return attempt

            attempt.response = response
            attempt.last_url = response.url or request.url
            if not is_redirect(response):
                attempt.elapsed_ms = (self._clock() - started) * 1000.0
                return attempt

            next_request = attempt.redirects.next_request(response, request)
            if next_request is None:
                attempt.failure = ErrorCategory.TOO_MANY_REDIRECTS
                attempt.failure_detail = f"stopped after {attempt.redirects.max_redirects} redirects"
                return attempt
            scheme = next_request.url.split(":", 1)[0].lower()
            if scheme not in SUPPORTED_SCHEMES:
                attempt.failure = ErrorCategory.INVALID_URL
                attempt.failure_detail = f"redirect to unsupported URL {next_request.url}"
                return attempt
            request = next_request

    def _to_result(self, attempt: _Attempt) -> ProbeResult:
        response = attempt.response
        status_code = response.status_code if response is not None else None

        if attempt.failure is not None:
            reason = error_category_to_reason(attempt.failure)
            description = f"{reason}: {attempt.failure_detail}" if attempt.failure_detail else reason
            logger.debug("%s probe failed: %s", attempt.method, description)
            return ProbeResult(
                reachable=False,
                http_method=attempt.method,
                final_url=attempt.last_url,
                status_code=status_code,
                redirect_count=attempt.redirects.count,
                error_description=description,
                error_category=attempt.failure,
            )

        size = response.body_bytes_read if response is not None and attempt.method != LIGHTWEIGHT_METHOD else 0
        reachable = True
        description = None
        category = None
        if self.settings.require_success_status and not (status_code is not None and 200 <= status_code < 400):
            reachable = False
            category = ErrorCategory.HTTP_STATUS
            description = f"{error_category_to_reason(category)}: HTTP {status_code}"

        return ProbeResult(
            reachable=reachable,
            http_method=attempt.method,
            final_url=attempt.last_url,
            size=size,
            response_time=attempt.elapsed_ms,
            status_code=status_code,
            redirect_count=attempt.redirects.count,
            error_description=description,
            error_category=category,
        )


__all__ = ["FALLBACK_METHOD", "LIGHTWEIGHT_METHOD", "METHOD_REJECTED_STATUSES", "ProbeExecutor"]
