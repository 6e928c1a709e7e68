# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient used by tests and dry runs."""

from __future__ import annotations

from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are looked up by `(method, url)` first and then by `url`; a
    `handler` callable, when given, takes precedence over both.
    """

    def __init__(
        self,
        responses: dict[str | tuple[str, str], HttpResponse] | None = None,
        handler: Callable[[HttpRequest], HttpResponse] | None = None,
    ):
        self._responses = responses or {}
        self._handler = handler
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse, *, method: str | None = None) -> None:
        key: str | tuple[str, str] = (method.upper(), url) if method else url
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        for key in ((request.method, request.url), request.url):
            if key in self._responses:
                return self._responses[key]
        return HttpResponse(ok=False, status_code=None, url=request.url, error_message="No stubbed response configured")

    def close(self) -> None:
        self.closed = True
