# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import time

import httpx

from ..config import ProbeSettings, load_probe_settings
from ..errors import categorize_exception
from .client import HttpClient
from .headers import normalize_headers
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper; issues exactly one hop per call."""

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_probe_settings()
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
                follow_redirects=False,
            ) as resp:
                content = bytearray()
                truncated = False
                if request.max_body_bytes > 0:
                    for chunk in resp.iter_bytes():
                        if request.deadline is not None and time.monotonic() > request.deadline:
                            raise httpx.ReadTimeout("Timed out while reading response body")
                        if not chunk:
                            continue
                        remaining = request.max_body_bytes - len(content)
                        if len(chunk) >= remaining:
                            content.extend(chunk[:remaining])
                            truncated = len(chunk) > remaining
                            break
                        content.extend(chunk)

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=normalize_headers(resp.headers),
                content=bytes(content),
                url=str(resp.url),
                meta={
                    "body_truncated": truncated,
                    "body_bytes_read": len(content),
                    "body_bytes_limit": request.max_body_bytes,
                },
            )
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                meta={"error_category": category},
            )

    def close(self) -> None:
        self._client.close()
