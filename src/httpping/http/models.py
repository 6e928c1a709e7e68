# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probe executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """
    One hop of a probe as consumed by HttpClient implementations.

    Clients never follow redirects themselves; `deadline` is a `time.monotonic()`
    value bounding the body read, and `max_body_bytes` caps how much of the body
    is kept (0 means the body is not read at all).
    """

    url: str
    method: str = "HEAD"
    headers: Headers | None = None
    timeout: float | None = None
    deadline: float | None = None
    max_body_bytes: int = 0


@dataclass
class HttpResponse:
    """Normalized HTTP response, or a transport failure when `ok` is False."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def body_bytes_read(self) -> int:
        return int(self.meta.get("body_bytes_read", len(self.content)))


__all__ = ["Headers", "HttpRequest", "HttpResponse"]
