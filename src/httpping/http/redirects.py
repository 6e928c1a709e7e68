# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Method-preserving redirect policy.

Each probe attempt owns one RedirectState. Redirects are followed by building
the next hop from the Location header, but the method is always forced back to
the one the attempt started with, so a HEAD probe stays a HEAD probe even
through a 303.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .headers import header_value
from .models import HttpRequest, HttpResponse
from .url import resolve_location

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = 10
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


def is_redirect(response: HttpResponse) -> bool:
    return (
        response.ok
        and response.status_code in REDIRECT_STATUSES
        and bool(header_value(response.headers, "location"))
    )


@dataclass
class RedirectState:
    method: str
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    count: int = 0

    @property
    def exhausted(self) -> bool:
        return self.count >= self.max_redirects

    def next_request(self, response: HttpResponse, request: HttpRequest) -> HttpRequest | None:
        """
        Return the request for the next hop, or None when the limit is reached.

        `count` only grows when a hop is actually granted.
        """
        if self.exhausted:
            logger.debug("Refusing redirect %d from %s (limit %d)", self.count + 1, request.url, self.max_redirects)
            return None
        self.count += 1
        base = response.url or request.url
        target = resolve_location(base, header_value(response.headers, "location"))
        logger.debug("Redirect %d/%d: %s -> %s (%s)", self.count, self.max_redirects, base, target, self.method)
        return replace(request, url=target, method=self.method)


__all__ = ["DEFAULT_MAX_REDIRECTS", "REDIRECT_STATUSES", "RedirectState", "is_redirect"]
