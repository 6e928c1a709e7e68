# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade for reachability checks."""

from __future__ import annotations

import logging
from contextlib import suppress

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, InvalidURL, error_category_to_reason
from .http.client import HttpClient, create_default_http_client
from .http.url import normalize_url
from .models.probe import ProbeResult
from .probe import LIGHTWEIGHT_METHOD, ProbeExecutor

logger = logging.getLogger(__name__)


class Reachability:
    """
    Convenience wrapper that wires one HTTP client into a ProbeExecutor.

    The same client (and its connection pool) is reused for every check of a
    run; close it with `close()` or by using the instance as a context manager.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: ProbeSettings | None = None):
        self.settings = settings or load_probe_settings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.executor = ProbeExecutor(self.http_client, self.settings)

    def check_reachable(
        self,
        raw_url: str,
        *,
        verbose: bool = False,
        bytes: int | None = None,
        timeout: float | None = None,
    ) -> ProbeResult:
        """Normalize `raw_url` and probe it; never raises for probe-level failures."""
        try:
            url = normalize_url(raw_url)
        except InvalidURL as exc:
            logger.debug("Not probing %r: %s", raw_url, exc.reason)
            return ProbeResult(
                reachable=False,
                http_method=LIGHTWEIGHT_METHOD,
                error_description=f"{error_category_to_reason(ErrorCategory.INVALID_URL)}: {exc.reason} ({raw_url!r})",
                error_category=ErrorCategory.INVALID_URL,
            )
        if verbose:
            logger.info("Probing %s", url)
        return self.executor.probe(url, bytes=bytes, timeout=timeout)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> Reachability:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
