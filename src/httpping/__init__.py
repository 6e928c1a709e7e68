# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpping package entrypoint.

Checks whether an HTTP/HTTPS endpoint is reachable, the way `ping` does for
ICMP: HEAD first with a GET fallback, method-preserving redirects, response
timing, and min/avg/max/stddev over a run. HTTP behavior is abstracted behind
an injectable client interface, and results are typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, InvalidURL
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    RedirectState,
    StubHttpClient,
    create_default_http_client,
    normalize_url,
)
from .log import setup_logging
from .models import ProbeResult, RunOutcome
from .probe import ProbeExecutor
from .run import RunController
from .runtime import Reachability
from .stats import RunStatistics, StatsAccumulator, summarize
from .version import __version__

__all__ = [
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "InvalidURL",
    "ProbeExecutor",
    "ProbeResult",
    "ProbeSettings",
    "Reachability",
    "RedirectState",
    "RunController",
    "RunOutcome",
    "RunStatistics",
    "StatsAccumulator",
    "StubHttpClient",
    "create_default_http_client",
    "load_probe_settings",
    "normalize_url",
    "setup_logging",
    "summarize",
    "__version__",
]
