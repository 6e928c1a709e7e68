# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for httpping."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeResult
from .run import RunOutcome

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeResult",
    "RunOutcome",
]
