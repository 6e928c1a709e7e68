# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ..errors import ErrorCategory


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of one reachability check.

    `response_time` is in milliseconds and is only set when a final response
    was received. `size` counts body bytes actually read (always 0 for HEAD).
    """

    reachable: bool
    http_method: str
    final_url: str | None = None
    size: int = 0
    response_time: float | None = None
    error_description: str | None = None
    status_code: int | None = None
    redirect_count: int = 0
    error_category: ErrorCategory | None = None

    def describe(self) -> str:
        """One-line, human readable summary used for failed probes."""
        target = self.final_url or "unknown URL"
        if self.reachable:
            return f"{self.http_method} {target} -> {self.status_code}"
        reason = self.error_description or "unreachable"
        return f"Request to {target} failed ({self.http_method}): {reason}"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["error_category"] = self.error_category.value if self.error_category else None
        return data

    def __str__(self) -> str:
        return self.describe()
