# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run-level outcome model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RunOutcome:
    success_count: int = 0
    samples: list[float] = field(default_factory=list)
    attempts: int = 0
    last_input: str | None = None
    ended_by_empty_input: bool = False

    @property
    def succeeded(self) -> bool:
        return self.success_count > 0
