# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response-time statistics for a run."""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RunStatistics:
    """min/mean/max/population standard deviation, in milliseconds."""

    min: float | None = None
    mean: float | None = None
    max: float | None = None
    stddev: float | None = None

    @property
    def defined(self) -> bool:
        return self.min is not None


def summarize(samples: Sequence[float]) -> RunStatistics:
    """Summarize a non-empty sequence of response times."""
    if not samples:
        raise ValueError("cannot summarize an empty sample sequence")
    values = [float(sample) for sample in samples]
    return RunStatistics(
        min=min(values),
        mean=statistics.fmean(values),
        max=max(values),
        stddev=statistics.pstdev(values),
    )


@dataclass
class StatsAccumulator:
    samples: list[float] = field(default_factory=list)

    def add(self, sample: float) -> None:
        self.samples.append(float(sample))

    @property
    def count(self) -> int:
        return len(self.samples)

    def summary(self) -> RunStatistics:
        """Like summarize(), but every field is None when nothing was collected."""
        if not self.samples:
            return RunStatistics()
        return summarize(self.samples)


__all__ = ["RunStatistics", "StatsAccumulator", "summarize"]
