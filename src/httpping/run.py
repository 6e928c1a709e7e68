# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Repeat reachability checks and collect timings for a run."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable

from .models.probe import ProbeResult
from .models.run import RunOutcome
from .runtime import Reachability
from .stats import StatsAccumulator

logger = logging.getLogger(__name__)


def read_console_line() -> str:
    """Read one line from stdin; EOF reads as an empty line."""
    line = sys.stdin.readline()
    return line.strip()


class RunController:
    """
    Drive one invocation: N checks (or unbounded when `repeat_count` is 0).

    KeyboardInterrupt raised while sleeping, reading input or probing is not
    caught here; the caller decides how to tear down.
    """

    def __init__(
        self,
        reachability: Reachability,
        *,
        read_input: Callable[[], str] | None = None,
        sleep: Callable[[float], None] | None = None,
        on_result: Callable[[int, ProbeResult], None] | None = None,
    ):
        self.reachability = reachability
        self.read_input = read_input or read_console_line
        self.sleep = sleep or time.sleep
        self.on_result = on_result
        self.stats = StatsAccumulator()

    def run(
        self,
        url: str | None,
        repeat_count: int,
        wait: float,
        bytes: int,
        timeout: float,
        *,
        verbose: bool = False,
    ) -> RunOutcome:
        self.stats = StatsAccumulator()
        outcome = RunOutcome(samples=self.stats.samples)

        sequence = 0
        while True:
            sequence += 1
            target = url if url is not None else self.read_input().strip()
            if not target:
                logger.debug("Empty input after %d attempt(s); ending run", outcome.attempts)
                outcome.ended_by_empty_input = True
                return outcome
            outcome.last_input = target

            result = self.reachability.check_reachable(target, verbose=verbose, bytes=bytes, timeout=timeout)
            outcome.attempts += 1
            if result.reachable:
                outcome.success_count += 1
            if result.response_time is not None:
                self.stats.add(result.response_time)
            if self.on_result is not None:
                self.on_result(sequence, result)

            if repeat_count and sequence >= repeat_count:
                return outcome
            self.sleep(wait)


__all__ = ["RunController", "read_console_line"]
