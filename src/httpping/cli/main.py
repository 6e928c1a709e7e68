# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpping CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..config import ProbeSettings, load_probe_settings
from ..http import create_default_http_client, strip_query_and_fragment
from ..log import setup_logging
from ..models.probe import ProbeResult
from ..run import RunController
from ..runtime import Reachability
from ..stats import RunStatistics, StatsAccumulator

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("the repeat count should be zero (continuous) or a positive number")
    return parsed


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("should be a positive number")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from exc
    if not parsed > 0:
        raise argparse.ArgumentTypeError("should be a positive number")
    return parsed


def build_parser(settings: ProbeSettings | None = None) -> argparse.ArgumentParser:
    defaults = settings or ProbeSettings()
    parser = argparse.ArgumentParser(
        prog="httpping",
        description="Check whether an HTTP/HTTPS URL is reachable, like ping but over HTTP.",
        epilog="Exit status is 0 when at least one request succeeded.",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="URL to check (https:// is assumed when no scheme is given); read from stdin when omitted",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the exact URL that responded, the method used and the time taken",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=_non_negative_int,
        default=1,
        help="Number of times to repeat the check (0 for continuous, Ctrl-C to interrupt)",
    )
    parser.add_argument(
        "-i",
        dest="wait",
        metavar="WAIT",
        type=_positive_float,
        default=defaults.wait,
        help="Seconds to wait between requests (default: %(default)s)",
    )
    parser.add_argument(
        "-b",
        "--bytes",
        type=_positive_int,
        default=defaults.max_body_bytes,
        help="Number of body bytes to ask for; only used for a GET request (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_float,
        default=defaults.timeout,
        help="Seconds to wait for each reply (default: %(default)s)",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for self-signed targets)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per request instead of text",
    )
    return parser


def _format_ms(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.3f}"


def format_result(result: ProbeResult, sequence: int, *, verbose: bool) -> str:
    if not result.reachable:
        return result.describe()
    url = strip_query_and_fragment(result.final_url)
    if verbose:
        return (
            f"{result.size} bytes from {url} http_seq={sequence} "
            f"type={result.http_method} time={_format_ms(result.response_time)} ms"
        )
    return f"Response received from {url} in {_format_ms(result.response_time)} ms"


def format_summary(target: str, repeat_count: int, success_count: int, stats: RunStatistics) -> list[str]:
    values = "/".join(_format_ms(v) for v in (stats.min, stats.mean, stats.max, stats.stddev))
    return [
        "",
        f"--- {target} httpping statistics ---",
        f"{repeat_count} requests sent, with {success_count} successful. min/avg/max/stddev = {values} ms",
    ]


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    settings: ProbeSettings = load_probe_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    def _emit(sequence: int, result: ProbeResult) -> None:
        if args.json:
            print(json.dumps({"http_seq": sequence, **result.to_dict()}, sort_keys=True), flush=True)
        else:
            print(format_result(result, sequence, verbose=args.verbose), flush=True)

    http_client = create_default_http_client(settings)
    try:
        with Reachability(http_client=http_client, settings=settings) as reachability:
            controller = RunController(reachability, on_result=_emit)
            outcome = controller.run(
                args.url,
                args.count,
                args.wait,
                args.bytes,
                args.timeout,
                verbose=args.verbose,
            )
    except KeyboardInterrupt:
        logger.info("Program interrupted. Exiting.")
        return EXIT_INTERRUPTED

    if outcome.ended_by_empty_input:
        print("No input received. Exiting.")
        return EXIT_SUCCESS

    if args.count > 1 and not args.json:
        summary = StatsAccumulator(outcome.samples).summary()
        for line in format_summary(outcome.last_input or "", args.count, outcome.success_count, summary):
            print(line)

    return EXIT_SUCCESS if outcome.succeeded else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
