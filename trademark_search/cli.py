"""
Command-line entry point for a single trademark search.

The result count and the JSON payload go to stdout. Error messages go to
stderr, so stdout only ever carries results.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from trademark_search.errors import InvalidQuery
from trademark_search.logging_utils import configure_logging, log_event
from trademark_search.service import TrademarkSearchService
from trademark_search.storage import render_results

logger = logging.getLogger(__name__)

# see https://tldp.org/LDP/abs/html/exitcodes.html
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run an IP Australia advanced trademark search for one word."
    )
    parser.add_argument("keyword", help="Single search word (no spaces).")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the JSON results (default: TRADEMARK_SEARCH_OUTPUT_PATH).",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (default: LOG_LEVEL or INFO).",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, service: TrademarkSearchService | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return EXIT_SUCCESS if exc.code == 0 else EXIT_INVALID

    configure_logging(args.log_level)
    try:
        summary = (service or TrademarkSearchService()).search(
            keyword=args.keyword,
            output_path=args.output,
        )
    except InvalidQuery as exc:
        print(exc.message, file=sys.stderr)
        log_event(logger, logging.WARNING, "trademark_search_rejected", error=exc.message)
        return EXIT_INVALID
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        log_event(
            logger,
            logging.ERROR,
            "trademark_search_failed",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return EXIT_FAILURE

    print(f"Results: {len(summary.results)}")
    print(render_results(summary.results))
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
