"""Command-line entry point: fuzzy-filter lines and print the best matches."""

from __future__ import annotations

import logging
import sys

from .config import parse_args
from .fuzzy_matcher import fuzzy_match
from .highlighter import highlight_match
from .reader import read_lines, read_lines_mmap

logger = logging.getLogger(__name__)

_USAGE = "Usage: blaze [--query <str>] [--limit N] [--file FILE] [--no-color]"


def main(argv: list[str] | None = None) -> int:
    """Run the filter; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Usage: blaze <search_query>", file=sys.stderr)
        return 1

    try:
        config = parse_args(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not config.query:
        print(_USAGE, file=sys.stderr)
        return 1

    logger.debug("Query: %s", config.query)

    try:
        if config.file_path:
            logger.debug("Opening File: %s", config.file_path)
            entries = read_lines_mmap(config.file_path)
        else:
            logger.debug("reading from stdin")
            entries = read_lines("", sys.stdin)
    except OSError as exc:
        print(f"Error: could not read {config.file_path}: {exc}", file=sys.stderr)
        return 1

    logger.debug("Read %d lines", len(entries))

    results = fuzzy_match(config.query, entries)
    logger.debug("Got %d matched lines", len(results))

    if config.limit > 0:
        results = results[: config.limit]

    for result in results:
        logger.debug("Output: %s (score: %d)", result.line, result.score)
        print(highlight_match(result.line, result.match_indices, not config.no_color))
    return 0


if __name__ == "__main__":
    sys.exit(main())