"""Command-line option parsing."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class Config:
    """Options controlling a search run."""

    query: str = ""
    limit: int = -1
    no_color: bool = False
    file_path: str = ""


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_args(argv: list[str]) -> Config:
    """Build a Config from command-line arguments (without the program name).

    Unknown options are reported on stderr and otherwise ignored.
    """
    config = Config()
    args = iter(argv)
    remaining = len(argv)
    for arg in args:
        remaining -= 1
        has_value = remaining > 0
        if arg == "--file" and has_value:
            config.file_path = next(args)
            remaining -= 1
        elif arg == "--query" and has_value:
            config.query = next(args)
            remaining -= 1
        elif arg == "--limit" and has_value:
            config.limit = _parse_int(next(args))
            remaining -= 1
        elif arg == "--no-color":
            config.no_color = True
        elif not arg.startswith("-"):
            if not config.query:
                config.query = arg
        else:
            print(f"Unknown Argument: {arg}", file=sys.stderr)
    return config