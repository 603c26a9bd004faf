"""Reading input lines from files or streams."""

from __future__ import annotations

import logging
import mmap
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


def _split_lines(data: str) -> list[str]:
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines_mmap(file_path: str) -> list[str]:
    """Read a file through a memory map and split it on newlines.

    Raises OSError if the file cannot be opened or mapped.
    """
    with open(file_path, "rb") as handle:
        with mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) if _size(handle) else _Empty() as mapped:
            raw = bytes(mapped)
    if not raw:
        return []
    return _split_lines(raw.decode("utf-8", errors="surrogateescape"))


def _size(handle) -> int:
    handle.seek(0, 2)
    size = handle.tell()
    handle.seek(0)
    return size


class _Empty:
    """Stand-in for a mapping of an empty file, which cannot be mapped."""

    def __enter__(self) -> bytes:
        return b""

    def __exit__(self, *exc_info) -> None:
        return None


def read_lines(file_path: str = "", stream: TextIO | None = None) -> list[str]:
    """Read lines from ``file_path``, or from ``stream`` (stdin by default) if no path is given.

    Raises OSError if the file cannot be opened.
    """
    if file_path:
        logger.debug("Opening file: %s", file_path)
        with open(file_path, encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
            lines = _collect(handle)
    else:
        lines = _collect(sys.stdin if stream is None else stream)
    logger.debug("Finished reading lines: %d", len(lines))
    return lines


def _collect(stream: TextIO) -> list[str]:
    lines = []
    for count, raw in enumerate(stream, start=1):
        line = raw[:-1] if raw.endswith("\n") else raw
        lines.append(line)
        if count % 10 == 0:
            logger.debug("Read line # %d : %s", count, line)
    return lines