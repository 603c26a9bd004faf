"""Terminal highlighting of matched characters."""

from __future__ import annotations

from typing import Sequence

_HIGHLIGHT_ON = "\033[1;32m"
_HIGHLIGHT_OFF = "\033[0m"


def highlight_match(line: str, indices: Sequence[int], color: bool = True) -> str:
    """Wrap the characters of ``line`` at ``indices`` (ascending) in colour codes."""
    if not color or not indices:
        return line
    pending = iter(indices)
    target = next(pending, None)
    parts = []
    for i, char in enumerate(line):
        if i == target:
            parts.append(f"{_HIGHLIGHT_ON}{char}{_HIGHLIGHT_OFF}")
            target = next(pending, None)
        else:
            parts.append(char)
    return "".join(parts)