"""Fuzzy line finder with scoring, match highlighting and a command-line filter."""

__version__ = "0.1.0"
__all__ = ["config", "fuzzy_matcher", "highlighter", "reader", "cli"]