"""Rough read-aloud duration for a script."""

from __future__ import annotations

import math

CHARS_PER_SECOND = 12


def estimate_duration(text: str, *, chars_per_second: int = CHARS_PER_SECOND) -> int:
    if chars_per_second <= 0:
        raise ValueError("chars_per_second must be positive")
    return math.ceil(len(text) / chars_per_second)


def format_duration(seconds: int) -> str:
    minutes, rest = divmod(max(0, seconds), 60)
    return f"{minutes}m {rest}s"


__all__ = ["CHARS_PER_SECOND", "estimate_duration", "format_duration"]
