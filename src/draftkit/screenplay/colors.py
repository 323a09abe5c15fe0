"""Deterministic character-to-colour assignment.

The colour is a pure function of the name so a character keeps its colour
across documents and sessions; nothing is cached or persisted.
"""

from __future__ import annotations

from typing import Iterator

PALETTE: tuple[str, ...] = (
    "#1e40af",  # blue
    "#991b1b",  # red
    "#065f46",  # emerald
    "#5b21b6",  # violet
    "#9a3412",  # orange
    "#155e75",  # cyan
    "#86198f",  # fuchsia
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_units(name: str) -> Iterator[int]:
    # Astral characters count as two surrogate units, as in a browser string.
    data = name.encode("utf-16-le", "surrogatepass")
    for index in range(0, len(data), 2):
        yield int.from_bytes(data[index : index + 2], "little")


def character_hash(name: str) -> int:
    """``hash * 31 + code`` per UTF-16 unit, wrapped to a signed 32-bit int."""

    value = 0
    for unit in _utf16_units(name):
        value = _to_int32(unit + ((value << 5) - value))
    return value


def color_index(name: str) -> int:
    return abs(character_hash(name)) % len(PALETTE)


def character_color(name: str) -> str:
    return PALETTE[color_index(name)]


__all__ = ["PALETTE", "character_color", "character_hash", "color_index"]
