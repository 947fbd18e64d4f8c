"""Formatting and parsing of byte counts with SI prefixes."""

from __future__ import annotations

import re

_UINT64_MAX = 2**64 - 1
_PREFIXES = " kMGTPE"
_PATTERN = re.compile(r"([0-9]+) ?([kMGTPE]?)B?")


def humansize(size: int) -> str:
    """Return ``size`` as "<N> B" or "<X> <prefix>B", rounded down.

    X is either 10..999 or 1.0..9.9, and the prefix is one of k, M, G, T, P, E.
    """
    if size < 0 or size > _UINT64_MAX:
        raise ValueError(f"size out of range: {size}")
    if size < 1000:
        return f"{size} B"

    # Keep 10 * size / 1000^shift in scaled.
    scaled = size // 100
    shift = 1
    while scaled >= 10000:
        scaled //= 1000
        shift += 1
    prefix = _PREFIXES[shift]

    if scaled < 100:
        return f"{scaled // 10}.{scaled % 10} {prefix}B"
    return f"{scaled // 10} {prefix}B"


def humansize_parse(text: str) -> int:
    """Parse a string matching ``[0-9]+ ?[kMGTPE]?B?`` as a size in bytes."""
    match = _PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid size: {text!r}")
    digits, prefix = match.groups()
    value = int(digits)
    if prefix:
        value *= 1000 ** _PREFIXES.index(prefix)
    if value > _UINT64_MAX:
        raise ValueError(f"size too large: {text!r}")
    return value