"""Shared helpers for the runnable examples."""

from __future__ import annotations

from functools import reduce

from portable_path import PathValue


def join(*parts: str) -> PathValue:
    """Append each of *parts* in turn, starting from an empty path."""
    return reduce(
        lambda acc, part: acc.append(PathValue.parse(part)),
        parts,
        PathValue.parse(""),
    )
