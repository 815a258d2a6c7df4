"""Pure helpers operating on tokenised path segments."""

from __future__ import annotations

import re
import typing as t

PARENT: t.Final[str] = ".."
CURRENT: t.Final[str] = "."

# Separators stripped during tokenisation. ``:`` is included so drive
# specifiers such as ``C:`` collapse into a plain ``C`` segment.
SEPARATOR_CHARS: t.Final[str] = "/\\:"
_SEPARATOR_RE: t.Final[re.Pattern[str]] = re.compile(r"[/\\:]")


def tokenise(text: str) -> tuple[str, ...]:
    """Split *text* on every separator, discarding empty tokens."""
    return tuple(token for token in _SEPARATOR_RE.split(text) if token)


def is_rooted(text: str) -> bool:
    """Return ``True`` when *text* starts with a root marker or drive letter."""
    if text[:1] in ("/", "\\"):
        return True
    return len(text) >= 2 and text[1] == ":"


def is_blank(text: str | None) -> bool:
    """Return ``True`` for ``None``, empty or whitespace-only text."""
    return text is None or not text.strip()


def find_invalid_segment(segments: t.Iterable[str]) -> str | None:
    """Return the first segment that could not have come from :func:`tokenise`."""
    return next(
        (
            segment
            for segment in segments
            if not segment or any(char in segment for char in SEPARATOR_CHARS)
        ),
        None,
    )


def collapse(segments: t.Sequence[str]) -> tuple[tuple[str, ...], int]:
    """Resolve ``.`` and ``..`` in *segments*.

    The scan runs from the last segment to the first. Each ``..`` raises a
    pending-parent count that swallows the next ordinary segment found to its
    left. Returns the surviving segments together with the number of parent
    references left unresolved once the start of the path is reached.
    """
    kept: list[str] = []
    pending_up = 0
    for segment in reversed(segments):
        if segment == CURRENT:
            continue
        if segment == PARENT:
            pending_up += 1
            continue
        if pending_up:
            pending_up -= 1
            continue
        kept.append(segment)
    kept.reverse()
    return tuple(kept), pending_up


def common_prefix_length(left: t.Sequence[str], right: t.Sequence[str]) -> int:
    """Return how many leading segments *left* and *right* share."""
    count = 0
    for mine, theirs in zip(left, right):
        if mine != theirs:
            break
        count += 1
    return count


__all__ = [
    "CURRENT",
    "PARENT",
    "SEPARATOR_CHARS",
    "collapse",
    "common_prefix_length",
    "find_invalid_segment",
    "is_blank",
    "is_rooted",
    "tokenise",
]
