"""Ambient platform signal used to pick a default path rendering.

The value type never consults this module implicitly for anything other
than the default of a ``posix`` keyword; callers that want deterministic
output pass ``posix=True`` or ``posix=False`` explicitly.
"""

from __future__ import annotations

import os
import sys
import typing as t

# Tests set this override to emulate another platform (for example Windows)
# without needing to run on a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PORTABLE_PATH_PLATFORM_OVERRIDE"

# ``sys.platform`` prefixes whose native paths use backslashes. Prefixes
# match the start of the normalised platform name (``"win"`` for ``"win32"``).
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("win",)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def is_posix_environment(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current) uses POSIX paths."""
    platform_name = _current_platform(platform)
    return not platform_name.startswith(_WINDOWS_PREFIXES)


def directory_separator(platform: str | None = None) -> str:
    """Return the character separating directories on *platform*."""
    return "/" if is_posix_environment(platform) else "\\"


def path_separator(platform: str | None = None) -> str:
    """Return the character separating entries of a ``PATH``-style list."""
    return ":" if is_posix_environment(platform) else ";"


DIRECTORY_SEPARATOR: t.Final[str] = directory_separator()
PATH_SEPARATOR: t.Final[str] = path_separator()


__all__ = [
    "DIRECTORY_SEPARATOR",
    "PATH_SEPARATOR",
    "PLATFORM_OVERRIDE_ENV",
    "directory_separator",
    "is_posix_environment",
    "path_separator",
]
