"""Platform-agnostic file path values.

Paths are parsed from POSIX or Windows text into an immutable segment
sequence, then normalised, combined, relativised and rendered back in either
style without touching the filesystem.
"""

from __future__ import annotations

from .errors import (
    InvalidPathOperationError,
    NavigationAboveRootError,
    NotASubpathError,
    PortablePathError,
    RootLongerThanPathError,
)
from .path import PathValue, parse_path
from .platform import (
    DIRECTORY_SEPARATOR,
    PATH_SEPARATOR,
    PLATFORM_OVERRIDE_ENV,
    directory_separator,
    is_posix_environment,
    path_separator,
)
from .result import Err, Ok, PathResult, try_navigate, try_normalise, try_unroot

__all__ = [
    "DIRECTORY_SEPARATOR",
    "PATH_SEPARATOR",
    "PLATFORM_OVERRIDE_ENV",
    "Err",
    "InvalidPathOperationError",
    "NavigationAboveRootError",
    "NotASubpathError",
    "Ok",
    "PathResult",
    "PathValue",
    "PortablePathError",
    "RootLongerThanPathError",
    "directory_separator",
    "is_posix_environment",
    "parse_path",
    "path_separator",
    "try_navigate",
    "try_normalise",
    "try_unroot",
]
