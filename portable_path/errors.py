"""Exception hierarchy for portable-path."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .path import PathValue


class PortablePathError(Exception):
    """Base class for portable-path errors."""


class InvalidPathOperationError(PortablePathError, ValueError):
    """Raised when an operation is applied to paths it cannot combine."""

    def __init__(
        self, message: str, path: PathValue, root: PathValue | None = None
    ) -> None:
        super().__init__(message)
        self.path = path
        self.root = root


class RootLongerThanPathError(InvalidPathOperationError):
    """Raised by ``unroot`` when the root has more segments than the path."""

    def __init__(self, path: PathValue, root: PathValue) -> None:
        super().__init__("Root supplied is longer than full path", path, root)


class NotASubpathError(InvalidPathOperationError):
    """Raised by ``unroot`` when the path does not start with the root."""

    def __init__(self, path: PathValue, root: PathValue) -> None:
        super().__init__("Full path is not a subpath of root", path, root)


class NavigationAboveRootError(InvalidPathOperationError):
    """Raised when ``..`` would climb past the root of a rooted path."""

    def __init__(self, path: PathValue) -> None:
        super().__init__("Tried to navigate before path root", path)


__all__ = [
    "InvalidPathOperationError",
    "NavigationAboveRootError",
    "NotASubpathError",
    "PortablePathError",
    "RootLongerThanPathError",
]
