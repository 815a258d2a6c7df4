"""Tagged success/failure values for the path operations that can fail.

``PathValue.normalise``, ``PathValue.unroot`` and ``PathValue.navigate`` raise
:class:`~portable_path.errors.InvalidPathOperationError` subclasses. The
``try_*`` helpers here run the same operations and hand the outcome back as
an :class:`Ok` or :class:`Err` instead, which suits ``match`` statements::

    match try_unroot(full, root):
        case Ok(relative):
            ...
        case Err(NotASubpathError()):
            ...
"""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .errors import InvalidPathOperationError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .path import PathValue

T = t.TypeVar("T")
E = t.TypeVar("E", bound=Exception)


@dc.dataclass(frozen=True, slots=True)
class Ok(t.Generic[T]):
    """Successful outcome wrapping ``value``."""

    value: T

    def is_ok(self) -> bool:
        """Return ``True``."""
        return True

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dc.dataclass(frozen=True, slots=True)
class Err(t.Generic[E]):
    """Failed outcome wrapping the ``error`` that was raised."""

    error: E

    def is_ok(self) -> bool:
        """Return ``False``."""
        return False

    def unwrap(self) -> t.NoReturn:
        """Re-raise the wrapped error."""
        raise self.error


PathResult: t.TypeAlias = "Ok[PathValue] | Err[InvalidPathOperationError]"


def _capture(operation: t.Callable[[], PathValue]) -> PathResult:
    try:
        return Ok(operation())
    except InvalidPathOperationError as exc:
        return Err(exc)


def try_normalise(path: PathValue) -> PathResult:
    """Normalise *path*, reporting ``NavigationAboveRootError`` as ``Err``."""
    return _capture(path.normalise)


def try_unroot(path: PathValue, root: PathValue) -> PathResult:
    """Unroot *path* from *root*, reporting failures as ``Err``."""
    return _capture(lambda: path.unroot(root))


def try_navigate(base: PathValue, navigation: PathValue) -> PathResult:
    """Navigate from *base* by *navigation*, reporting failures as ``Err``."""
    return _capture(lambda: base.navigate(navigation))


__all__ = [
    "Err",
    "Ok",
    "PathResult",
    "try_navigate",
    "try_normalise",
    "try_unroot",
]
