"""Immutable, platform-agnostic path value type.

A :class:`PathValue` is a tuple of segments plus a flag recording whether the
source text was rooted. Parsing accepts POSIX separators, Windows separators
and drive letters interchangeably, so ``C:\\dir\\file`` and ``/C/dir/file``
describe the same value. Rendering is explicit: :meth:`PathValue.to_posix_path`
and :meth:`PathValue.to_windows_path` never consult the host, while the
environmental helpers fall back to :mod:`portable_path.platform` only when the
caller leaves ``posix`` unset.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

from . import _segments as segs
from .errors import NavigationAboveRootError, NotASubpathError, RootLongerThanPathError
from .platform import is_posix_environment

logger = logging.getLogger(__name__)


def _render_posix(segments: t.Sequence[str], *, rooted: bool) -> str:
    joined = "/".join(segments)
    return f"/{joined}" if rooted else joined


def _render_rooted_windows(segments: t.Sequence[str]) -> str:
    """Render rooted *segments* with a drive letter or a UNC-style head."""
    if not segments:
        return "\\"
    head, *rest = segments
    is_drive = len(head) == 1
    root = f"{head}:" if is_drive else f"\\{head}"
    if not rest:
        return f"{root}\\" if is_drive else root
    return "\\".join((root, *rest))


def _file_name_start(rendered: str) -> int:
    """Return the index just past the last separator in *rendered*."""
    return max(rendered.rfind("/"), rendered.rfind("\\")) + 1


@dc.dataclass(frozen=True, slots=True, eq=False)
class PathValue:
    """A parsed file path.

    Build instances from text with :meth:`parse`. The initialiser takes
    already-tokenised segments and exists for transformations that assemble
    new paths from old ones.

    Attributes
    ----------
    segments : tuple[str, ...]
        Path components in left-to-right order. Never contains ``/``, ``\\``
        or ``:``.
    rooted : bool
        Whether the source text started at a filesystem root (``/``, ``\\``
        or a drive letter).
    empty : bool
        Whether the source text was ``None``, empty or whitespace only.
    """

    segments: tuple[str, ...]
    rooted: bool = False
    empty: bool = False

    def __post_init__(self) -> None:
        """Freeze *segments* into a tuple and reject separator characters."""
        segments = tuple(self.segments)
        invalid = segs.find_invalid_segment(segments)
        if invalid is not None:
            msg = f"invalid path segment: {invalid!r}"
            raise ValueError(msg)
        object.__setattr__(self, "segments", segments)

    # -- construction ---------------------------------------------------

    @classmethod
    def parse(cls, text: str | None) -> PathValue:
        """Parse *text* into a path. Any string is accepted."""
        if text is not None and not isinstance(text, str):
            msg = f"cannot convert {type(text).__name__} to PathValue"
            raise TypeError(msg)
        raw = text or ""
        return cls(
            segs.tokenise(raw),
            rooted=segs.is_rooted(raw),
            empty=segs.is_blank(text),
        )

    @staticmethod
    def is_rooted_text(text: str) -> bool:
        """Return ``True`` if *text* has a root element such as ``/`` or ``C:``."""
        return segs.is_rooted(text)

    # -- composition ----------------------------------------------------

    def append(self, right: PathValue) -> PathValue:
        """Append *right* to this path, ignoring navigation semantics."""
        if self.empty:
            return right
        return PathValue(self.segments + right.segments, rooted=self.rooted)

    def navigate(self, navigation: PathValue) -> PathValue:
        """Apply *navigation* to this path the way ``cd`` would.

        A rooted *navigation* replaces this path entirely.
        """
        if navigation.rooted:
            return navigation.normalise()
        combined = PathValue(self.segments + navigation.segments, rooted=self.rooted)
        return combined.normalise()

    def normalise(self) -> PathValue:
        """Remove ``.`` segments and resolve ``..`` against earlier segments.

        Raises
        ------
        NavigationAboveRootError
            If this path is rooted and ``..`` would climb past the root.
        """
        kept, pending_up = segs.collapse(self.segments)
        if self.rooted and pending_up:
            logger.debug(
                "Refusing to normalise %r: %d unresolved parent reference(s)",
                self.to_posix_path(),
                pending_up,
            )
            raise NavigationAboveRootError(self)
        return PathValue((segs.PARENT,) * pending_up + kept, rooted=self.rooted)

    def unroot(self, root: PathValue) -> PathValue:
        """Strip the leading segments of *root* and return a relative path.

        Raises
        ------
        RootLongerThanPathError
            If *root* runs past the end of this path.
        NotASubpathError
            If a segment of *root* differs from this path at the same position.
        """
        for index, segment in enumerate(root.segments):
            if index >= len(self.segments):
                logger.debug(
                    "Root %r is longer than %r",
                    root.to_posix_path(),
                    self.to_posix_path(),
                )
                raise RootLongerThanPathError(self, root)
            if self.segments[index] != segment:
                logger.debug(
                    "%r is not below %r", self.to_posix_path(), root.to_posix_path()
                )
                raise NotASubpathError(self, root)
        return PathValue(self.segments[len(root.segments) :], rooted=False)

    def relative_to(self, source: PathValue) -> PathValue:
        """Return a minimal relative path leading from *source* to this path.

        The last segment of *source* is treated as a file, so it is not
        climbed out of: relative to ``/a/x/y`` the directory ``/a/x`` is the
        starting point. Pass a path naming a file inside the directory when
        the last segment is a directory.
        """
        if len(self.segments) == 1 and len(source.segments) == 1:
            return self

        common = segs.common_prefix_length(self.segments, source.segments)
        if common == 0:
            return self if self.rooted else source.navigate(self)

        remainder = self.segments[common:]
        if common == len(source.segments):
            return PathValue(remainder, rooted=False)

        ascents = len(source.segments) - common - 1
        return PathValue((segs.PARENT,) * ascents + remainder, rooted=False)

    def ensure_extension(
        self, extension: str, *, posix: bool | None = None
    ) -> PathValue:
        """Return this path with ``.extension`` appended unless already present."""
        extension = extension.removeprefix(".")
        current = self.extension(posix=posix)
        if current is not None and current == extension.lower():
            return self
        *parents, last = self.segments or ("",)
        return PathValue((*parents, f"{last}.{extension}"), rooted=self.rooted)

    # -- rendering ------------------------------------------------------

    def to_posix_path(self) -> str:
        """Render the segments with ``/`` separators, as they stand."""
        return _render_posix(self.segments, rooted=self.rooted)

    def to_windows_path(self) -> str:
        """Render the normalised segments with ``\\`` separators.

        A rooted path that climbs above its root cannot be normalised and is
        rendered with its segments as they stand.
        """
        kept, pending_up = segs.collapse(self.segments)
        if not self.rooted:
            return "\\".join((segs.PARENT,) * pending_up + kept)
        if pending_up:
            return _render_rooted_windows(self.segments)
        return _render_rooted_windows(kept)

    def to_environmental_path(self, *, posix: bool | None = None) -> str:
        """Render for the current environment unless *posix* says otherwise."""
        use_posix = is_posix_environment() if posix is None else posix
        return self.to_posix_path() if use_posix else self.to_windows_path()

    # -- accessors ------------------------------------------------------

    def is_empty(self) -> bool:
        """Return ``True`` if the source text was empty."""
        return self.empty

    def last_element(self) -> str | None:
        """Return the last segment (file or directory), or ``None``."""
        return self.segments[-1] if self.segments else None

    def has_extension(self, *, posix: bool | None = None) -> bool:
        """Return ``True`` if the final component contains a ``.``."""
        rendered = self.to_environmental_path(posix=posix)
        return rendered.rfind(".") >= _file_name_start(rendered)

    def extension(self, *, posix: bool | None = None) -> str | None:
        """Return the lower-cased extension without its ``.``, or ``None``."""
        rendered = self.to_environmental_path(posix=posix)
        dot = rendered.rfind(".")
        if dot < _file_name_start(rendered):
            return None
        return rendered[dot + 1 :].lower()

    def file_name_without_extension(self, *, posix: bool | None = None) -> str:
        """Return the final rendered component with its last extension removed.

        ``../dir/file.exe.old`` gives ``file.exe``; ``myfile.txt`` gives
        ``myfile``.
        """
        rendered = self.to_environmental_path(posix=posix)
        name = rendered[_file_name_start(rendered) :]
        dot = name.rfind(".")
        return name if dot < 0 else name[:dot]

    def file_name_with_extension(self, *, posix: bool | None = None) -> str:
        """Return the last segment, with its extension lower-cased."""
        base = self.file_name_without_extension(posix=posix)
        extension = self.extension(posix=posix)
        return base if extension is None else f"{base}.{extension}"

    def directory_name(self, *, posix: bool | None = None) -> str:
        """Return the rendered path without its final component."""
        rendered = self.to_environmental_path(posix=posix)
        return rendered[: max(_file_name_start(rendered) - 1, 0)]

    # -- equality -------------------------------------------------------

    def _identity(self) -> str:
        """Return the normalised POSIX rendering used for equality."""
        kept, pending_up = segs.collapse(self.segments)
        if self.rooted and pending_up:
            return self.to_posix_path()
        return _render_posix((segs.PARENT,) * pending_up + kept, rooted=self.rooted)

    def __eq__(self, other: object) -> bool:
        """Compare paths by their normalised POSIX rendering."""
        if self is other:
            return True
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        """Hash consistently with :meth:`__eq__`."""
        return hash(self._identity())

    def __str__(self) -> str:
        """Return the environmental rendering."""
        return self.to_environmental_path()


def parse_path(text: str | None) -> PathValue:
    """Explicitly convert *text* to a :class:`PathValue`."""
    return PathValue.parse(text)


__all__ = ["PathValue", "parse_path"]
