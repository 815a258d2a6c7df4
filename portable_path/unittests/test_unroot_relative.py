"""Unit tests for unroot and relative_to."""

from __future__ import annotations

import pytest

from portable_path import (
    InvalidPathOperationError,
    NotASubpathError,
    PathValue,
    RootLongerThanPathError,
)


def _p(text: str) -> PathValue:
    return PathValue.parse(text)


class TestUnroot:
    """Tests for PathValue.unroot()."""

    def test_strips_common_root(self) -> None:
        """The remaining suffix is returned as a relative path."""
        result = _p("/srv/app/static/site.css").unroot(_p("/srv/app"))
        assert result.segments == ("static", "site.css")
        assert not result.rooted

    def test_identical_paths_leave_nothing(self) -> None:
        """Unrooting a path from itself gives an empty relative path."""
        assert _p("a/b").unroot(_p("a/b")).segments == ()

    def test_root_longer_than_path(self) -> None:
        """A root with extra segments is rejected."""
        path, root = _p("a/b"), _p("a/b/c")
        with pytest.raises(RootLongerThanPathError) as excinfo:
            path.unroot(root)
        assert excinfo.value.path is path
        assert excinfo.value.root is root

    def test_not_a_subpath(self) -> None:
        """A root that diverges from the path is rejected."""
        with pytest.raises(NotASubpathError):
            _p("a/b").unroot(_p("x/y"))

    def test_comparison_is_case_sensitive(self) -> None:
        """Segments must match exactly."""
        with pytest.raises(NotASubpathError):
            _p("/Srv/app").unroot(_p("/srv"))

    def test_divergence_is_reported_before_length(self) -> None:
        """Segments are checked in order, so an early mismatch wins."""
        with pytest.raises(NotASubpathError):
            _p("a/b").unroot(_p("x/y/z"))

    def test_errors_are_value_errors(self) -> None:
        """Both failures belong to the invalid-operation family."""
        for root in ("a/b/c", "x"):
            with pytest.raises(InvalidPathOperationError):
                _p("a/b").unroot(_p(root))
            with pytest.raises(ValueError):  # noqa: PT011 - hierarchy check
                _p("a/b").unroot(_p(root))


class TestRelativeTo:
    """Tests for PathValue.relative_to()."""

    def test_bare_names_are_returned_unchanged(self) -> None:
        """Two single-segment paths have no directory context."""
        target = _p("file.txt")
        assert target.relative_to(_p("other.txt")) is target

    def test_source_is_prefix_of_target(self) -> None:
        """A pure descent needs no parent references."""
        result = _p("/a/b/c/d").relative_to(_p("/a/b"))
        assert result.to_posix_path() == "c/d"
        assert not result.rooted

    def test_last_source_segment_is_treated_as_file(self) -> None:
        """``y`` is a leaf, so only ``x`` is climbed out of."""
        result = _p("/a/b/c").relative_to(_p("/a/x/y"))
        assert result.to_posix_path() == "../b/c"

    def test_directory_source_needs_a_leaf(self) -> None:
        """Callers treating ``y`` as a directory pass a file inside it."""
        result = _p("/a/b/c").relative_to(_p("/a/x/y/index.html"))
        assert result.to_posix_path() == "../../b/c"

    def test_sibling_file(self) -> None:
        """A sibling in the same directory is reached directly."""
        result = _p("/site/about.html").relative_to(_p("/site/index.html"))
        assert result.to_posix_path() == "about.html"

    def test_no_common_base_with_rooted_target(self) -> None:
        """Only the absolute target itself can reach it."""
        target = _p("/etc/hosts")
        assert target.relative_to(_p("/usr/bin")) is target

    def test_no_common_base_with_relative_target(self) -> None:
        """A relative target is navigated to from the source."""
        result = _p("lib/x").relative_to(_p("/usr/bin"))
        assert result.to_posix_path() == "/usr/bin/lib/x"

    def test_ascending_to_ancestor(self) -> None:
        """A target above the source yields only parent references."""
        result = _p("/a").relative_to(_p("/a/b/c"))
        assert result.to_posix_path() == ".."

    def test_result_navigates_back_to_target(self) -> None:
        """Navigating from the source directory by the result reaches the target."""
        target = _p("/proj/src/pkg/mod.py")
        source = _p("/proj/docs/guide/page.md")
        relative = target.relative_to(source)
        source_directory = source.navigate(_p(".."))
        assert source_directory.navigate(relative) == target
