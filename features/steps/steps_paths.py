"""Step definitions for path value behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

from portable_path import InvalidPathOperationError, PathValue


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    path: PathValue
    result: PathValue | None
    error: InvalidPathOperationError | None


def _apply(context: BehaveContext, operation: t.Callable[[], PathValue]) -> None:
    """Record the result of *operation*, or the error it raised."""
    context.result = None
    context.error = None
    try:
        context.result = operation()
    except InvalidPathOperationError as exc:
        context.error = exc


def _outcome(context: BehaveContext) -> PathValue:
    assert context.error is None, f"operation failed: {context.error}"
    assert context.result is not None
    return context.result


@given('the path "{text}"')
def step_given_path(context: BehaveContext, text: str) -> None:
    """Parse *text* as the subject path."""
    context.path = PathValue.parse(text)
    context.result = None
    context.error = None


@when("the path is normalised")
def step_normalise(context: BehaveContext) -> None:
    """Normalise the subject path."""
    _apply(context, context.path.normalise)


@when('I append "{text}"')
def step_append(context: BehaveContext, text: str) -> None:
    """Append *text* without navigation semantics."""
    _apply(context, lambda: context.path.append(PathValue.parse(text)))


@when('I navigate to "{text}"')
def step_navigate(context: BehaveContext, text: str) -> None:
    """Navigate from the subject path by *text*."""
    _apply(context, lambda: context.path.navigate(PathValue.parse(text)))


@when('I take the path relative to "{text}"')
def step_relative(context: BehaveContext, text: str) -> None:
    """Compute the subject path relative to *text*."""
    _apply(context, lambda: context.path.relative_to(PathValue.parse(text)))


@when('I unroot the path from "{text}"')
def step_unroot(context: BehaveContext, text: str) -> None:
    """Strip the root *text* from the subject path."""
    _apply(context, lambda: context.path.unroot(PathValue.parse(text)))


@then('the POSIX rendering is "{expected}"')
def step_check_posix(context: BehaveContext, expected: str) -> None:
    """Compare the POSIX rendering of the outcome."""
    assert _outcome(context).to_posix_path() == expected


@then('the Windows rendering is "{expected}"')
def step_check_windows(context: BehaveContext, expected: str) -> None:
    """Compare the Windows rendering of the outcome."""
    assert _outcome(context).to_windows_path() == expected


@then('the extension is "{expected}"')
def step_check_extension(context: BehaveContext, expected: str) -> None:
    """Compare the extension of the outcome."""
    assert _outcome(context).extension(posix=True) == expected


@then('the file name is "{expected}"')
def step_check_file_name(context: BehaveContext, expected: str) -> None:
    """Compare the file name of the outcome."""
    assert _outcome(context).file_name_with_extension(posix=True) == expected


@then('the operation fails with "{error_name}"')
def step_check_failure(context: BehaveContext, error_name: str) -> None:
    """Ensure the last operation raised *error_name*."""
    assert context.error is not None, "operation unexpectedly succeeded"
    assert type(context.error).__name__ == error_name
