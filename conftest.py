"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from portable_path.platform import PLATFORM_OVERRIDE_ENV


@pytest.fixture(autouse=True)
def reset_platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure no platform override leaks into or out of a test."""
    monkeypatch.delenv(PLATFORM_OVERRIDE_ENV, raising=False)
    yield
