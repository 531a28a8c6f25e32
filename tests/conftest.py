"""Pytest fixtures shared by the phx_validation test-suite.

The sample objects mirror the kinds of values checks are run against: strings with a
known ordering and the results those checks produce.
"""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from phx_validation import FailureResult, ValidationResult

# ---------------------------------------------------------------------------
# 1. Sample values
# ---------------------------------------------------------------------------

# Ordered so that LESS < MIN < MIDDLE < MAX < MORE.
COMPARABLE = SimpleNamespace(LESS="A", MIN="B", MIDDLE="M", MAX="Y", MORE="Z")


@pytest.fixture()
def comparable() -> SimpleNamespace:  # noqa: D401
    """Return ordered string samples around a [MIN, MAX] range."""
    return COMPARABLE


# ---------------------------------------------------------------------------
# 2. Assertion helper
# ---------------------------------------------------------------------------


def assert_result(result: ValidationResult, expect_success: bool) -> None:
    """Assert the variant of *result*, showing the cause of unexpected failures."""

    assert isinstance(result, ValidationResult)
    if expect_success and isinstance(result, FailureResult):
        pytest.fail(f"unexpected failure: {result.message}")
    assert result.is_success is expect_success


@pytest.fixture()
def verify():  # noqa: D401
    """Expose :func:`assert_result` to test modules."""
    return assert_result


# ---------------------------------------------------------------------------
# 3. Global, reusable fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def recorded_failures(monkeypatch):  # noqa: D401
    """Capture calls to the requirement failure counter instead of exporting them."""

    calls: list[tuple[int, dict]] = []

    class _Counter:  # pylint: disable=too-few-public-methods
        def add(self, amount, attributes=None):
            calls.append((amount, dict(attributes or {})))

    monkeypatch.setattr("phx_validation.require.requirement_failure_total", _Counter())
    return calls
