# tests/conftest.py
"""Global PyTest fixtures for the test-suite.

Task tests run real event-loop timers, so every test is bounded by a
SIGALRM timeout: a Task that never settles fails its test instead of
hanging the session.
"""

from __future__ import annotations

import signal
from types import FrameType
from typing import Callable, Generator

import pytest

from functorkit import RecordingTracer, TracingSettings

DEFAULT_TEST_TIMEOUT_SECONDS = 10.0


def _build_timeout_handler(
    timeout_seconds: float,
) -> Callable[[int, FrameType | None], None]:
    """Return a SIGALRM handler that fails the running test."""

    def _handle_timeout(signum: int, frame: FrameType | None) -> None:
        pytest.fail(
            f"Test did not finish within {timeout_seconds:g}s",
            pytrace=True,
        )

    return _handle_timeout


def _resolve_timeout_seconds(request: pytest.FixtureRequest) -> float:
    """Seconds allowed for this test; `@pytest.mark.timeout(n)` overrides."""
    marker = request.node.get_closest_marker("timeout")
    if marker is None:
        return DEFAULT_TEST_TIMEOUT_SECONDS

    raw_value = marker.kwargs.get("seconds", marker.args[0] if marker.args else None)
    if raw_value is None:
        pytest.fail("timeout marker needs a number of seconds", pytrace=True)

    seconds = float(raw_value)
    if seconds <= 0:
        pytest.fail(f"timeout marker must be positive, got {seconds}", pytrace=True)

    return seconds


@pytest.fixture(autouse=True)
def per_test_timeout(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Bound each test so a Task that never settles cannot hang the run."""
    if not hasattr(signal, "SIGALRM") or not hasattr(signal, "setitimer"):
        yield
        return

    timeout_seconds = _resolve_timeout_seconds(request)
    handler = _build_timeout_handler(timeout_seconds)
    previous_handler = signal.getsignal(signal.SIGALRM)
    signal.signal(signal.SIGALRM, handler)
    signal.setitimer(signal.ITIMER_REAL, timeout_seconds)
    try:
        yield
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0.0)
        signal.signal(signal.SIGALRM, previous_handler)


@pytest.fixture
def tracer() -> RecordingTracer:
    """Fresh in-memory tracer for each test."""
    return RecordingTracer(TracingSettings(logger_name="functorkit.tests"))
