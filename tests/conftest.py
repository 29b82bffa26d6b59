# tests/conftest.py
"""Global PyTest fixtures for the test-suite.

Every test runs under a wall-clock guard: effect pipelines that never settle
(a forgotten ``drain()``, a gate that is never opened) fail the test instead
of hanging the session.
"""

from __future__ import annotations

import signal
from types import FrameType
from typing import AsyncGenerator, Callable, Generator

import pytest
import pytest_asyncio

from flowredux import AppState, AppStore, StoreConfig, create_app_store

from tests.helpers import make_fast_config

DEFAULT_TEST_TIMEOUT_SECONDS = 10.0


def _build_timeout_handler(
    timeout_seconds: float,
) -> Callable[[int, FrameType | None], None]:
    """Create SIGALRM handler that fails the test when timeout is reached."""

    def _handle_timeout(signum: int, frame: FrameType | None) -> None:
        pytest.fail(
            f"Test exceeded {timeout_seconds:.0f}s timeout (includes setup/teardown)",
            pytrace=True,
        )

    return _handle_timeout


def _resolve_timeout_seconds(request: pytest.FixtureRequest) -> float:
    """Return timeout for current test (marker override allowed)."""
    marker = request.node.get_closest_marker("timeout")
    if marker is None:
        return DEFAULT_TEST_TIMEOUT_SECONDS

    raw_value = marker.kwargs.get("seconds", marker.args[0] if marker.args else None)
    if raw_value is None:
        pytest.fail("timeout marker requires seconds argument", pytrace=True)

    seconds = float(raw_value)
    if seconds <= 0:
        pytest.fail("timeout marker must be positive seconds", pytrace=True)

    return seconds


@pytest.fixture(autouse=True)
def per_test_timeout(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Fail any test that runs longer than the default timeout."""
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
def fast_config() -> StoreConfig:
    """Application config with fetch latencies in the tens of milliseconds."""
    return make_fast_config()


@pytest.fixture
def initial_state() -> AppState:
    return AppState()


@pytest_asyncio.fixture
async def app_store(fast_config: StoreConfig) -> AsyncGenerator[AppStore, None]:
    """
    AppStore with the default side effects, bound to the test's event loop.

    In-flight effects are cancelled on teardown.

    Usage:
        @pytest.mark.asyncio
        async def test_something(app_store: AppStore) -> None:
            app_store.dispatch(FetchData1())
            await app_store.drain()
    """
    async with await create_app_store(fast_config) as app:
        yield app
