# tests/helpers/__init__.py
"""Shared test utilities for the flowredux test suite.

Usage:
    >>> from tests.helpers import expect_success, make_effect_store
    >>> from tests.helpers import PIPELINE_TIMEOUT
    >>>
    >>> store, middleware = make_effect_store(make_registration(RecordingSideEffect()))
    >>> store.dispatch(Increment())
    >>> await asyncio.wait_for(middleware.drain(), PIPELINE_TIMEOUT)
"""

from __future__ import annotations

from tests.helpers.constants import (
    FAST_FETCH1_LATENCY,
    FAST_FETCH2_LATENCY,
    FAST_PROFILE_LATENCY,
    PIPELINE_TIMEOUT,
)
from tests.helpers.factories import (
    make_effect_store,
    make_fast_config,
    make_registration,
    replay,
)
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "T",
    "E",
    # Factories
    "make_fast_config",
    "make_registration",
    "make_effect_store",
    "replay",
    # Timing constants
    "FAST_FETCH1_LATENCY",
    "FAST_FETCH2_LATENCY",
    "FAST_PROFILE_LATENCY",
    "PIPELINE_TIMEOUT",
]
